"""Billing parties: drivers and client companies."""

from .models import Company, Driver, Party
from .lookup import get_by_id, match_by_name

__all__ = ["Company", "Driver", "Party", "get_by_id", "match_by_name"]
