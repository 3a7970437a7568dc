"""
Common utilities and shared components
"""
from .clock import today
from .ids import new_id

__all__ = ["today", "new_id"]
