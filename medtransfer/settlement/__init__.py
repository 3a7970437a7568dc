"""Billing settlements for client companies (driver settlements pending)."""

from .engine import settle, settle_company
from .rules import BillingRules, load_billing_rules
from .schema import PartyKind, SettlementReport, SettlementRow, SettlementUnavailable

__all__ = [
    "settle",
    "settle_company",
    "BillingRules",
    "load_billing_rules",
    "PartyKind",
    "SettlementReport",
    "SettlementRow",
    "SettlementUnavailable",
]
