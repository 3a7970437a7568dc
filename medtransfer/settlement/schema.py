from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel


class PartyKind(str, Enum):
    COMPANY = "company"
    DRIVER = "driver"


class SettlementRow(BaseModel):
    date: str
    transfer_number: str = ""
    claim_number: str = ""
    patient_name: str
    origin: str
    destination: str
    km: float
    urban_amount: float = 0.0
    interurban_amount: float = 0.0
    waiting_amount: float = 0.0
    misc_expenses: float = 0.0
    total_amount: float
    trip_part: Optional[Literal["A", "B"]] = None  # leg of a split round trip


class SettlementReport(BaseModel):
    kind: PartyKind = PartyKind.COMPANY
    party_id: Optional[str] = None
    party_name: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    rows: List[SettlementRow] = []
    total: float = 0.0


class SettlementUnavailable(BaseModel):
    """Returned instead of a report for settlement kinds that are not implemented."""

    kind: PartyKind
    message: str


__all__ = ["PartyKind", "SettlementRow", "SettlementReport", "SettlementUnavailable"]
