from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field

from medtransfer.common.ids import new_transfer_id

DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"


class TripType(str, Enum):
    ROUND_TRIP = "IDA Y VUELTA"
    ONE_WAY = "IDA"
    MULTI_ONE_WAY = "IDA MULTIPLE"


class TransferStatus(str, Enum):
    COMPLETED = "Realizado"
    VOIDED = "Anulado"


class Transfer(BaseModel):
    id: str = Field(default_factory=new_transfer_id)
    date: str = Field(pattern=DATE_PATTERN)  # YYYY-MM-DD, not checked against the calendar
    time: str = "00:00"
    patient_name: str = Field(min_length=1)
    patient_phone: str = ""
    driver_id: str = Field(min_length=1)
    company_id: str = Field(min_length=1)
    origin_address: str
    origin_city: str = ""
    destination_address: str
    destination_city: str = ""
    km: float = Field(ge=0.0, default=0.0)
    trip_type: TripType = TripType.ROUND_TRIP
    waiting: bool = False
    status: TransferStatus = TransferStatus.COMPLETED
    claim_number: str = ""
    art: str = ""
    transfer_number: str = ""
    internal_id: str = ""
    notes: str = ""


class InvalidRow(BaseModel):
    row: Dict[str, str] = {}
    error: str
    row_index: int  # 1-based source line, header = 1; 0 for whole-file errors


class ImportResult(BaseModel):
    valid: List[Transfer] = []
    invalid: List[InvalidRow] = []


__all__ = ["TripType", "TransferStatus", "Transfer", "InvalidRow", "ImportResult", "DATE_PATTERN"]
