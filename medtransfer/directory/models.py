from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from medtransfer.common.ids import new_company_id, new_driver_id


def _coerce_rate(value: Any) -> Any:
    # form inputs: blank or non-numeric rates become 0
    if value is None:
        return 0.0
    if isinstance(value, str):
        try:
            return float(value.strip().replace(",", "."))
        except ValueError:
            return 0.0
    return value


class Party(BaseModel):
    """Anyone a settlement can be issued to. Rates are read live, never snapshotted."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    cost_per_km: float = Field(ge=0.0, default=0.0)
    fixed_rate: float = Field(ge=0.0, default=0.0)  # flat amount per urban trip
    waiting_hour_cost: float = Field(ge=0.0, default=0.0)

    @field_validator("cost_per_km", "fixed_rate", "waiting_hour_cost", mode="before")
    @classmethod
    def _rates(cls, value: Any) -> Any:
        return _coerce_rate(value)


class Driver(Party):
    id: str = Field(default_factory=new_driver_id, min_length=1)
    dni: str = ""
    phone: str = ""
    email: str = ""
    license_expiry: str = ""  # YYYY-MM-DD or empty


class Company(Party):
    id: str = Field(default_factory=new_company_id, min_length=1)
    cuit: str = ""
    email: str = ""
    contact: str = ""


__all__ = ["Party", "Driver", "Company"]
