from __future__ import annotations

from uuid import uuid4

TRANSFER_PREFIX = "trans"
DRIVER_PREFIX = "driver"
COMPANY_PREFIX = "comp"


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


def new_transfer_id() -> str:
    return new_id(TRANSFER_PREFIX)


def new_driver_id() -> str:
    return new_id(DRIVER_PREFIX)


def new_company_id() -> str:
    return new_id(COMPANY_PREFIX)


__all__ = ["new_id", "new_transfer_id", "new_driver_id", "new_company_id"]
