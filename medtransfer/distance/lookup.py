from __future__ import annotations

import logging
import math
from typing import Optional, Protocol

from medtransfer.transfers.schema import Transfer

log = logging.getLogger(__name__)


class DistanceProvider(Protocol):
    def __call__(self, origin: str, destination: str) -> Optional[float]:
        """Driving distance in km between two addresses, or None when unavailable."""
        ...


class MissingAddressError(ValueError):
    """Raised when origin or destination is incomplete."""


def parse_distance_reply(text: Optional[str]) -> Optional[float]:
    """
    Read a bare kilometre figure such as "58.7" or "58,7".

    Returns:
        The distance, or None when the reply is not a usable number
    """
    if not text:
        return None
    try:
        km = float(text.strip().replace(",", "."))
    except ValueError:
        return None
    if math.isnan(km) or math.isinf(km) or km < 0:
        return None
    return km


def prefill_km(transfer: Transfer, provider: DistanceProvider) -> Transfer:
    """
    Ask `provider` for the route distance and return the transfer with km filled in.

    The estimate is rounded to whole kilometres. When the provider has no
    answer or fails, the transfer comes back unchanged so km can be typed in.

    Raises:
        MissingAddressError: any of the four address fields is blank
    """
    parts = (transfer.origin_address, transfer.origin_city, transfer.destination_address, transfer.destination_city)
    if not all(p.strip() for p in parts):
        raise MissingAddressError("origin and destination address and city are required")

    origin = f"{transfer.origin_address}, {transfer.origin_city}"
    destination = f"{transfer.destination_address}, {transfer.destination_city}"
    try:
        km = provider(origin, destination)
    except Exception:
        log.exception("distance_lookup_failed", extra={"transfer_id": transfer.id})
        return transfer

    if km is None or math.isnan(km) or math.isinf(km) or km < 0:
        log.warning("distance_unavailable", extra={"transfer_id": transfer.id})
        return transfer
    return transfer.model_copy(update={"km": float(round(km))})


__all__ = ["DistanceProvider", "MissingAddressError", "parse_distance_reply", "prefill_km"]
