"""Distance prefill for the transfer form; providers are supplied by the caller."""

from .lookup import DistanceProvider, MissingAddressError, parse_distance_reply, prefill_km

__all__ = ["DistanceProvider", "MissingAddressError", "parse_distance_reply", "prefill_km"]
