from __future__ import annotations

from typing import Iterable, List, Optional, TypeVar

from .models import Party

P = TypeVar("P", bound=Party)


def match_by_name(parties: Iterable[P], name: Optional[str]) -> List[P]:
    """All parties whose name equals `name`, ignoring case, in directory order."""
    if name is None:
        return []
    wanted = name.lower()
    return [p for p in parties if p.name.lower() == wanted]


def get_by_id(parties: Iterable[P], party_id: Optional[str]) -> Optional[P]:
    if not party_id:
        return None
    for party in parties:
        if party.id == party_id:
            return party
    return None


__all__ = ["match_by_name", "get_by_id"]
