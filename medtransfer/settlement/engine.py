from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from medtransfer.directory.lookup import get_by_id
from medtransfer.directory.models import Party
from medtransfer.transfers.schema import Transfer, TransferStatus, TripType

from .rules import BillingRules, default_rules
from .schema import PartyKind, SettlementReport, SettlementRow, SettlementUnavailable

log = logging.getLogger(__name__)

DRIVER_UNAVAILABLE = "La liquidación de choferes está en desarrollo."

DateLike = Union[date, str, None]


def _as_date(value: DateLike) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # time of day is dropped: bounds compare as calendar days
    try:
        return datetime.fromisoformat(str(value)).date()
    except ValueError:
        return None


def _display(address: str, city: str) -> str:
    return ", ".join(p for p in (address, city) if p)


def _amounts(t: Transfer, party: Party, rules: BillingRules) -> Tuple[float, float, float]:
    """(urban, interurban, waiting) for the whole transfer."""
    km = t.km or 0.0
    is_urban = km <= rules.urban_km_threshold
    urban = party.fixed_rate if is_urban else 0.0
    interurban = 0.0 if is_urban else km * party.cost_per_km
    waiting = party.waiting_hour_cost * rules.waiting_billable_hours if t.waiting else 0.0
    return urban, interurban, waiting


def _rows_for(t: Transfer, party: Party, rules: BillingRules) -> List[SettlementRow]:
    urban, interurban, waiting = _amounts(t, party, rules)
    origin = _display(t.origin_address, t.origin_city)
    destination = _display(t.destination_address, t.destination_city)
    common = dict(
        date=t.date,
        transfer_number=t.transfer_number,
        claim_number=t.claim_number,
        patient_name=t.patient_name,
        km=t.km,
    )

    if t.trip_type != TripType.ROUND_TRIP:
        return [
            SettlementRow(
                **common,
                origin=origin,
                destination=destination,
                urban_amount=urban,
                interurban_amount=interurban,
                waiting_amount=waiting,
                total_amount=urban + interurban + waiting,
            )
        ]

    # round trip: both legs carry half the distance charge, waiting goes on the outbound leg only
    half_urban, half_interurban = urban / 2, interurban / 2
    return [
        SettlementRow(
            **common,
            origin=origin,
            destination=destination,
            urban_amount=half_urban,
            interurban_amount=half_interurban,
            waiting_amount=waiting,
            total_amount=half_urban + half_interurban + waiting,
            trip_part="A",
        ),
        SettlementRow(
            **common,
            origin=destination,
            destination=origin,
            urban_amount=half_urban,
            interurban_amount=half_interurban,
            waiting_amount=0.0,
            total_amount=half_urban + half_interurban,
            trip_part="B",
        ),
    ]


def _in_range(t: Transfer, start: date, end: date) -> bool:
    day = _as_date(t.date)
    if day is None:
        log.warning("settlement_bad_transfer_date", extra={"transfer_id": t.id, "date": t.date})
        return False
    return start <= day <= end


def settle_company(
    company: Party,
    start: date,
    end: date,
    transfers: Iterable[Transfer],
    rules: BillingRules | None = None,
) -> SettlementReport:
    """Completed transfers of `company` dated within [start, end], as billable rows."""
    rules = rules or default_rules()
    rows: List[SettlementRow] = []
    for t in transfers:
        if t.company_id != company.id or t.status != TransferStatus.COMPLETED:
            continue
        if not _in_range(t, start, end):
            continue
        rows.extend(_rows_for(t, company, rules))

    rows.sort(key=lambda r: _as_date(r.date))
    total = sum(r.total_amount for r in rows)
    log.info(
        "company_settlement",
        extra={"company_id": company.id, "row_count": len(rows), "total": total},
    )
    return SettlementReport(
        kind=PartyKind.COMPANY,
        party_id=company.id,
        party_name=company.name,
        start=start.isoformat(),
        end=end.isoformat(),
        rows=rows,
        total=total,
    )


def settle(
    kind: PartyKind | str,
    party_id: Optional[str],
    start: DateLike,
    end: DateLike,
    transfers: Iterable[Transfer],
    directory: Sequence[Party],
    rules: BillingRules | None = None,
) -> SettlementReport | SettlementUnavailable:
    """
    Build the settlement for one billing party over an inclusive date range.

    Driver settlements are not implemented and always come back as
    SettlementUnavailable. With no party selected, no date bounds or an
    unknown company id the report is simply empty.

    Args:
        kind: "company" or "driver"
        party_id: Id of the party in `directory`
        start: First day (date or ISO string; time of day is ignored), inclusive
        end: Last day (date or ISO string; time of day is ignored), inclusive
        transfers: Full transfer collection; filtering happens here
        directory: Parties of the requested kind
        rules: Billing thresholds (defaults from settings)

    Returns:
        SettlementReport with rows sorted by date, or SettlementUnavailable
    """
    kind = PartyKind(kind)
    if kind is PartyKind.DRIVER:
        return SettlementUnavailable(kind=kind, message=DRIVER_UNAVAILABLE)

    start_day, end_day = _as_date(start), _as_date(end)
    if not party_id or start_day is None or end_day is None:
        return SettlementReport(kind=kind, party_id=party_id or None)

    company = get_by_id(directory, party_id)
    if company is None:
        log.info("settlement_party_not_found", extra={"party_id": party_id})
        return SettlementReport(kind=kind, party_id=party_id)

    return settle_company(company, start_day, end_day, transfers, rules)


__all__ = ["settle", "settle_company", "DRIVER_UNAVAILABLE"]
