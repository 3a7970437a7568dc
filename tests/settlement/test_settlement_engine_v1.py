import datetime as dt

import pytest

pytestmark = [pytest.mark.gate_settle]

from medtransfer.settlement.engine import DRIVER_UNAVAILABLE, settle
from medtransfer.settlement.rules import BillingRules
from medtransfer.settlement.schema import PartyKind, SettlementReport, SettlementUnavailable
from medtransfer.transfers.schema import TransferStatus, TripType

START, END = "2025-03-01", "2025-03-31"


def _company(kind_directory, transfers, party="c1", start=START, end=END, **kw):
    return settle(PartyKind.COMPANY, party, start, end, transfers, kind_directory, **kw)


def test_round_trip_example_waiting_on_leg_a(companies, make_transfer):
    t = make_transfer(km=30.0, trip_type=TripType.ROUND_TRIP, waiting=True)
    rep = _company(companies, [t])

    assert isinstance(rep, SettlementReport)
    a, b = rep.rows
    assert (a.trip_part, b.trip_part) == ("A", "B")
    assert a.urban_amount == 500.0 and b.urban_amount == 500.0
    assert a.interurban_amount == 0.0 and b.interurban_amount == 0.0
    assert a.waiting_amount == 300.0 and b.waiting_amount == 0.0
    assert a.total_amount == 800.0
    assert b.total_amount == 500.0
    assert rep.total == 1300.0


def test_round_trip_legs_swap_direction(companies, make_transfer):
    t = make_transfer(origin_address="Casa", origin_city="Quilmes", destination_address="Hospital", destination_city="")
    a, b = _company(companies, [t]).rows
    assert (a.origin, a.destination) == ("Casa, Quilmes", "Hospital")
    assert (b.origin, b.destination) == ("Hospital", "Casa, Quilmes")


def test_one_way_interurban(companies, make_transfer):
    t = make_transfer(company_id="c2", km=80.0, trip_type=TripType.ONE_WAY)
    rep = _company(companies, [t], party="c2")
    [row] = rep.rows
    assert row.interurban_amount == 800.0
    assert row.urban_amount == 0.0
    assert row.trip_part is None
    assert row.total_amount == 800.0 and rep.total == 800.0


def test_multi_one_way_bills_full_amounts_with_waiting(companies, make_transfer):
    t = make_transfer(km=10.0, trip_type=TripType.MULTI_ONE_WAY, waiting=True)
    [row] = _company(companies, [t]).rows
    assert (row.urban_amount, row.waiting_amount, row.total_amount) == (1000.0, 300.0, 1300.0)
    assert row.misc_expenses == 0.0


@pytest.mark.parametrize("km,urban,interurban", [(50.0, 1000.0, 0.0), (50.5, 0.0, 252.5), (0.0, 1000.0, 0.0)])
def test_urban_threshold_is_inclusive(km, urban, interurban, companies, make_transfer):
    t = make_transfer(km=km, trip_type=TripType.ONE_WAY)
    [row] = _company(companies, [t]).rows
    assert row.urban_amount == urban
    assert row.interurban_amount == interurban


def test_filters_company_status_and_inclusive_range(companies, make_transfer):
    transfers = [
        make_transfer(patient_name="first-day", date="2025-03-01", trip_type=TripType.ONE_WAY),
        make_transfer(patient_name="last-day", date="2025-03-31", trip_type=TripType.ONE_WAY),
        make_transfer(patient_name="before", date="2025-02-28", trip_type=TripType.ONE_WAY),
        make_transfer(patient_name="after", date="2025-04-01", trip_type=TripType.ONE_WAY),
        make_transfer(patient_name="voided", status=TransferStatus.VOIDED, trip_type=TripType.ONE_WAY),
        make_transfer(patient_name="other", company_id="c2", trip_type=TripType.ONE_WAY),
    ]
    rep = _company(companies, transfers)
    assert [r.patient_name for r in rep.rows] == ["first-day", "last-day"]


def test_rows_sorted_by_date_and_total_is_sum(companies, make_transfer):
    transfers = [
        make_transfer(patient_name="c", date="2025-03-20", km=70.3, waiting=True),
        make_transfer(patient_name="a", date="2025-03-02", km=12.0, trip_type=TripType.ONE_WAY),
        make_transfer(patient_name="b", date="2025-03-15", km=51.7, trip_type=TripType.MULTI_ONE_WAY),
    ]
    rep = _company(companies, transfers)
    assert [r.date for r in rep.rows] == sorted(r.date for r in rep.rows)
    assert [r.patient_name for r in rep.rows] == ["a", "b", "c", "c"]
    assert rep.total == sum(r.total_amount for r in rep.rows)
    for r in rep.rows:
        assert r.total_amount == pytest.approx(
            r.urban_amount + r.interurban_amount + r.waiting_amount + r.misc_expenses
        )


def test_date_objects_are_accepted(companies, make_transfer):
    t = make_transfer(date="2025-03-10")
    rep = _company(companies, [t], start=dt.date(2025, 3, 10), end=dt.date(2025, 3, 10))
    assert len(rep.rows) == 2


def test_transfer_with_impossible_calendar_date_is_skipped(companies, make_transfer):
    rep = _company(companies, [make_transfer(date="2025-02-30")])
    assert rep.rows == [] and rep.total == 0.0


@pytest.mark.parametrize("party,start,end", [("", START, END), ("c1", None, END), ("c1", START, ""), (None, None, None)])
def test_missing_selection_is_empty_report(party, start, end, companies, make_transfer):
    rep = settle("company", party, start, end, [make_transfer()], companies)
    assert isinstance(rep, SettlementReport)
    assert rep.rows == [] and rep.total == 0.0


def test_unknown_company_is_empty_report(companies, make_transfer):
    rep = _company(companies, [make_transfer()], party="c404")
    assert isinstance(rep, SettlementReport)
    assert rep.rows == []


@pytest.mark.parametrize("party", ["d1", "", None])
def test_driver_settlement_is_unavailable(party, drivers, make_transfer):
    rep = settle("driver", party, START, END, [make_transfer()], drivers)
    assert isinstance(rep, SettlementUnavailable)
    assert rep.kind == PartyKind.DRIVER
    assert rep.message == DRIVER_UNAVAILABLE


def test_custom_rules(companies, make_transfer):
    rules = BillingRules(urban_km_threshold=100.0, waiting_billable_hours=2.0)
    t = make_transfer(km=80.0, trip_type=TripType.ONE_WAY, waiting=True)
    [row] = _company(companies, [t], rules=rules).rows
    assert row.urban_amount == 1000.0
    assert row.interurban_amount == 0.0
    assert row.waiting_amount == 600.0


def test_rates_are_read_live(companies, make_transfer):
    t = make_transfer(km=30.0, trip_type=TripType.ONE_WAY)
    before = _company(companies, [t]).total
    repriced = [companies[0].model_copy(update={"fixed_rate": 1500.0}), companies[1]]
    after = _company(repriced, [t]).total
    assert (before, after) == (1000.0, 1500.0)


def test_report_header_fields(companies, make_transfer):
    rep = _company(companies, [make_transfer()])
    assert rep.party_name == "ACME"
    assert (rep.start, rep.end) == (START, END)


def test_bounds_with_time_of_day_compare_as_days(companies, make_transfer):
    t = make_transfer(date="2025-03-10", trip_type=TripType.ONE_WAY)
    rep = _company(companies, [t], start="2025-03-10T18:30", end="2025-03-10T06:00")
    assert [r.date for r in rep.rows] == ["2025-03-10"]
    rep = _company(companies, [t], start=dt.datetime(2025, 3, 10, 23, 0), end="2025-03-10")
    assert len(rep.rows) == 1
