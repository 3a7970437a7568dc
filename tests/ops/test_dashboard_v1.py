import datetime as dt

import pytest

pytestmark = [pytest.mark.gate_ops]

from medtransfer.dashboard.summary import build_summary
from medtransfer.transfers.schema import TransferStatus


def test_summary_counts(drivers, companies, make_transfer):
    transfers = [
        make_transfer(date="2025-03-10"),
        make_transfer(date="2025-03-10", status=TransferStatus.VOIDED),
        make_transfer(date="2025-03-01"),
        make_transfer(date="2025-03-25"),
        make_transfer(date="2025-02-28"),
    ]
    s = build_summary(transfers, drivers, companies, today=dt.date(2025, 3, 10))
    assert s.day == "2025-03-10"
    assert s.transfers_today == 1
    assert s.transfers_this_month == 3
    assert (s.driver_count, s.company_count) == (2, 2)


def test_recent_sorted_by_date_then_time(drivers, companies, make_transfer):
    transfers = [
        make_transfer(patient_name="p1", date="2025-03-01", time="09:00"),
        make_transfer(patient_name="p2", date="2025-03-05", time="08:00"),
        make_transfer(patient_name="p3", date="2025-03-05", time="18:30"),
        make_transfer(patient_name="p4", date="2025-02-01"),
        make_transfer(patient_name="p5", date="2025-03-04"),
        make_transfer(patient_name="p6", date="2025-01-01"),
    ]
    s = build_summary(transfers, drivers, companies, today=dt.date(2025, 3, 10))
    assert [t.patient_name for t in s.recent] == ["p3", "p2", "p5", "p1", "p4"]

    s2 = build_summary(transfers, drivers, companies, today=dt.date(2025, 3, 10), recent_limit=2)
    assert [t.patient_name for t in s2.recent] == ["p3", "p2"]
