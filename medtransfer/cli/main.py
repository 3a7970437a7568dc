"""
medtransfer/cli/main.py

CLI: medtransfer import|settle|summary --data <file> ...
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date

from medtransfer.config.settings import settings
from medtransfer.dashboard.summary import build_summary
from medtransfer.registry.datafile import DatasetError, load_dataset, save_dataset
from medtransfer.registry.store import InMemoryStore
from medtransfer.settlement.engine import settle
from medtransfer.settlement.rules import load_billing_rules
from medtransfer.settlement.schema import PartyKind, SettlementUnavailable
from medtransfer.transfers.importer import CsvReadError, import_transfers, read_csv_file

log = logging.getLogger(__name__)


def _emit(payload: dict) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _cmd_import(args: argparse.Namespace) -> int:
    data = load_dataset(args.data)
    text = read_csv_file(args.csv)
    result = import_transfers(text, data.drivers, data.companies)
    _emit(result.model_dump(mode="json"))

    if args.out and result.valid:
        store = InMemoryStore(data.transfers)
        store.save_many(result.valid)
        data.transfers = store.all()
        save_dataset(args.out, data)
        log.info("transfers_saved", extra={"path": args.out, "count": len(result.valid)})

    return 0 if not result.invalid else 2


def _cmd_settle(args: argparse.Namespace) -> int:
    data = load_dataset(args.data)
    kind = PartyKind(args.kind)
    directory = data.companies if kind is PartyKind.COMPANY else data.drivers
    rules = load_billing_rules(args.rules)
    report = settle(kind, args.party, args.start, args.end, data.transfers, directory, rules)
    _emit(report.model_dump(mode="json"))
    if isinstance(report, SettlementUnavailable):
        print(f"[ERROR] {report.message}", file=sys.stderr)
        return 2
    return 0


def _cmd_summary(args: argparse.Namespace) -> int:
    data = load_dataset(args.data)
    today = date.fromisoformat(args.today) if args.today else None
    summary = build_summary(data.transfers, data.drivers, data.companies, today=today)
    _emit(summary.model_dump(mode="json"))
    return 0


def cli(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="medtransfer", description="Medical transport dispatch back office")
    sub = parser.add_subparsers(dest="command", required=True)

    imp = sub.add_parser("import", help="Validate a bulk transfer CSV")
    imp.add_argument("--csv", required=True, help="Path to the CSV file")
    imp.add_argument("--data", required=True, help="YAML/JSON file with drivers, companies and transfers")
    imp.add_argument("--out", default=None, help="Write the data file with imported transfers appended")
    imp.set_defaults(func=_cmd_import)

    st = sub.add_parser("settle", help="Compute a settlement")
    st.add_argument("--kind", choices=[k.value for k in PartyKind], default=PartyKind.COMPANY.value)
    st.add_argument("--party", required=True, help="Company or driver id")
    st.add_argument("--start", required=True, help="First day, YYYY-MM-DD")
    st.add_argument("--end", required=True, help="Last day, YYYY-MM-DD")
    st.add_argument("--data", required=True, help="YAML/JSON data file")
    st.add_argument("--rules", default=None, help="Billing rules YAML")
    st.set_defaults(func=_cmd_settle)

    sm = sub.add_parser("summary", help="Dashboard figures")
    sm.add_argument("--data", required=True, help="YAML/JSON data file")
    sm.add_argument("--today", default=None, help="Reference day, YYYY-MM-DD")
    sm.set_defaults(func=_cmd_summary)

    args = parser.parse_args(argv)

    try:
        logging.basicConfig(stream=sys.stderr)
        logging.getLogger().setLevel(settings.LOG_LEVEL.upper())
        return args.func(args)
    except (DatasetError, CsvReadError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(cli())
