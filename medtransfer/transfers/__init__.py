"""Transfer records plus CSV bulk import and export."""

from .schema import ImportResult, InvalidRow, Transfer, TransferStatus, TripType
from .importer import CsvReadError, import_transfers, read_csv_file
from .exporter import CsvExportError, render_transfers_csv

__all__ = [
    "Transfer",
    "TransferStatus",
    "TripType",
    "InvalidRow",
    "ImportResult",
    "import_transfers",
    "read_csv_file",
    "CsvReadError",
    "render_transfers_csv",
    "CsvExportError",
]
