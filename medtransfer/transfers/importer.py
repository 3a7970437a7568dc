from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from medtransfer.config.settings import settings
from medtransfer.directory.lookup import match_by_name
from medtransfer.directory.models import Company, Driver, Party

from .columns import REQUIRED_COLUMNS, WAITING_YES, TransferCsvRow
from .schema import DATE_PATTERN, ImportResult, InvalidRow, Transfer, TransferStatus, TripType

log = logging.getLogger(__name__)

EMPTY_FILE_ERROR = "El archivo está vacío o no contiene datos."
MISSING_COLUMNS_ERROR = "Faltan columnas requeridas en el CSV: {columns}"
NOT_CSV_ERROR = "Por favor, suba un archivo en formato CSV."

_LINE_BREAK = re.compile(r"\r\n|\n")
_DATE_RE = re.compile(DATE_PATTERN)
_TRIP_TYPES = {t.value.lower(): t for t in TripType}


class CsvReadError(Exception):
    """Raised when an import file cannot be read or decoded."""


def read_csv_file(path: str | Path, encoding: str | None = None) -> str:
    p = Path(path)
    if p.suffix.lower() != ".csv":
        raise CsvReadError(NOT_CSV_ERROR)
    try:
        return p.read_text(encoding=encoding or settings.CSV_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise CsvReadError(f"Error al leer el archivo: {exc}") from exc


def _split_lines(text: str) -> List[str]:
    return [line for line in _LINE_BREAK.split(text) if line.strip()]


def _parse_header(line: str) -> List[str]:
    return [h.strip().lower() for h in line.split(",")]


def _row_mapping(headers: Sequence[str], line: str) -> Dict[str, str]:
    cells = line.split(",")
    return {h: (cells[i].strip() if i < len(cells) else "") for i, h in enumerate(headers)}


def _parse_km(raw: str) -> Optional[float]:
    if not raw:
        return 0.0
    try:
        km = float(raw)
    except ValueError:
        return None
    if math.isnan(km) or math.isinf(km) or km < 0:
        return None
    return km


def _parse_trip_type(raw: str) -> Optional[TripType]:
    if not raw:
        return TripType.ROUND_TRIP
    return _TRIP_TYPES.get(" ".join(raw.split()).lower())


def _resolve(parties: Sequence[Party], name: str, label: str, missing: str) -> Tuple[Optional[Party], Optional[str]]:
    matches = match_by_name(parties, name)
    if not matches:
        return None, f'{label} "{name}" {missing}.'
    if len(matches) > 1:
        return None, f'{label} "{name}" coincide con más de un registro.'
    return matches[0], None


def _validate_row(
    row: TransferCsvRow,
    drivers: Sequence[Driver],
    companies: Sequence[Company],
    default_time: str,
) -> Tuple[Optional[Transfer], List[str]]:
    errors: List[str] = []

    if not _DATE_RE.fullmatch(row.date):
        errors.append("Fecha inválida (formato esperado YYYY-MM-DD).")
    if not row.patient_name:
        errors.append("Falta nombre del paciente.")

    driver, err = _resolve(drivers, row.driver_name, "Chofer", "no encontrado")
    if err:
        errors.append(err)
    company, err = _resolve(companies, row.company_name, "Empresa", "no encontrada")
    if err:
        errors.append(err)

    km = _parse_km(row.km)
    if km is None:
        errors.append(f'KM inválido "{row.km}".')
    trip_type = _parse_trip_type(row.trip_type)
    if trip_type is None:
        errors.append(f'Tipo de viaje inválido "{row.trip_type}".')

    if errors:
        return None, errors

    transfer = Transfer(
        date=row.date,
        time=row.time or default_time,
        patient_name=row.patient_name,
        patient_phone=row.patient_phone,
        driver_id=driver.id,
        company_id=company.id,
        origin_address=row.origin_address,
        origin_city=row.origin_city,
        destination_address=row.destination_address,
        destination_city=row.destination_city,
        km=km,
        trip_type=trip_type,
        waiting=row.waiting.lower() == WAITING_YES,
        status=TransferStatus.VOIDED if row.status == TransferStatus.VOIDED.value else TransferStatus.COMPLETED,
        claim_number=row.claim_number,
        art=row.art,
        transfer_number=row.transfer_number,
        internal_id=row.internal_id,
        notes=row.notes,
    )
    return transfer, errors


def import_transfers(
    text: str,
    drivers: Sequence[Driver],
    companies: Sequence[Company],
    default_time: str | None = None,
) -> ImportResult:
    """
    Parse comma-separated transfer rows into valid Transfers and per-row diagnostics.

    Whole-file problems (no data, missing required columns) yield a single
    InvalidRow with row_index 0 and stop there. Otherwise each data line is
    validated on its own and every violated rule is reported in one message.

    Args:
        text: Raw file content; "\\r\\n" and "\\n" line breaks, blank lines ignored
        drivers: Driver directory used for name resolution
        companies: Company directory used for name resolution
        default_time: Time for rows without "hora" (default from settings)

    Returns:
        ImportResult with valid and invalid rows in source order
    """
    result = ImportResult()
    default_time = default_time or settings.DEFAULT_TRANSFER_TIME

    lines = _split_lines(text)
    if len(lines) < 2:
        result.invalid.append(InvalidRow(error=EMPTY_FILE_ERROR, row_index=0))
        log.info("transfers_import_empty", extra={"lines": len(lines)})
        return result

    headers = _parse_header(lines[0])
    missing = [c for c in REQUIRED_COLUMNS if c not in headers]
    if missing:
        result.invalid.append(
            InvalidRow(error=MISSING_COLUMNS_ERROR.format(columns=", ".join(missing)), row_index=0)
        )
        log.info("transfers_import_missing_columns", extra={"missing": missing})
        return result

    for i, line in enumerate(lines[1:], start=2):
        mapping = _row_mapping(headers, line)
        transfer, errors = _validate_row(TransferCsvRow.model_validate(mapping), drivers, companies, default_time)
        if transfer is None:
            result.invalid.append(InvalidRow(row=mapping, error=" ".join(errors), row_index=i))
        else:
            result.valid.append(transfer)

    log.info(
        "transfers_import",
        extra={"rows": len(lines) - 1, "valid": len(result.valid), "invalid": len(result.invalid)},
    )
    return result


__all__ = ["import_transfers", "read_csv_file", "CsvReadError", "EMPTY_FILE_ERROR"]
