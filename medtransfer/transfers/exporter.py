from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from medtransfer.directory.lookup import get_by_id
from medtransfer.directory.models import Company, Driver

from .columns import ALL_COLUMNS, WAITING_YES
from .schema import Transfer

log = logging.getLogger(__name__)

WAITING_NO = "no"


class CsvExportError(ValueError):
    """Raised when a transfer cannot be written in the import layout."""


def _format_km(km: float) -> str:
    return str(int(km)) if float(km).is_integer() else repr(float(km))


def _cell(value: str, column: str, transfer_id: str) -> str:
    # the import format has no quoting
    if "," in value or "\n" in value or "\r" in value:
        raise CsvExportError(f"transfer {transfer_id}: column '{column}' contains a comma or line break")
    return value


def _row(t: Transfer, drivers: Sequence[Driver], companies: Sequence[Company]) -> List[str]:
    driver = get_by_id(drivers, t.driver_id)
    company = get_by_id(companies, t.company_id)
    if driver is None or company is None:
        raise CsvExportError(f"transfer {t.id}: driver or company not in directory")

    values = {
        "fecha": t.date,
        "paciente": t.patient_name,
        "chofer_nombre": driver.name,
        "empresa_nombre": company.name,
        "origen_direccion": t.origin_address,
        "destino_direccion": t.destination_address,
        "hora": t.time,
        "celular_paciente": t.patient_phone,
        "origen_localidad": t.origin_city,
        "destino_localidad": t.destination_city,
        "km": _format_km(t.km),
        "espera": WAITING_YES if t.waiting else WAITING_NO,
        "estado": t.status.value,
        "siniestro": t.claim_number,
        "art": t.art,
        "tipo_viaje": t.trip_type.value,
        "nro_traslado": t.transfer_number,
        "id_interno": t.internal_id,
        "observaciones": t.notes,
    }
    return [_cell(values[c], c, t.id) for c in ALL_COLUMNS]


def render_transfers_csv(
    transfers: Iterable[Transfer],
    drivers: Sequence[Driver],
    companies: Sequence[Company],
    line_break: str = "\n",
) -> str:
    """
    Render transfers in the bulk-import column layout.

    Driver and company are written by name, so the output imports back to the
    same transfers (new ids) against the same directories.

    Raises:
        CsvExportError: a cell holds a comma or line break, or a reference is unknown
    """
    lines = [",".join(ALL_COLUMNS)]
    for t in transfers:
        lines.append(",".join(_row(t, drivers, companies)))
    log.debug("transfers_export", extra={"rows": len(lines) - 1})
    return line_break.join(lines) + line_break


__all__ = ["render_transfers_csv", "CsvExportError"]
