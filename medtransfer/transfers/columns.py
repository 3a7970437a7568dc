"""
CSV column layout for bulk transfer import.

Header cells are matched after trimming and lower-casing. Columns other than
the ones listed here are ignored.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

COL_DATE = "fecha"
COL_PATIENT = "paciente"
COL_DRIVER_NAME = "chofer_nombre"
COL_COMPANY_NAME = "empresa_nombre"
COL_ORIGIN_ADDRESS = "origen_direccion"
COL_DESTINATION_ADDRESS = "destino_direccion"

COL_TIME = "hora"
COL_PATIENT_PHONE = "celular_paciente"
COL_ORIGIN_CITY = "origen_localidad"
COL_DESTINATION_CITY = "destino_localidad"
COL_KM = "km"
COL_WAITING = "espera"
COL_STATUS = "estado"
COL_CLAIM_NUMBER = "siniestro"
COL_ART = "art"
COL_TRIP_TYPE = "tipo_viaje"
COL_TRANSFER_NUMBER = "nro_traslado"
COL_INTERNAL_ID = "id_interno"
COL_NOTES = "observaciones"

REQUIRED_COLUMNS = (
    COL_DATE,
    COL_PATIENT,
    COL_DRIVER_NAME,
    COL_COMPANY_NAME,
    COL_ORIGIN_ADDRESS,
    COL_DESTINATION_ADDRESS,
)

OPTIONAL_COLUMNS = (
    COL_TIME,
    COL_PATIENT_PHONE,
    COL_ORIGIN_CITY,
    COL_DESTINATION_CITY,
    COL_KM,
    COL_WAITING,
    COL_STATUS,
    COL_CLAIM_NUMBER,
    COL_ART,
    COL_TRIP_TYPE,
    COL_TRANSFER_NUMBER,
    COL_INTERNAL_ID,
    COL_NOTES,
)

ALL_COLUMNS = REQUIRED_COLUMNS + OPTIONAL_COLUMNS

WAITING_YES = "si"


class TransferCsvRow(BaseModel):
    """
    One data line of the import file, keyed by column.

    Every cell is a trimmed string and a missing cell is "". Defaults for the
    Transfer built from it:

    - time: "00:00" when blank
    - km: 0 when blank; anything else must parse as a non-negative number
    - waiting: True only for "si" (any case)
    - status: voided only for exactly "Anulado", otherwise completed
    - trip_type: round trip when blank
    - remaining optional text columns: ""
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    date: str = Field(default="", alias=COL_DATE)
    patient_name: str = Field(default="", alias=COL_PATIENT)
    driver_name: str = Field(default="", alias=COL_DRIVER_NAME)
    company_name: str = Field(default="", alias=COL_COMPANY_NAME)
    origin_address: str = Field(default="", alias=COL_ORIGIN_ADDRESS)
    destination_address: str = Field(default="", alias=COL_DESTINATION_ADDRESS)

    time: str = Field(default="", alias=COL_TIME)
    patient_phone: str = Field(default="", alias=COL_PATIENT_PHONE)
    origin_city: str = Field(default="", alias=COL_ORIGIN_CITY)
    destination_city: str = Field(default="", alias=COL_DESTINATION_CITY)
    km: str = Field(default="", alias=COL_KM)
    waiting: str = Field(default="", alias=COL_WAITING)
    status: str = Field(default="", alias=COL_STATUS)
    claim_number: str = Field(default="", alias=COL_CLAIM_NUMBER)
    art: str = Field(default="", alias=COL_ART)
    trip_type: str = Field(default="", alias=COL_TRIP_TYPE)
    transfer_number: str = Field(default="", alias=COL_TRANSFER_NUMBER)
    internal_id: str = Field(default="", alias=COL_INTERNAL_ID)
    notes: str = Field(default="", alias=COL_NOTES)


__all__ = [
    "REQUIRED_COLUMNS",
    "OPTIONAL_COLUMNS",
    "ALL_COLUMNS",
    "WAITING_YES",
    "TransferCsvRow",
]
