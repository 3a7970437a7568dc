from __future__ import annotations

import json
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, ValidationError

from medtransfer.directory.models import Company, Driver
from medtransfer.transfers.schema import Transfer

_YAML_SUFFIXES = {".yaml", ".yml"}


class DatasetError(ValueError):
    """Raised when a data file is missing, unreadable or malformed."""


class Dataset(BaseModel):
    drivers: List[Driver] = []
    companies: List[Company] = []
    transfers: List[Transfer] = []


def load_dataset(path: str | Path) -> Dataset:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise DatasetError(f"cannot read {p}: {exc}") from exc
    try:
        data = yaml.safe_load(text) if p.suffix.lower() in _YAML_SUFFIXES else json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise DatasetError(f"cannot parse {p}: {exc}") from exc
    try:
        return Dataset.model_validate(data or {})
    except ValidationError as exc:
        raise DatasetError(f"invalid data in {p}: {exc}") from exc


def save_dataset(path: str | Path, dataset: Dataset) -> None:
    p = Path(path)
    payload = dataset.model_dump(mode="json")
    if p.suffix.lower() in _YAML_SUFFIXES:
        text = yaml.safe_dump(payload, allow_unicode=True, sort_keys=False)
    else:
        text = json.dumps(payload, ensure_ascii=False, indent=2)
    p.write_text(text, encoding="utf-8")


__all__ = ["Dataset", "DatasetError", "load_dataset", "save_dataset"]
