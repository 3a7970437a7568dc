from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from medtransfer.config.settings import settings

log = logging.getLogger(__name__)

RULES_ENV = "MEDTRANSFER_BILLING_RULES_PATH"


class BillingRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    urban_km_threshold: float = Field(ge=0.0, default=50.0)  # km <= threshold is urban
    waiting_billable_hours: float = Field(ge=0.0, default=1.0)


def default_rules() -> BillingRules:
    return BillingRules(
        urban_km_threshold=settings.URBAN_KM_THRESHOLD,
        waiting_billable_hours=settings.WAITING_BILLABLE_HOURS,
    )


def load_billing_rules(path: str | Path | None = None) -> BillingRules:
    """
    Load billing rules from a YAML file.

    Lookup order: explicit path, MEDTRANSFER_BILLING_RULES_PATH, settings.
    A missing file means defaults; a malformed one is an error.
    """
    raw = path or os.getenv(RULES_ENV) or settings.BILLING_RULES_PATH
    if not raw:
        return default_rules()
    rules_path = Path(raw)
    if not rules_path.exists():
        log.debug("billing_rules_missing", extra={"path": str(rules_path)})
        return default_rules()
    try:
        data = yaml.safe_load(rules_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid billing rules in {rules_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"billing rules must be a mapping: {rules_path}")
    try:
        return default_rules().model_copy(update=BillingRules(**data).model_dump(exclude_unset=True))
    except ValidationError as exc:
        raise ValueError(f"invalid billing rules in {rules_path}: {exc}") from exc


__all__ = ["BillingRules", "default_rules", "load_billing_rules"]
