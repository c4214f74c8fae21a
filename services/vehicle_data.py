# services/vehicle_data.py
import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

log = logging.getLogger(__name__)


class VehicleDataError(Exception):
    """Raised when the vehicle dataset can't be read or doesn't match the expected shape."""


class ModelIn(BaseModel):
    name: str
    engines: Optional[List[str]] = Field(default_factory=list)

    # JSON null reads as "no engines"
    @field_validator("engines", mode="before")
    @classmethod
    def _null_engines(cls, v):
        return [] if v is None else v


class VehicleIn(BaseModel):
    brand: str
    models: Optional[List[ModelIn]] = Field(default_factory=list)

    @field_validator("models", mode="before")
    @classmethod
    def _null_models(cls, v):
        return [] if v is None else v


def _warn_duplicates(vehicles: List[VehicleIn]) -> None:
    # Lookups are first-match, so later duplicates are unreachable.
    seen_brands = set()
    for v in vehicles:
        if v.brand in seen_brands:
            log.warning("Duplicate brand %r in dataset; only the first is served", v.brand)
        seen_brands.add(v.brand)
        seen_models = set()
        for m in v.models:
            if m.name in seen_models:
                log.warning("Duplicate model %r under brand %r", m.name, v.brand)
            seen_models.add(m.name)


def load_vehicle_records(path: Union[str, Path]) -> List[VehicleIn]:
    """
    Read a JSON array of {"brand", "models": [{"name", "engines": [...]}]} rows.
    Every failure (missing file, bad JSON, wrong shape) surfaces as VehicleDataError.
    """
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise VehicleDataError(f"Vehicle data file not found: {p}")
    except OSError as e:
        raise VehicleDataError(f"Could not read {p}: {e}") from e
    except ValueError as e:
        raise VehicleDataError(f"Invalid JSON in {p}: {e}") from e

    if not isinstance(raw, list):
        raise VehicleDataError(f"{p}: expected a JSON array of brands, got {type(raw).__name__}")

    vehicles: List[VehicleIn] = []
    for i, row in enumerate(raw):
        if not isinstance(row, dict):
            raise VehicleDataError(f"{p}: entry {i} is not an object")
        try:
            vehicles.append(VehicleIn(**row))
        except ValidationError as e:
            raise VehicleDataError(f"{p}: entry {i} is invalid: {e}") from e

    _warn_duplicates(vehicles)
    return vehicles
