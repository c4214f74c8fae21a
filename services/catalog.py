# services/catalog.py
# Immutable in-memory brand -> model -> engine catalog served by the API.

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from services.vehicle_data import VehicleDataError, VehicleIn, load_vehicle_records

log = logging.getLogger(__name__)


class CatalogError(Exception):
    pass


class MissingParameter(CatalogError):
    def __init__(self, param: str):
        super().__init__(f"Missing required query parameter: {param}")
        self.param = param


class NotFound(CatalogError):
    pass


class CatalogLoadError(Exception):
    """Startup failure; the entry point decides whether to abort."""


@dataclass(frozen=True)
class Model:
    name: str
    engines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Brand:
    name: str
    models: Tuple[Model, ...] = ()


class VehicleCatalog:
    """
    Read-only view over the loaded dataset.

    Name indexes are built once and keep the first occurrence in file order,
    so results match a front-to-back scan. Model names are looked up across
    all brands; if two brands share a model name the earlier brand wins.
    """

    def __init__(self, brands: Iterable[Brand]):
        self._brands: Tuple[Brand, ...] = tuple(brands)
        self._brand_index: Dict[str, Brand] = {}
        self._model_index: Dict[str, Model] = {}
        for b in self._brands:
            self._brand_index.setdefault(b.name, b)
            for m in b.models:
                self._model_index.setdefault(m.name, m)

    @classmethod
    def from_records(cls, vehicles: Iterable[VehicleIn]) -> "VehicleCatalog":
        return cls(
            Brand(
                name=v.brand,
                models=tuple(Model(name=m.name, engines=tuple(m.engines)) for m in v.models),
            )
            for v in vehicles
        )

    @property
    def brands(self) -> Tuple[Brand, ...]:
        return self._brands

    def __len__(self) -> int:
        return len(self._brands)

    def list_brands(self) -> List[str]:
        return [b.name for b in self._brands]

    def list_models(self, brand: Optional[str]) -> List[str]:
        if not brand:
            raise MissingParameter("brand")
        found = self._brand_index.get(brand)
        if found is None or not found.models:
            raise NotFound(f"No models found for brand: {brand}")
        return [m.name for m in found.models]

    def list_engines(self, model: Optional[str]) -> List[str]:
        if not model:
            raise MissingParameter("model")
        found = self._model_index.get(model)
        if found is None or not found.engines:
            raise NotFound(f"No engines found for model: {model}")
        return list(found.engines)


def load_catalog(path: Union[str, Path]) -> VehicleCatalog:
    try:
        vehicles = load_vehicle_records(path)
    except VehicleDataError as e:
        raise CatalogLoadError(str(e)) from e
    catalog = VehicleCatalog.from_records(vehicles)
    log.info("Loaded %d brands from %s", len(catalog), path)
    return catalog
