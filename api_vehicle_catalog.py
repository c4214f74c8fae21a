# api_vehicle_catalog.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from services.catalog import MissingParameter, NotFound, VehicleCatalog

catalog_router = APIRouter()


def get_catalog(request: Request) -> VehicleCatalog:
    return request.app.state.catalog


def _lookup(fn, arg: Optional[str]) -> List[str]:
    try:
        return fn(arg)
    except MissingParameter as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@catalog_router.get("/brands", response_model=List[str])
def get_brands(catalog: VehicleCatalog = Depends(get_catalog)):
    return catalog.list_brands()


# Params are optional at the FastAPI level so a missing one answers 400 instead of 422.
@catalog_router.get("/models", response_model=List[str])
def get_models(brand: Optional[str] = Query(default=None),
               catalog: VehicleCatalog = Depends(get_catalog)):
    return _lookup(catalog.list_models, brand)


@catalog_router.get("/engines", response_model=List[str])
def get_engines(model: Optional[str] = Query(default=None),
                catalog: VehicleCatalog = Depends(get_catalog)):
    return _lookup(catalog.list_engines, model)
