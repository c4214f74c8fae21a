# main.py
import logging
import os
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api_vehicle_catalog import catalog_router
from services.catalog import CatalogLoadError, VehicleCatalog, load_catalog

# -----------------------------
# Env
# -----------------------------
load_dotenv()

APP_DIR = os.path.dirname(os.path.abspath(__file__))
VEHICLE_DATA_PATH = os.getenv("VEHICLE_DATA_PATH") or os.path.join(APP_DIR, "data", "vehicles.json")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

log = logging.getLogger("vehicle_catalog")


async def plain_text_http_error(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


# -----------------------------
# FastAPI setup
# -----------------------------
def create_app(catalog: Optional[VehicleCatalog] = None) -> FastAPI:
    """
    Build the API around a catalog loaded before serving.
    Without an injected catalog the lifespan loads VEHICLE_DATA_PATH;
    a CatalogLoadError there aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "catalog", None) is None:
            app.state.catalog = load_catalog(VEHICLE_DATA_PATH)
        yield

    app = FastAPI(title="Vehicle Catalog", lifespan=lifespan)
    app.state.catalog = catalog

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],   # tighten for prod
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, plain_text_http_error)

    app.include_router(catalog_router)   # /brands, /models, /engines

    @app.get("/health")
    def health(request: Request):
        return {"ok": True, "service": "vehicle-catalog", "brands": len(request.app.state.catalog)}

    return app


app = create_app()


def main() -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        catalog = load_catalog(VEHICLE_DATA_PATH)
    except CatalogLoadError as e:
        log.error("Startup aborted: %s", e)
        return 1
    app.state.catalog = catalog
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
