# services/firestore_loader.py
# Writes the vehicle dataset into Firestore as
#   vehicleBrands/{brand}/models/{model}/engines/{autoId}
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import firebase_admin
from firebase_admin import credentials, firestore

from services.vehicle_data import VehicleIn

log = logging.getLogger(__name__)

BRANDS_COLLECTION = "vehicleBrands"
MODELS_COLLECTION = "models"
ENGINES_COLLECTION = "engines"


@dataclass
class UploadStats:
    brands: int = 0
    models: int = 0
    engines: int = 0


def init_firestore(credentials_path: str, project_id: Optional[str] = None) -> Any:
    """
    Initialise a Firebase app from a service-account key file and return its Firestore client.
    project_id overrides the project named in the key file.
    """
    cred = credentials.Certificate(credentials_path)
    options = {"projectId": project_id} if project_id else None
    app = firebase_admin.initialize_app(cred, options)
    return firestore.client(app)


def upload_vehicles(db: Any, vehicles: Iterable[VehicleIn]) -> UploadStats:
    """
    Sequential, blocking writes. Within a brand each model's engines go first,
    then the model document; the brand document is written last.

    Engines get auto-generated ids, so running this twice duplicates them,
    while brand and model documents (keyed by name) are overwritten.
    Any SDK error propagates immediately; nothing already written is undone.
    """
    stats = UploadStats()
    for vehicle in vehicles:
        brand_ref = db.collection(BRANDS_COLLECTION).document(vehicle.brand)

        for model in vehicle.models:
            model_ref = brand_ref.collection(MODELS_COLLECTION).document(model.name)

            for engine in model.engines:
                model_ref.collection(ENGINES_COLLECTION).document().set({"name": engine})
                stats.engines += 1

            model_ref.set({"name": model.name})
            stats.models += 1

        brand_ref.set({"name": vehicle.brand})
        stats.brands += 1
        log.info("Uploaded brand %s (%d models)", vehicle.brand, len(vehicle.models))

    return stats
