#!/usr/bin/env python3
"""
One-shot upload of the vehicle dataset into Firestore.

    python -m tools.upload_vehicles --data data/vehicles.json --credentials serviceAccountKey.json

Any failure (file, parse, write) stops the run with exit status 1.
Documents written before the failure stay in Firestore.
"""
import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from services.firestore_loader import init_firestore, upload_vehicles
from services.vehicle_data import load_vehicle_records

load_dotenv()

log = logging.getLogger("upload_vehicles")


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Upload brands/models/engines JSON into Firestore")
    ap.add_argument("--data", default=os.getenv("VEHICLE_DATA_PATH", "data/vehicles.json"),
                    help="Path to the vehicle JSON array")
    ap.add_argument("--credentials", default=os.getenv("FIREBASE_CREDENTIALS", "serviceAccountKey.json"),
                    help="Service-account key file")
    ap.add_argument("--project", default=os.getenv("FIREBASE_PROJECT_ID"),
                    help="Firebase project id (defaults to the key file's project)")
    return ap.parse_args(argv)


def run(args) -> int:
    db = None
    try:
        vehicles = load_vehicle_records(args.data)
        db = init_firestore(args.credentials, args.project)
        stats = upload_vehicles(db, vehicles)
    except Exception as e:
        log.error("Upload aborted: %s", e)
        return 1
    finally:
        if db is not None:
            db.close()

    log.info("Data upload complete: %d brands, %d models, %d engines",
             stats.brands, stats.models, stats.engines)
    return 0


def main(argv=None) -> int:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
