#!/usr/bin/env python3
"""Query a running vehicle catalog service from the shell."""
import argparse
import json
import os

import requests
from dotenv import load_dotenv

load_dotenv()

API_URL = (os.getenv("CATALOG_API_URL") or "http://127.0.0.1:8080").rstrip("/")

def build_request(args):
    """Map the subcommand to (path, query params)."""
    if args.cmd == "brands":
        return "/brands", {}
    if args.cmd == "models":
        return "/models", {"brand": args.brand}
    return "/engines", {"model": args.model}

def main():
    parser = argparse.ArgumentParser(description="Call /brands, /models or /engines and print the result.")
    parser.add_argument("--url", default=API_URL, help="Service base URL")
    sub = parser.add_subparsers(dest="cmd", required=True)
    sub.add_parser("brands")
    p_models = sub.add_parser("models")
    p_models.add_argument("brand")
    p_engines = sub.add_parser("engines")
    p_engines.add_argument("model")
    args = parser.parse_args()

    path, params = build_request(args)
    r = requests.get(args.url.rstrip("/") + path, params=params, timeout=10)
    if r.status_code != 200:
        raise SystemExit(f"{r.status_code}: {r.text}")
    print(json.dumps(r.json(), indent=2, ensure_ascii=False))

if __name__ == "__main__":
    main()
