# tests/test_query_catalog.py
from argparse import Namespace

from tools.query_catalog import build_request

def test_brands_request():
    assert build_request(Namespace(cmd="brands")) == ("/brands", {})

def test_models_request():
    assert build_request(Namespace(cmd="models", brand="Toyota")) == ("/models", {"brand": "Toyota"})

def test_engines_request():
    assert build_request(Namespace(cmd="engines", model="Corolla")) == ("/engines", {"model": "Corolla"})
