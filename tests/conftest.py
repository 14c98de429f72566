import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest


@pytest.fixture(autouse=True)
def reset_catalog_between_tests():
    from video_rental.models.catalog import Catalog
    Catalog.reset()
    yield
    Catalog.reset()


@pytest.fixture
def catalog(monkeypatch):
    """
    Provide a single isolated catalog and patch common._catalog() to return it,
    so services and routes all see the SAME object.
    """
    from video_rental.models.catalog import Catalog
    from video_rental.services import common as common_mod

    cat = Catalog()
    monkeypatch.setattr(common_mod, "_catalog", lambda: cat, raising=True)
    yield cat


@pytest.fixture
def client(catalog):
    from video_rental import create_app
    app = create_app({"TESTING": True, "SECRET_KEY": "test"})
    with app.test_client() as c:
        yield c
