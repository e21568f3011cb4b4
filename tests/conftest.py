import os
import tempfile

# the engine is built at import time, so point it at a scratch database first
_db_dir = tempfile.mkdtemp(prefix="country_atlas_")
os.environ["PSQL_URL"] = "sqlite:///" + os.path.join(_db_dir, "test.db")

import pytest

from country_atlas.db.psql.database import engine
from country_atlas.db.psql.models import Base
from country_atlas.main import app


@pytest.fixture(autouse=True)
def database():
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    yield engine


@pytest.fixture
def client():
    return app.test_client()


@pytest.fixture
def make_country(client):
    def _make(name="Testland", alpha3="TST", **fields):
        payload = {"name": name, "alpha3Code": alpha3, "alpha2Code": alpha3[:2],
                   "region": "Europe", "capital": "Test City", "population": 1000, **fields}
        resp = client.post('/api/countries', json=payload)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()
    return _make


@pytest.fixture
def country(make_country):
    return make_country()
