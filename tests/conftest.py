import json

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.db.connection import Database
from app.db.schema import init_db
from app.main import create_app

API_KEY = "test-api-key"
HEADERS = {"X-API-Key": API_KEY}

SHIPMENTS = [
    {"load_id": "L1", "origin": "A", "destination": "B", "loadboard_rate": 200,
     "weight": 1000, "miles": 500, "equipment_type": "Van", "commodity_type": "Food"},
    {"load_id": "L2", "origin": "C", "destination": "D", "loadboard_rate": 800,
     "weight": 3000, "miles": 100, "equipment_type": "Reefer", "commodity_type": "Food"},
]
DRIVERS = [{"status": "active"}, {"status": "inactive"}, {"status": "active"}]


@pytest.fixture()
def db(tmp_path):
    with Database(tmp_path / "ledger.db") as database:
        init_db(database)
        yield database


@pytest.fixture()
def settings(tmp_path):
    shipments = tmp_path / "testData.json"
    shipments.write_text(json.dumps(SHIPMENTS), encoding="utf-8")
    drivers = tmp_path / "drivers.json"
    drivers.write_text(json.dumps(DRIVERS), encoding="utf-8")
    return Settings(
        api_key=API_KEY,
        database_path=str(tmp_path / "api.db"),
        shipments_path=str(shipments),
        drivers_path=str(drivers),
    )


@pytest.fixture()
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
