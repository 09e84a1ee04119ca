from conftest import HEADERS


def _call_body(**overrides) -> dict:
    body = {
        "sentiment": "positive",
        "dba": "Swift Haul Logistics",
        "datetime": "2025-08-06T10:00:00Z",
        "outcome": "yes",
        "call_outcome": "deal",
        "load_id": "L1",
        "start_location": "A",
        "end_location": "B",
        "initial_price": 200,
        "agreed_price": 190,
    }
    body.update(overrides)
    return body


# ── Health / auth ──────────────────────────────────────────

def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_writes_require_api_key(client):
    resp = client.post("/api/calls", json=_call_body())
    assert resp.status_code == 401
    assert resp.json()["error"] == "Unauthorized: Invalid or missing API key"
    resp = client.post("/api/deals", json={"load_id": "L1", "start_location": "A",
                                            "end_location": "B"},
                       headers={"X-API-Key": "wrong-key"})
    assert resp.status_code == 401


def test_reads_are_public(client):
    assert client.get("/api/calls").status_code == 200
    assert client.get("/api/deals").status_code == 200
    assert client.get("/api/metrics").status_code == 200


# ── Calls ──────────────────────────────────────────────────

def test_create_agreed_call_returns_call_and_deal(client):
    resp = client.post("/api/calls", json=_call_body(), headers=HEADERS)

    assert resp.status_code == 201
    data = resp.json()
    assert data["deal"]["call_id"] == data["call"]["id"]
    assert data["deal"]["agreed_price"] == 190

    deals = client.get("/api/deals").json()
    assert len(deals) == 1
    assert deals[0]["call_dba"] == "Swift Haul Logistics"
    assert deals[0]["call_outcome"] == "yes"


def test_create_declined_call_returns_no_deal(client):
    resp = client.post("/api/calls", json=_call_body(outcome="no"), headers=HEADERS)

    assert resp.status_code == 201
    assert resp.json()["deal"] is None
    assert client.get("/api/deals").json() == []


def test_agreed_call_missing_terms_is_400_and_not_persisted(client):
    resp = client.post("/api/calls", json=_call_body(start_location=None), headers=HEADERS)

    assert resp.status_code == 400
    body = resp.json()
    assert body["fields"] == ["start_location"]
    assert "id" not in body["call"]
    assert client.get("/api/calls").json() == []


def test_call_missing_required_fields_is_400(client):
    resp = client.post("/api/calls", json={"dba": "x"}, headers=HEADERS)

    assert resp.status_code == 400
    assert set(resp.json()["fields"]) == {"sentiment", "datetime", "outcome"}


def test_wrong_typed_call_fields_are_400(client):
    resp = client.post(
        "/api/calls",
        json=_call_body(sentiment=5, initial_price="a lot"),
        headers=HEADERS,
    )

    assert resp.status_code == 400
    body = resp.json()
    assert set(body["fields"]) == {"sentiment", "initial_price"}
    assert "error" in body
    assert client.get("/api/calls").json() == []


def test_non_numeric_path_id_is_400(client):
    resp = client.get("/api/deals/abc")
    assert resp.status_code == 400
    assert resp.json()["fields"] == ["deal_id"]


def test_call_crud_roundtrip(client):
    call_id = client.post(
        "/api/calls", json=_call_body(outcome="no"), headers=HEADERS
    ).json()["call"]["id"]

    assert client.get(f"/api/calls/{call_id}").json()["dba"] == "Swift Haul Logistics"

    resp = client.put(
        f"/api/calls/{call_id}",
        json={"sentiment": "negative", "dba": "New DBA",
              "datetime": "2025-08-07T10:00:00Z", "outcome": "no"},
        headers=HEADERS,
    )
    assert resp.status_code == 200
    assert resp.json()["sentiment"] == "negative"

    assert client.delete(f"/api/calls/{call_id}", headers=HEADERS).status_code == 200
    assert client.get(f"/api/calls/{call_id}").status_code == 404
    assert client.delete(f"/api/calls/{call_id}", headers=HEADERS).status_code == 404


# ── Deals ──────────────────────────────────────────────────

def test_create_deal_with_unknown_call_is_400(client):
    resp = client.post(
        "/api/deals",
        json={"load_id": "L1", "start_location": "A", "end_location": "B", "call_id": 77},
        headers=HEADERS,
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "Referenced call_id does not exist"


def test_deal_crud_roundtrip(client):
    body = {"load_id": "L9", "start_location": "A", "end_location": "B"}
    resp = client.post("/api/deals", json=body, headers=HEADERS)
    assert resp.status_code == 201
    deal_id = resp.json()["id"]

    resp = client.put(f"/api/deals/{deal_id}", json={**body, "agreed_price": 500},
                      headers=HEADERS)
    assert resp.status_code == 200
    assert client.get(f"/api/deals/{deal_id}").json()["agreed_price"] == 500

    assert client.delete(f"/api/deals/{deal_id}", headers=HEADERS).status_code == 200
    assert client.get(f"/api/deals/{deal_id}").status_code == 404


def test_deleting_call_keeps_deal(client):
    data = client.post("/api/calls", json=_call_body(), headers=HEADERS).json()
    client.delete(f"/api/calls/{data['call']['id']}", headers=HEADERS)

    deal = client.get(f"/api/deals/{data['deal']['id']}").json()
    assert deal["call_id"] == data["call"]["id"]
    assert deal["call_sentiment"] is None


# ── Metrics / data ─────────────────────────────────────────

def test_metrics_snapshot(client):
    data = client.get("/api/metrics").json()

    assert data["totalLoads"] == 2
    assert data["totalRevenue"] == 1000
    assert data["averageRate"] == 500
    assert data["averageWeight"] == 2000
    assert data["totalMiles"] == 600
    assert data["averageMiles"] == 300
    assert data["equipmentBreakdown"] == {"Van": 1, "Reefer": 1}
    assert data["commodityBreakdown"] == {"Food": 2}
    assert data["topRoutes"][0] == {"route": "C → D", "rate": 800, "load_id": "L2"}
    assert data["activeDrivers"] == 2
    assert data["totalDrivers"] == 3
    assert "timestamp" in data


def test_metrics_empty_catalog_returns_null_averages(client, settings):
    with open(settings.shipments_path, "w", encoding="utf-8") as f:
        f.write("[]")

    data = client.get("/api/metrics").json()

    assert data["totalLoads"] == 0
    assert data["averageRate"] is None


def test_metrics_without_driver_roster(client, settings):
    import os
    os.remove(settings.drivers_path)

    data = client.get("/api/metrics").json()
    assert data["totalDrivers"] == 0
    assert data["activeDrivers"] == 0


def test_metrics_missing_catalog_is_500(client, settings):
    import os
    os.remove(settings.shipments_path)

    resp = client.get("/api/metrics")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to calculate metrics"}


def test_data_endpoints_return_catalog(client):
    assert len(client.get("/api/data").json()) == 2
    assert client.get("/data").json() == client.get("/api/data").json()


def test_metrics_incomplete_catalog_is_500(client, settings):
    with open(settings.shipments_path, "w", encoding="utf-8") as f:
        f.write('[{"load_id": "L1", "origin": "A", "destination": "B", "loadboard_rate": 100}]')

    resp = client.get("/api/metrics")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to calculate metrics"}


def test_metrics_timestamp_is_utc_millis(client):
    timestamp = client.get("/api/metrics").json()["timestamp"]
    assert timestamp.endswith("Z")
    assert len(timestamp.split(".")[1]) == 4
