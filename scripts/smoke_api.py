"""
Smoke test — run against a live server.

Usage:
  1. Start server:  uvicorn app.main:app --reload
  2. Run:           python scripts/smoke_api.py

Hits every endpoint and prints results.
"""

import os
import sys

import httpx

BASE = os.environ.get("BASE_URL", "http://localhost:8000")
API_KEY = os.environ.get("API_KEY", "dev-key-12345")
HEADERS = {"X-API-Key": API_KEY}

passed = 0
failed = 0


def check(name: str, method: str, url: str, expected_status: int = 200, **kwargs):
    global passed, failed
    try:
        resp = httpx.request(method, f"{BASE}{url}", headers=HEADERS, **kwargs)
    except httpx.HTTPError as e:
        failed += 1
        print(f"❌ {name} → ERROR: {e}")
        return None
    ok = resp.status_code == expected_status
    print(f"{'✅' if ok else '❌'} {name} → {resp.status_code}")
    if ok:
        passed += 1
        return resp.json()
    failed += 1
    print(f"   Expected {expected_status}, got {resp.status_code}")
    print(f"   Body: {resp.text[:300]}")
    return None


def main() -> int:
    print("=" * 60)
    print("  NEGOTIATION LEDGER API — SMOKE TEST")
    print("=" * 60)

    print("\n── Health ──")
    check("Health check", "GET", "/health")

    print("\n── Calls ──")
    agreed = check("Log agreed call", "POST", "/api/calls", 201, json={
        "sentiment": "positive",
        "dba": "SWIFT HAUL LOGISTICS LLC",
        "datetime": "2025-08-06T10:00:00Z",
        "outcome": "yes",
        "call_outcome": "deal",
        "load_id": "L-1001",
        "start_location": "Dallas, TX",
        "end_location": "Houston, TX",
        "initial_price": 1200,
        "agreed_price": 1150,
    })
    if agreed:
        print(f"   → call {agreed['call']['id']} / deal {agreed['deal']['id']}")

    check("Agreed call without deal terms", "POST", "/api/calls", 400, json={
        "sentiment": "neutral",
        "dba": "HEARTLAND EXPRESS INC",
        "datetime": "2025-08-06T11:00:00Z",
        "outcome": "yes",
    })
    check("Log declined call", "POST", "/api/calls", 201, json={
        "sentiment": "negative",
        "dba": "HEARTLAND EXPRESS INC",
        "datetime": "2025-08-06T12:00:00Z",
        "outcome": "no",
        "call_outcome": "no_deal",
    })
    check("List calls", "GET", "/api/calls")
    check("Unknown call", "GET", "/api/calls/999999", 404)

    print("\n── Deals ──")
    check("Deal with unknown call", "POST", "/api/deals", 400, json={
        "load_id": "L-1002", "start_location": "A", "end_location": "B",
        "call_id": 999999,
    })
    deals = check("List deals", "GET", "/api/deals")
    if deals:
        print(f"   → {len(deals)} deals")

    print("\n── Metrics ──")
    data = check("Metrics snapshot", "GET", "/api/metrics")
    if data:
        print(f"   Loads   : {data['totalLoads']}")
        print(f"   Revenue : ${data['totalRevenue']}")
        print(f"   Drivers : {data['activeDrivers']}/{data['totalDrivers']}")

    print("\n" + "=" * 60)
    print(f"  RESULTS: {passed}/{passed + failed} passed")
    print("=" * 60)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
