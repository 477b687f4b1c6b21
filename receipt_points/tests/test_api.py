# tests/test_api.py
from fastapi.testclient import TestClient

from receipt_points.main import create_app
from receipt_points.store.repository import ReceiptStore


def _submit(client, payload):
    resp = client.post("/receipts/process", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()["id"]

def test_health(client):
    assert client.get("/health").json() == {"ok": True}

def test_process_and_points(client, target_payload):
    receipt_id = _submit(client, target_payload)
    resp = client.get(f"/receipts/{receipt_id}/points")
    assert resp.status_code == 200
    assert resp.json() == {"points": 19}

def test_round_total_example(client, corner_market_payload):
    receipt_id = _submit(client, corner_market_payload)
    assert client.get(f"/receipts/{receipt_id}/points").json() == {"points": 109}

def test_points_with_steps(client, target_payload):
    receipt_id = _submit(client, target_payload)
    resp = client.get(f"/receipts/{receipt_id}/points/steps")
    assert resp.status_code == 200
    body = resp.json()
    assert body["result"] == 19
    assert body["alphanumeric"] == "Retailer name has 6 alphanumeric characters, adding 6 points"
    assert body["roundTotal"] is None
    assert body["multipleTotal"] is None
    assert body["numberOfItems"] == "There are 5 items, adding 10 points"
    assert body["descriptionMultiple"] == [
        "'Klarbrunn 12-PK 12 FL OZ' length 24 is a multiple of 3, adding 3 points"
    ]
    assert body["oddDay"] is None
    assert body["purchaseTime"] is None

def test_singular_aliases(client, corner_market_payload):
    resp = client.post("/receipt/process", json=corner_market_payload)
    assert resp.status_code == 200
    receipt_id = resp.json()["id"]
    assert client.get(f"/receipts/{receipt_id}/point").json() == {"points": 109}
    assert client.get(f"/receipts/{receipt_id}/point/steps").json()["result"] == 109

def test_unknown_id_is_404(client):
    for path in ("/receipts/unknown-id/points", "/receipts/unknown-id/points/steps"):
        resp = client.get(path)
        assert resp.status_code == 404
        assert resp.json() == {"detail": "ID:'unknown-id' not found"}

def test_missing_items_rejected(client, target_payload):
    del target_payload["items"]
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 400
    assert "items" in resp.json()["detail"]
    assert client.get("/receipts").json() == []

def test_empty_items_rejected(client, target_payload):
    target_payload["items"] = []
    assert client.post("/receipts/process", json=target_payload).status_code == 400

def test_unknown_field_rejected(client, target_payload):
    target_payload["coupon"] = "FREE"
    assert client.post("/receipts/process", json=target_payload).status_code == 400
    target_payload.pop("coupon")
    target_payload["items"][0]["qty"] = 2
    assert client.post("/receipts/process", json=target_payload).status_code == 400

def test_malformed_json_rejected(client):
    resp = client.post("/receipts/process", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400

def test_invalid_price_rejected(client, target_payload):
    target_payload["items"][1]["price"] = "twelve"
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Price:'twelve' is not a valid value"}
    assert client.get("/receipts").json() == []

def test_invalid_total_rejected(client, target_payload):
    target_payload["total"] = "-3.00"
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 400
    assert "-3.00" in resp.json()["detail"]

def test_list_receipts(client, target_payload):
    receipt_id = _submit(client, target_payload)
    body = client.get("/receipts").json()
    assert len(body) == 1
    assert body[0]["id"] == receipt_id
    assert body[0]["purchaseDate"] == "2022-01-02"
    assert body[0]["items"][0] == {"shortDescription": "Mountain Dew 12PK", "price": "6.49"}

def test_long_total_can_be_scored(client, target_payload):
    target_payload["total"] = "1" + "0" * 30 + ".00"
    receipt_id = _submit(client, target_payload)
    resp = client.get(f"/receipts/{receipt_id}/points")
    assert resp.status_code == 200
    assert resp.json() == {"points": 19 + 50 + 25}

def test_unexpected_error_is_500():
    class BrokenStore(ReceiptStore):
        def get(self, receipt_id):
            raise RuntimeError("boom")

    client = TestClient(create_app(BrokenStore()), raise_server_exceptions=False)
    resp = client.get("/receipts/anything/points")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}
