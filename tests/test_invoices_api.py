from __future__ import annotations

from datetime import datetime, timedelta, timezone

from app.api.v1.invoices import get_invoice_service
from app.core.exceptions import DatabaseError


def _create(client, comp_code: str = "apple", amt: float = 100) -> dict:
    response = client.post("/invoices", json={"comp_code": comp_code, "amt": amt})
    assert response.status_code == 201, response.text
    return response.json()["invoice"]


def _parse_utc(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def test_health_and_root(client):
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "ok"

    root = client.get("/")
    assert root.status_code == 200
    assert "service" in root.json()


def test_list_invoices_empty(client):
    response = client.get("/invoices")
    assert response.status_code == 200
    assert response.json() == {"invoices": []}


def test_create_invoice_returns_full_record(client):
    invoice = _create(client, "apple", 100)

    assert set(invoice) == {"id", "comp_code", "amt", "paid", "add_date", "paid_date"}
    assert invoice["comp_code"] == "apple"
    assert invoice["amt"] == 100
    assert invoice["paid"] is False
    assert invoice["paid_date"] is None


def test_get_invoice_detail_includes_company(client):
    created = _create(client, "apple", 100)

    response = client.get(f"/invoices/{created['id']}")

    assert response.status_code == 200
    invoice = response.json()["invoice"]
    assert invoice["id"] == created["id"]
    assert invoice["amt"] == 100
    assert invoice["paid"] is False
    assert invoice["paid_date"] is None
    assert invoice["company"] == {
        "code": "apple",
        "name": "Apple Computer",
        "description": "Maker of OSX.",
    }


def test_list_invoices_sorted_by_id(client):
    ids = [_create(client, code, amt)["id"] for code, amt in [("ibm", 400), ("apple", 100), ("apple", 200)]]
    client.put(f"/invoices/{ids[0]}", json={"amt": 410, "paid": True})

    response = client.get("/invoices")

    assert response.status_code == 200
    assert response.json()["invoices"] == [
        {"id": ids[0], "comp_code": "ibm"},
        {"id": ids[1], "comp_code": "apple"},
        {"id": ids[2], "comp_code": "apple"},
    ]


def test_pay_then_unpay_invoice(client):
    created = _create(client, "apple", 100)

    before = datetime.now(timezone.utc).replace(tzinfo=None)
    paid = client.put(f"/invoices/{created['id']}", json={"amt": 200, "paid": True})
    assert paid.status_code == 200
    paid_invoice = paid.json()["invoice"]
    assert paid_invoice["amt"] == 200
    assert paid_invoice["paid"] is True
    assert paid_invoice["paid_date"] is not None
    assert abs(_parse_utc(paid_invoice["paid_date"]) - before) < timedelta(seconds=30)

    repaid = client.put(f"/invoices/{created['id']}", json={"amt": 200, "paid": True})
    assert repaid.json()["invoice"]["paid_date"] == paid_invoice["paid_date"]

    unpaid = client.put(f"/invoices/{created['id']}", json={"amt": 200, "paid": False})
    assert unpaid.status_code == 200
    assert unpaid.json()["invoice"]["paid"] is False
    assert unpaid.json()["invoice"]["paid_date"] is None


def test_missing_invoice_returns_404(client):
    get_resp = client.get("/invoices/999999")
    assert get_resp.status_code == 404
    assert get_resp.json()["detail"] == "No such invoice: 999999"

    put_resp = client.put("/invoices/999999", json={"amt": 10, "paid": True})
    assert put_resp.status_code == 404

    delete_resp = client.delete("/invoices/999999")
    assert delete_resp.status_code == 404


def test_delete_invoice(client):
    created = _create(client, "ibm", 400)

    response = client.delete(f"/invoices/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"status": "deleted"}
    assert client.get(f"/invoices/{created['id']}").status_code == 404


def test_create_invoice_unknown_company_conflicts(client):
    response = client.post("/invoices", json={"comp_code": "nope", "amt": 50})
    assert response.status_code == 409
    assert client.get("/invoices").json() == {"invoices": []}


def test_create_invoice_rejects_invalid_body(client):
    assert client.post("/invoices", json={"comp_code": "apple", "amt": -5}).status_code == 422
    assert client.post("/invoices", json={"comp_code": "", "amt": 5}).status_code == 422
    assert client.post("/invoices", json={"amt": 5}).status_code == 422


def test_update_requires_paid_flag(client):
    created = _create(client)
    response = client.put(f"/invoices/{created['id']}", json={"amt": 100})
    assert response.status_code == 422


def test_storage_failure_returns_generic_500(client):
    class _BrokenService:
        def list_invoices(self):
            raise DatabaseError("connection refused")

    client.app.dependency_overrides[get_invoice_service] = lambda: _BrokenService()

    response = client.get("/invoices")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error."}


def _post_raw(client, path: str, body: str, method: str = "POST"):
    return client.request(method, path, content=body, headers={"Content-Type": "application/json"})


def test_non_finite_amount_rejected(client):
    created = _create(client)

    assert _post_raw(client, "/invoices", '{"comp_code": "apple", "amt": Infinity}').status_code == 422
    assert _post_raw(client, "/invoices", '{"comp_code": "apple", "amt": NaN}').status_code == 422
    put_resp = _post_raw(client, f"/invoices/{created['id']}", '{"amt": Infinity, "paid": true}', method="PUT")
    assert put_resp.status_code == 422
    assert client.get("/invoices").json()["invoices"] == [{"id": created["id"], "comp_code": "apple"}]


def test_amount_above_column_precision_rejected(client):
    response = client.post("/invoices", json={"comp_code": "apple", "amt": 10_000_000_000})
    assert response.status_code == 422

    largest = client.post("/invoices", json={"comp_code": "apple", "amt": 9_999_999_999.99})
    assert largest.status_code == 201


def test_out_of_range_id_returns_404(client):
    huge = 10**20
    assert client.get(f"/invoices/{huge}").status_code == 404
    assert client.put(f"/invoices/{huge}", json={"amt": 10, "paid": True}).status_code == 404
    assert client.delete(f"/invoices/{huge}").status_code == 404
    assert client.get("/invoices/0").json() == {"detail": "No such invoice: 0"}


def test_timestamps_carry_utc_offset(client):
    created = _create(client)
    paid = client.put(f"/invoices/{created['id']}", json={"amt": 100, "paid": True}).json()["invoice"]
    detail = client.get(f"/invoices/{created['id']}").json()["invoice"]

    for value in (created["add_date"], paid["add_date"], paid["paid_date"], detail["paid_date"]):
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        assert parsed.utcoffset() == timedelta(0)
