from datetime import datetime, timedelta, timezone

import invoices.service


def create_quote(client, payload):
    response = client.post("/api/quotes", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


def test_create_quote(client, quote_payload):
    quote = create_quote(client, {**quote_payload, "status": "accepted"})

    assert quote["number"].startswith("QUO-")
    assert quote["status"] == "pending"
    assert quote["validUntil"] == "2026-12-15"
    assert quote["total"] == 20.0
    assert "workDescription" not in quote


def test_create_quote_requires_valid_until(client, quote_payload):
    quote_payload.pop("validUntil")
    response = client.post("/api/quotes", json=quote_payload)
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create quote"}


def test_create_quote_rejects_malformed_body(client, quote_payload):
    bad_item = {"description": "Snow tires", "type": "tires", "quantity": 4, "price": 120}
    bodies = [
        {**quote_payload, "items": [bad_item]},
        {**quote_payload, "validUntil": ["2026-12-15"]},
        [quote_payload],
    ]
    for body in bodies:
        response = client.post("/api/quotes", json=body)
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create quote"}

    assert client.get("/api/quotes").json() == []


def test_list_and_get_quotes(client, quote_payload):
    first = create_quote(client, quote_payload)
    second = create_quote(client, quote_payload)

    listed = client.get("/api/quotes").json()
    assert [q["id"] for q in listed] == [second["id"], first["id"]]
    assert client.get(f"/api/quotes/{first['id']}").json()["number"] == first["number"]
    assert client.get("/api/quotes/nope").status_code == 404


def test_update_quote(client, quote_payload):
    quote = create_quote(client, quote_payload)
    update = {**quote_payload, "validUntil": "2027-02-01", "status": "rejected"}

    response = client.put(f"/api/quotes/{quote['id']}", json=update)
    assert response.status_code == 200
    assert response.json()["validUntil"] == "2027-02-01"
    assert response.json()["status"] == "rejected"

    assert client.put("/api/quotes/nope", json=update).status_code == 404


def test_update_quote_resolves_id_before_body(client, quote_payload):
    bad_item = {"description": "Alternator", "type": "parts", "quantity": -2, "price": 10}
    response = client.put("/api/quotes/nope", json={**quote_payload, "items": [bad_item]})
    assert response.status_code == 404
    assert response.json() == {"error": "Quote not found"}

    quote = create_quote(client, quote_payload)
    response = client.put(f"/api/quotes/{quote['id']}", json={**quote_payload, "items": [bad_item]})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to update quote"}


def test_quote_status_any_value(client, quote_payload):
    quote = create_quote(client, quote_payload)
    url = f"/api/quotes/{quote['id']}/status"

    for status in ["accepted", "accepted", "rejected", "pending", "converted", "pending"]:
        response = client.put(url, json={"status": status})
        assert response.status_code == 200
        assert response.json()["status"] == status

    assert client.put("/api/quotes/nope/status", json={"status": "accepted"}).status_code == 404


def test_convert_quote_default_due_date(client, quote_payload):
    quote = create_quote(client, {**quote_payload, "vehicleInformation": {"make": "Ford"}})

    response = client.post(f"/api/quotes/{quote['id']}/convert")
    assert response.status_code == 200
    invoice = response.json()

    expected_due = (datetime.now(timezone.utc).date() + timedelta(days=30)).isoformat()
    assert invoice["number"].startswith("INV-")
    assert invoice["id"] != quote["id"]
    assert invoice["status"] == "pending"
    assert invoice["total"] == 20.0
    assert invoice["dueDate"] == expected_due
    assert invoice["clientName"] == quote["clientName"]
    assert invoice["clientEmail"] == quote["clientEmail"]
    assert invoice["vehicleInformation"] == {"make": "Ford"}
    assert invoice["items"] == quote["items"]

    converted = client.get(f"/api/quotes/{quote['id']}").json()
    assert converted["status"] == "converted"
    assert client.get(f"/api/invoices/{invoice['id']}").status_code == 200


def test_convert_quote_with_due_date_override(client, quote_payload):
    quote = create_quote(client, quote_payload)

    response = client.post(f"/api/quotes/{quote['id']}/convert", json={"dueDate": "2027-03-01"})
    assert response.json()["dueDate"] == "2027-03-01"


def test_convert_missing_quote(client):
    response = client.post("/api/quotes/nope/convert")
    assert response.status_code == 404
    assert response.json() == {"error": "Quote not found"}
    assert client.get("/api/invoices").json() == []


def test_convert_rejects_malformed_body(client, quote_payload):
    quote = create_quote(client, quote_payload)

    response = client.post(f"/api/quotes/{quote['id']}/convert", json={"dueDate": 20270301})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to convert quote to invoice"}
    assert client.get(f"/api/quotes/{quote['id']}").json()["status"] == "pending"
    assert client.get("/api/invoices").json() == []


def test_convert_is_all_or_nothing(client, invoice_payload, quote_payload, monkeypatch):
    existing = client.post("/api/invoices", json=invoice_payload).json()
    quote = create_quote(client, quote_payload)

    # The new invoice collides with an existing number, so the commit fails
    monkeypatch.setattr(invoices.service, "generate_document_number", lambda prefix: existing["number"])
    response = client.post(f"/api/quotes/{quote['id']}/convert")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to convert quote to invoice"}
    assert client.get(f"/api/quotes/{quote['id']}").json()["status"] == "pending"
    assert [inv["id"] for inv in client.get("/api/invoices").json()] == [existing["id"]]



def test_delete_quote(client, quote_payload):
    quote = create_quote(client, quote_payload)
    response = client.delete(f"/api/quotes/{quote['id']}")

    assert response.json() == {"success": True, "message": "Quote deleted successfully"}
    assert client.delete(f"/api/quotes/{quote['id']}").status_code == 404


def test_quote_pdf(client, quote_payload):
    quote = create_quote(client, quote_payload)
    client.post("/api/config", json={"businessName": "Ridgeline Auto", "phone": "541-555-0100"})

    response = client.get(f"/api/quotes/{quote['id']}/pdf")
    assert response.status_code == 200
    assert "QUOTE" in response.text
    assert "Valid Until: 2026-12-15" in response.text
    assert "Ridgeline Auto" in response.text
    assert "<td>Parts</td>" in response.text
    assert "20.00" in response.text
