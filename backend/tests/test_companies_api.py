import uuid

COMPANY = {
    "name": "Acme",
    "description": "Anvils and rockets",
    "amountOfEmployees": 12,
    "registered": True,
    "type": "Sole Proprietorship",
}


def create_company(client, auth_headers, **overrides):
    payload = {**COMPANY, **overrides}
    r = client.post("/v1/companies", json=payload, headers=auth_headers)
    assert r.status_code == 200, r.text
    return r.json()


def test_create_company_returns_same_data_with_id(client, auth_headers):
    data = create_company(client, auth_headers)
    uuid.UUID(data.pop("id"))
    assert data == COMPANY


def test_get_company(client, auth_headers):
    created = create_company(client, auth_headers)
    r = client.get(f"/v1/companies/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


def test_get_company_is_public(client, auth_headers):
    created = create_company(client, auth_headers)
    assert client.get(f"/v1/companies/{created['id']}").status_code == 200


def test_get_missing_company(client):
    r = client.get(f"/v1/companies/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json()["code"] == 404


def test_get_company_bad_uuid(client):
    r = client.get("/v1/companies/not-a-uuid")
    assert r.status_code == 400
    assert r.json()["code"] == 400


def test_create_company_validation(client, auth_headers):
    r = client.post("/v1/companies", json={**COMPANY, "type": "Partnership"}, headers=auth_headers)
    assert r.status_code == 400
    assert "type" in r.json()["message"]

    r = client.post("/v1/companies", json={**COMPANY, "amountOfEmployees": -1}, headers=auth_headers)
    assert r.status_code == 400

    r = client.post("/v1/companies", json={"description": "no name"}, headers=auth_headers)
    assert r.status_code == 400


def test_create_company_malformed_json(client, auth_headers):
    r = client.post(
        "/v1/companies",
        content="{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert r.status_code == 400


def test_create_company_duplicate_name(client, auth_headers):
    create_company(client, auth_headers)
    r = client.post("/v1/companies", json=COMPANY, headers=auth_headers)
    assert r.status_code == 500
    assert r.json()["code"] == 500


def test_update_company_partial(client, auth_headers):
    created = create_company(client, auth_headers)
    r = client.put(
        "/v1/companies",
        json={"id": created["id"], "amountOfEmployees": 99, "registered": False},
        headers=auth_headers,
    )
    assert r.status_code == 200, r.text
    assert r.json() == {**created, "amountOfEmployees": 99, "registered": False}

    fetched = client.get(f"/v1/companies/{created['id']}").json()
    assert fetched["amountOfEmployees"] == 99
    assert fetched["name"] == "Acme"


def test_update_missing_company(client, auth_headers):
    r = client.put("/v1/companies", json={"id": str(uuid.uuid4()), "name": "Ghost"}, headers=auth_headers)
    assert r.status_code == 404


def test_delete_company(client, auth_headers):
    created = create_company(client, auth_headers)
    r = client.delete(f"/v1/companies/{created['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert client.get(f"/v1/companies/{created['id']}").status_code == 404


def test_delete_missing_company(client, auth_headers):
    r = client.delete(f"/v1/companies/{uuid.uuid4()}", headers=auth_headers)
    assert r.status_code == 404


def test_mutations_require_token(client):
    r = client.post("/v1/companies", json=COMPANY)
    assert r.status_code == 401
    assert r.text == "Missing Authorization Header"

    r = client.delete(f"/v1/companies/{uuid.uuid4()}")
    assert r.status_code == 401


def test_mutations_reject_bad_token(client):
    r = client.post("/v1/companies", json=COMPANY, headers={"Authorization": "Bearer garbage"})
    assert r.status_code == 401
    assert r.text.startswith("Error verifying JWT token")


def test_update_company_to_taken_name(client, auth_headers):
    create_company(client, auth_headers, name="Acme")
    other = create_company(client, auth_headers, name="Globex")
    r = client.put("/v1/companies", json={"id": other["id"], "name": "Acme"}, headers=auth_headers)
    assert r.status_code == 404
    assert r.json()["code"] == 404
    # The failed rename left the row untouched
    assert client.get(f"/v1/companies/{other['id']}").json()["name"] == "Globex"
