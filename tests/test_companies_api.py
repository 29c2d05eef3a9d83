from __future__ import annotations


NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "description": "DescNew",
    "numEmployees": 10,
    "logoUrl": "http://new.img",
}


def test_list_companies_anonymous(client) -> None:
    r = client.get("/companies")
    assert r.status_code == 200
    companies = r.json()["companies"]
    assert [c["handle"] for c in companies] == ["c1", "c2", "c3"]
    assert companies[0] == {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "numEmployees": 1,
        "logoUrl": "http://c1.img",
    }


def test_list_companies_with_filters(client) -> None:
    r = client.get("/companies", params={"name": "c", "minEmployees": "2", "maxEmployees": "2"})
    assert r.status_code == 200
    assert [c["handle"] for c in r.json()["companies"]] == ["c2"]


def test_list_companies_bad_range(client) -> None:
    r = client.get("/companies", params={"minEmployees": 3, "maxEmployees": 2})
    assert r.status_code == 400


def test_list_companies_non_numeric_bound(client) -> None:
    r = client.get("/companies", params={"minEmployees": "lots"})
    assert r.status_code == 422


def test_get_company_with_jobs(client, seeded_db) -> None:
    r = client.get("/companies/c1")
    assert r.status_code == 200
    company = r.json()["company"]
    assert company["handle"] == "c1"
    assert company["jobs"] == [
        {"id": seeded_db["j1"], "title": "j1", "salary": 100000, "equity": 0.1, "companyHandle": "c1"},
    ]


def test_get_company_not_found(client) -> None:
    assert client.get("/companies/nope").status_code == 404


def test_create_company_as_admin(client, admin_headers) -> None:
    r = client.post("/companies", json=NEW_COMPANY, headers=admin_headers)
    assert r.status_code == 201
    assert r.json() == {"company": NEW_COMPANY}

    dupe = client.post("/companies", json=NEW_COMPANY, headers=admin_headers)
    assert dupe.status_code == 400


def test_create_company_requires_admin(client, user_headers) -> None:
    assert client.post("/companies", json=NEW_COMPANY).status_code == 401
    assert client.post("/companies", json=NEW_COMPANY, headers=user_headers).status_code == 403


def test_create_company_rejects_unknown_fields(client, admin_headers) -> None:
    r = client.post("/companies", json={**NEW_COMPANY, "ceo": "someone"}, headers=admin_headers)
    assert r.status_code == 422


def test_patch_company(client, admin_headers) -> None:
    r = client.patch("/companies/c1", json={"name": "C1-new", "numEmployees": 7}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["company"] == {
        "handle": "c1",
        "name": "C1-new",
        "description": "Desc1",
        "numEmployees": 7,
        "logoUrl": "http://c1.img",
    }


def test_patch_company_empty_body(client, admin_headers) -> None:
    r = client.patch("/companies/c1", json={}, headers=admin_headers)
    assert r.status_code == 400


def test_patch_company_handle_not_allowed(client, admin_headers) -> None:
    r = client.patch("/companies/c1", json={"handle": "c1-new"}, headers=admin_headers)
    assert r.status_code == 422


def test_patch_company_not_found(client, admin_headers) -> None:
    r = client.patch("/companies/nope", json={"name": "x"}, headers=admin_headers)
    assert r.status_code == 404


def test_patch_company_requires_admin(client, user_headers) -> None:
    r = client.patch("/companies/c1", json={"name": "x"}, headers=user_headers)
    assert r.status_code == 403


def test_delete_company(client, admin_headers) -> None:
    r = client.delete("/companies/c1", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"deleted": "c1"}

    again = client.delete("/companies/c1", headers=admin_headers)
    assert again.status_code == 404


def test_delete_company_requires_admin(client, user_headers) -> None:
    assert client.delete("/companies/c1", headers=user_headers).status_code == 403
    assert client.get("/companies/c1").status_code == 200
