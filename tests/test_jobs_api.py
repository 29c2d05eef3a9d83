from __future__ import annotations


def _titles(r) -> list[str]:
    return [j["title"] for j in r.json()["jobs"]]


def test_list_jobs_anonymous(client) -> None:
    r = client.get("/jobs")
    assert r.status_code == 200
    assert _titles(r) == ["j1", "j2", "j3"]


def test_list_jobs_min_salary(client) -> None:
    r = client.get("/jobs", params={"minSalary": "75000"})
    assert r.status_code == 200
    assert _titles(r) == ["j1", "j2"]


def test_list_jobs_has_equity(client) -> None:
    assert _titles(client.get("/jobs", params={"hasEquity": "true"})) == ["j1"]
    assert _titles(client.get("/jobs", params={"hasEquity": "false"})) == ["j1", "j2", "j3"]


def test_list_jobs_title(client) -> None:
    assert _titles(client.get("/jobs", params={"title": "J2"})) == ["j2"]


def test_list_jobs_bad_salary(client) -> None:
    assert client.get("/jobs", params={"minSalary": "-5"}).status_code == 422


def test_get_job(client, seeded_db) -> None:
    job_id = seeded_db["j2"]
    r = client.get(f"/jobs/{job_id}")
    assert r.status_code == 200
    assert r.json() == {
        "job": {"id": job_id, "title": "j2", "salary": 75000, "equity": 0.0, "companyHandle": "c2"},
    }


def test_get_job_not_found(client) -> None:
    assert client.get("/jobs/0").status_code == 404


def test_create_job(client, admin_headers) -> None:
    payload = {"title": "new", "salary": 10, "equity": 0.2, "companyHandle": "c1"}
    r = client.post("/jobs", json=payload, headers=admin_headers)
    assert r.status_code == 201
    job = r.json()["job"]
    assert isinstance(job["id"], int)
    assert {k: v for k, v in job.items() if k != "id"} == payload

    dupe = client.post("/jobs", json=payload, headers=admin_headers)
    assert dupe.status_code == 400


def test_create_job_bad_equity(client, admin_headers) -> None:
    payload = {"title": "new", "equity": 1.5, "companyHandle": "c1"}
    assert client.post("/jobs", json=payload, headers=admin_headers).status_code == 422


def test_create_job_unknown_company(client, admin_headers) -> None:
    payload = {"title": "new", "companyHandle": "nope"}
    assert client.post("/jobs", json=payload, headers=admin_headers).status_code == 400


def test_create_job_requires_admin(client, user_headers) -> None:
    payload = {"title": "new", "companyHandle": "c1"}
    assert client.post("/jobs", json=payload, headers=user_headers).status_code == 403


def test_patch_job(client, admin_headers, seeded_db) -> None:
    job_id = seeded_db["j3"]
    r = client.patch(f"/jobs/{job_id}", json={"salary": 51000, "equity": 0.05}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["job"] == {
        "id": job_id,
        "title": "j3",
        "salary": 51000,
        "equity": 0.05,
        "companyHandle": "c3",
    }


def test_patch_job_cannot_change_company(client, admin_headers, seeded_db) -> None:
    r = client.patch(f"/jobs/{seeded_db['j1']}", json={"companyHandle": "c2"}, headers=admin_headers)
    assert r.status_code == 422


def test_patch_job_not_found(client, admin_headers) -> None:
    assert client.patch("/jobs/0", json={"title": "x"}, headers=admin_headers).status_code == 404


def test_delete_job(client, admin_headers, seeded_db) -> None:
    job_id = seeded_db["j1"]
    r = client.delete(f"/jobs/{job_id}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"deleted": job_id}
    assert client.delete(f"/jobs/{job_id}", headers=admin_headers).status_code == 404


def test_delete_job_requires_admin(client, user_headers, seeded_db) -> None:
    assert client.delete(f"/jobs/{seeded_db['j1']}", headers=user_headers).status_code == 403
