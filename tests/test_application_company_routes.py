from __future__ import annotations

from datetime import timedelta

from conftest import BASE_TIME, login_as, make_company, make_job, make_user


def test_applied_jobs_lists_callers_applications_with_job_and_company(client, db):
    admin = make_user(db, email="boss@example.com", role="admin")
    student = make_user(db)
    other = make_user(db, email="other@example.com")
    company = make_company(db)
    first = make_job(db, company=company, creator=admin, title="First")
    second = make_job(db, company=company, creator=admin, title="Second")
    db.applications.insert_many([
        {"job": first["_id"], "applicant": student["_id"], "status": "pending", "createdAt": BASE_TIME},
        {"job": second["_id"], "applicant": student["_id"], "status": "accepted",
         "createdAt": BASE_TIME + timedelta(days=1)},
        {"job": first["_id"], "applicant": other["_id"], "status": "pending", "createdAt": BASE_TIME},
    ])
    login_as(client, student)

    response = client.get("/application/get")

    assert response.status_code == 200
    applications = response.json()["applications"]
    assert [app["job"]["title"] for app in applications] == ["Second", "First"]
    assert applications[0]["status"] == "accepted"
    assert applications[0]["job"]["company"]["name"] == "Acme"
    assert applications[0]["applicant"] == str(student["_id"])


def test_applied_jobs_none(client, db):
    login_as(client, make_user(db))

    response = client.get("/application/get")

    assert response.status_code == 404
    assert response.json() == {"message": "No Applications", "success": False}


def test_applied_jobs_requires_session(client, db):
    assert client.get("/application/get").status_code == 401


def test_get_company_by_id(client, db):
    company = make_company(db)
    login_as(client, make_user(db))

    response = client.get(f"/company/get/{company['_id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["company"]["_id"] == str(company["_id"])
    assert body["company"]["website"] == "https://acme.example"


def test_get_company_unknown(client, db):
    login_as(client, make_user(db))

    response = client.get("/company/get/65a1b2c3d4e5f60718293a4b")

    assert response.status_code == 404


def test_health_reports_database(client):
    response = client.get("http://testserver/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_openapi_documents_error_envelope(client):
    schema = client.get("http://testserver/openapi.json").json()

    assert "ErrorResponse" in schema["components"]["schemas"]
    responses = schema["paths"]["/api/v1/job/get/{job_id}"]["get"]["responses"]
    assert responses["404"]["content"]["application/json"]["schema"] == {
        "$ref": "#/components/schemas/ErrorResponse"
    }
