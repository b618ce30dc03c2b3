from datetime import date

from model.Project_model import ProjectStatus
from model.timesheet_model import Timesheet


def test_create_project(client, make_user, auth_headers):
    r = client.post("/projects", json={
        "name": "Apollo",
        "department": "Engineering",
        "start_date": "2024-01-01",
        "end_date": "2024-12-31",
    }, headers=auth_headers(make_user()))

    assert r.status_code == 201, r.text
    data = r.json()["data"]
    assert data["status"] == "active"
    assert data["end_date"] == "2024-12-31"


def test_create_project_rejects_end_before_start(client, make_user, auth_headers):
    r = client.post("/projects", json={
        "name": "Apollo",
        "department": "Engineering",
        "start_date": "2024-06-01",
        "end_date": "2024-01-01",
    }, headers=auth_headers(make_user()))

    assert r.status_code == 422


def test_create_project_rejects_unknown_status(client, make_user, auth_headers):
    r = client.post("/projects", json={
        "name": "Apollo",
        "department": "Engineering",
        "start_date": "2024-01-01",
        "status": "paused",
    }, headers=auth_headers(make_user()))

    assert r.status_code == 422


def test_list_projects_by_status_and_department(client, make_user, make_project, auth_headers):
    actor = make_user()
    wanted = make_project(status=ProjectStatus.active, department="Engineering")
    make_project(status=ProjectStatus.active, department="Marketing")
    make_project(status=ProjectStatus.cancelled, department="Engineering")

    r = client.get(
        "/projects",
        params={"status": "active", "department": "Engineering"},
        headers=auth_headers(actor),
    )

    assert r.status_code == 200
    assert [p["id"] for p in r.json()["data"]] == [wanted.id]


def test_show_missing_project(client, make_user, auth_headers):
    r = client.get("/projects/9999", headers=auth_headers(make_user()))

    assert r.status_code == 404
    assert r.json()["detail"] == "Project not found"


def test_update_project(client, make_user, make_project, auth_headers):
    project = make_project(name="Apollo", end_date=date(2024, 12, 31))

    r = client.post(
        "/projects/update",
        json={"id": project.id, "status": "completed", "end_date": None},
        headers=auth_headers(make_user()),
    )

    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["status"] == "completed"
    assert data["end_date"] is None
    assert data["name"] == "Apollo"


def test_update_project_end_date_before_stored_start(client, make_user, make_project, auth_headers):
    project = make_project(start_date=date(2024, 6, 1))

    r = client.post(
        "/projects/update",
        json={"id": project.id, "end_date": "2024-01-01"},
        headers=auth_headers(make_user()),
    )

    assert r.status_code == 422
    assert r.json()["errors"] == {"end_date": ["The end date must be a date after or equal to start date."]}


def test_delete_project_removes_its_timesheets(client, db_session, make_user, make_project, make_timesheet, auth_headers):
    actor = make_user()
    project = make_project(members=[actor])
    make_timesheet(actor, project)

    r = client.post("/projects/delete", json={"id": project.id}, headers=auth_headers(actor))

    assert r.status_code == 200
    assert db_session.query(Timesheet).count() == 0


def test_delete_missing_project(client, make_user, auth_headers):
    r = client.post("/projects/delete", json={"id": 9999}, headers=auth_headers(make_user()))

    assert r.status_code == 404


def test_show_project(client, make_user, auth_headers):
    headers = auth_headers(make_user())
    created = client.post("/projects", json={
        "name": "Apollo",
        "department": "Engineering",
        "start_date": "2024-01-01",
        "end_date": "2024-06-30",
        "status": "cancelled",
    }, headers=headers).json()["data"]

    r = client.get(f"/projects/{created['id']}", headers=headers)

    assert r.status_code == 200
    data = r.json()["data"]
    assert data["id"] == created["id"]
    assert data["name"] == "Apollo"
    assert data["department"] == "Engineering"
    assert data["start_date"] == "2024-01-01"
    assert data["end_date"] == "2024-06-30"
    assert data["status"] == "cancelled"
