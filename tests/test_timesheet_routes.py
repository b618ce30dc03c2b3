def timesheet_payload(user, project, **overrides):
    payload = {
        "user_id": user.id,
        "project_id": project.id,
        "task_name": "Code review",
        "date": "2024-02-01",
        "hours": 7.5,
    }
    payload.update(overrides)
    return payload


def test_create_timesheet_embeds_user_and_project(client, make_user, make_project, auth_headers):
    user = make_user()
    project = make_project(members=[user])

    r = client.post("/timesheets", json=timesheet_payload(user, project), headers=auth_headers(user))

    assert r.status_code == 201, r.text
    data = r.json()["data"]
    assert data["hours"] == 7.5
    assert data["user"]["id"] == user.id
    assert "password" not in data["user"]
    assert data["project"]["id"] == project.id


def test_create_timesheet_with_unknown_project(client, make_user, make_project, auth_headers):
    user = make_user()
    project = make_project()

    r = client.post(
        "/timesheets",
        json=timesheet_payload(user, project, project_id=9999),
        headers=auth_headers(user),
    )

    assert r.status_code == 422
    assert r.json()["detail"] == "The selected project id is invalid."


def test_create_timesheet_rejects_hours_out_of_range(client, make_user, make_project, auth_headers):
    user = make_user()
    project = make_project()

    r = client.post("/timesheets", json=timesheet_payload(user, project, hours=25), headers=auth_headers(user))

    assert r.status_code == 422


def test_list_timesheets_by_project(client, make_user, make_project, make_timesheet, auth_headers):
    user = make_user()
    apollo = make_project()
    other = make_project()
    wanted = make_timesheet(user, apollo)
    make_timesheet(user, other)

    r = client.get("/timesheets", params={"project_id": apollo.id}, headers=auth_headers(user))

    assert r.status_code == 200
    data = r.json()["data"]
    assert [t["id"] for t in data] == [wanted.id]
    assert data[0]["project"]["id"] == apollo.id


def test_project_member_can_view_timesheet(client, make_user, make_project, make_timesheet, auth_headers):
    owner = make_user()
    member = make_user()
    timesheet = make_timesheet(owner, make_project(members=[owner, member]))

    r = client.get(f"/timesheets/{timesheet.id}", headers=auth_headers(member))

    assert r.status_code == 200
    assert r.json()["data"]["id"] == timesheet.id


def test_outsider_cannot_view_timesheet(client, make_user, make_project, make_timesheet, auth_headers):
    owner = make_user()
    timesheet = make_timesheet(owner, make_project(members=[owner]))

    r = client.get(f"/timesheets/{timesheet.id}", headers=auth_headers(make_user()))

    assert r.status_code == 403


def test_show_missing_timesheet(client, make_user, auth_headers):
    r = client.get("/timesheets/9999", headers=auth_headers(make_user()))

    assert r.status_code == 404
    assert r.json()["detail"] == "Timesheet not found"


def test_owner_updates_timesheet(client, make_user, make_project, make_timesheet, auth_headers):
    owner = make_user()
    timesheet = make_timesheet(owner, make_project(), task_name="Old task", hours=2.0)

    r = client.post("/timesheets/update", json={"id": timesheet.id, "hours": 3.25}, headers=auth_headers(owner))

    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["hours"] == 3.25
    assert data["task_name"] == "Old task"


def test_member_cannot_update_timesheet(client, make_user, make_project, make_timesheet, auth_headers):
    owner = make_user()
    member = make_user()
    timesheet = make_timesheet(owner, make_project(members=[owner, member]))

    r = client.post("/timesheets/update", json={"id": timesheet.id, "hours": 1}, headers=auth_headers(member))

    assert r.status_code == 403
    assert r.json()["detail"] == "This action is unauthorized."


def test_owner_deletes_timesheet(client, make_user, make_project, make_timesheet, auth_headers):
    owner = make_user()
    timesheet_id = make_timesheet(owner, make_project()).id
    headers = auth_headers(owner)

    assert client.post("/timesheets/delete", json={"id": timesheet_id}, headers=headers).status_code == 200
    assert client.get(f"/timesheets/{timesheet_id}", headers=headers).status_code == 404


def test_non_owner_cannot_delete_timesheet(client, make_user, make_project, make_timesheet, auth_headers):
    owner = make_user()
    timesheet = make_timesheet(owner, make_project())

    r = client.post("/timesheets/delete", json={"id": timesheet.id}, headers=auth_headers(make_user()))

    assert r.status_code == 403
