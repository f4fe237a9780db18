def create(client, payload):
    response = client.post("/recruits", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_recruit_with_required_fields_only(client, recruit_payload):
    data = create(client, recruit_payload())

    assert isinstance(data["id"], int)
    assert data["student_id"] == "22101001"
    assert data["created_at"]
    assert data["updated_at"]
    for optional in ("hobbies", "skills", "linkedin_link", "github_link", "portfolio_link"):
        assert data[optional] is None


def test_create_recruit_blank_optional_links_stored_as_null(client, recruit_payload):
    data = create(client, recruit_payload(linkedin_link="", github_link="", portfolio_link="", hobbies="  "))

    assert data["linkedin_link"] is None
    assert data["github_link"] is None
    assert data["portfolio_link"] is None
    assert data["hobbies"] is None


def test_create_recruit_with_optional_fields(client, recruit_payload):
    data = create(client, recruit_payload(
        hobbies="Chess",
        skills="Python, soldering",
        github_link="https://github.com/ayesha",
    ))

    assert data["hobbies"] == "Chess"
    assert data["skills"] == "Python, soldering"
    assert data["github_link"] == "https://github.com/ayesha"


def test_duplicate_student_id_is_conflict(client, recruit_payload):
    create(client, recruit_payload(student_id="22109999"))

    response = client.post("/recruits", json=recruit_payload(student_id="22109999", first_name="Other"))

    assert response.status_code == 409
    assert "22109999" in response.json()["detail"]
    assert "already been submitted" in response.json()["detail"]


def test_create_ignores_client_supplied_timestamps_and_id(client, recruit_payload):
    data = create(client, recruit_payload(id=999, created_at="2000-01-01T00:00:00"))

    assert data["id"] != 999
    assert not data["created_at"].startswith("2000")


def test_create_rejects_invalid_email(client, recruit_payload):
    response = client.post("/recruits", json=recruit_payload(personal_email="not-an-email"))

    assert response.status_code == 400
    assert "personal_email" in response.json()["detail"]


def test_create_rejects_invalid_facebook_link(client, recruit_payload):
    response = client.post("/recruits", json=recruit_payload(facebook_link="facebook"))

    assert response.status_code == 400
    assert "Invalid Facebook URL" in response.json()["detail"]


def test_create_rejects_short_about_and_missing_fields(client, recruit_payload):
    response = client.post("/recruits", json=recruit_payload(about="short"))
    assert response.status_code == 400

    payload = recruit_payload()
    del payload["last_name"]
    response = client.post("/recruits", json=payload)
    assert response.status_code == 400
    assert "last_name" in response.json()["detail"]


def test_list_requires_token(client):
    response = client.get("/recruits")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_list_with_invalid_token(client):
    response = client.get("/recruits", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_list_counts_created_minus_deleted(client, auth_headers, recruit_payload):
    ids = [create(client, recruit_payload(student_id=f"2210100{i}"))["id"] for i in range(3)]
    assert client.delete(f"/recruits/{ids[1]}", headers=auth_headers).status_code == 204

    response = client.get("/recruits", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert isinstance(data, list)
    assert len(data) == 2
    assert {r["id"] for r in data} == {ids[0], ids[2]}


def test_get_recruit(client, auth_headers, recruit_payload):
    created = create(client, recruit_payload())

    response = client.get(f"/recruits/{created['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_recruit_is_not_found(client, auth_headers):
    response = client.get("/recruits/4242", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Recruit with ID 4242 not found"


def test_get_requires_token(client, recruit_payload):
    created = create(client, recruit_payload())
    assert client.get(f"/recruits/{created['id']}").status_code == 401


def test_update_phone_keeps_identity_and_bumps_updated_at(client, auth_headers, recruit_payload):
    created = create(client, recruit_payload())

    response = client.patch(
        f"/recruits/{created['id']}",
        json={"phone_number": "01898765432"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["phone_number"] == "01898765432"
    assert updated["id"] == created["id"]
    assert updated["student_id"] == created["student_id"]
    assert updated["created_at"] == created["created_at"]
    assert updated["updated_at"] != created["updated_at"]
    # Untouched fields survive the partial update
    assert updated["about"] == created["about"]


def test_update_to_existing_student_id_is_conflict(client, auth_headers, recruit_payload):
    create(client, recruit_payload(student_id="22100001"))
    second = create(client, recruit_payload(student_id="22100002"))

    response = client.patch(
        f"/recruits/{second['id']}",
        json={"student_id": "22100001"},
        headers=auth_headers,
    )

    assert response.status_code == 409
    assert response.json()["detail"] == 'Another recruit already exists with student ID "22100001".'


def test_update_keeping_own_student_id_is_allowed(client, auth_headers, recruit_payload):
    created = create(client, recruit_payload())

    response = client.patch(
        f"/recruits/{created['id']}",
        json={"student_id": created["student_id"], "skills": "CAD"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["skills"] == "CAD"


def test_update_null_required_field_is_bad_request(client, auth_headers, recruit_payload):
    created = create(client, recruit_payload())

    response = client.patch(f"/recruits/{created['id']}", json={"first_name": None}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Database error:")


def test_update_unknown_recruit_is_not_found(client, auth_headers):
    response = client.patch("/recruits/77", json={"hobbies": "Chess"}, headers=auth_headers)
    assert response.status_code == 404


def test_update_requires_token(client, recruit_payload):
    created = create(client, recruit_payload())
    response = client.patch(f"/recruits/{created['id']}", json={"hobbies": "Chess"})
    assert response.status_code == 401


def test_delete_then_get_is_not_found(client, auth_headers, recruit_payload):
    created = create(client, recruit_payload())

    response = client.delete(f"/recruits/{created['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert response.content == b""

    assert client.get(f"/recruits/{created['id']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/recruits/{created['id']}", headers=auth_headers).status_code == 404


def test_delete_requires_token(client, recruit_payload):
    created = create(client, recruit_payload())
    assert client.delete(f"/recruits/{created['id']}").status_code == 401


def test_deleted_student_id_can_submit_again(client, auth_headers, recruit_payload):
    created = create(client, recruit_payload(student_id="22105555"))
    client.delete(f"/recruits/{created['id']}", headers=auth_headers)

    response = client.post("/recruits", json=recruit_payload(student_id="22105555"))
    assert response.status_code == 201


def test_recruit_options_are_public(client):
    response = client.get("/recruits/options")

    assert response.status_code == 200
    data = response.json()
    codes = [d["value"] for d in data["departments"]]
    assert codes[:2] == ["fm", "it"]
    assert "N/A" in data["semesters"]
    assert data["default_current_semester"] == "Fall 2025"


def test_oversized_id_is_not_found(client, auth_headers):
    too_big = "99999999999999999999"

    assert client.get(f"/recruits/{too_big}", headers=auth_headers).status_code == 404
    assert client.patch(f"/recruits/{too_big}", json={"hobbies": "Chess"}, headers=auth_headers).status_code == 404
    assert client.delete(f"/recruits/{too_big}", headers=auth_headers).status_code == 404


def test_update_blank_hobbies_and_skills_stored_as_null(client, auth_headers, recruit_payload):
    created = create(client, recruit_payload(hobbies="Chess", skills="CAD"))

    response = client.patch(
        f"/recruits/{created['id']}",
        json={"hobbies": "", "skills": "   "},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["hobbies"] is None
    assert response.json()["skills"] is None
