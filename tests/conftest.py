import os

# Point settings at an in-memory database before the app is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["SMTP_HOST"] = ""
os.environ["ADMIN_EMAIL"] = ""
os.environ["ADMIN_PASSWORD"] = ""

import pytest
from fastapi.testclient import TestClient

import recruit_portal.models  # noqa: F401
from recruit_portal.core.config import get_settings
from recruit_portal.db.database import Base, engine, get_db_session
from recruit_portal.main import app
from recruit_portal.services.admin_service import create_admin

ADMIN_EMAIL = "reviewer@example.com"
ADMIN_PASSWORD = "correct-horse"


def make_recruit_payload(student_id="22101001", **overrides):
    """Required fields only, unless overridden."""
    payload = {
        "first_name": "Ayesha",
        "last_name": "Rahman",
        "student_id": student_id,
        "personal_email": f"applicant{student_id}@example.com",
        "gsuite_email": f"{student_id}@g.university.edu",
        "phone_number": "01712345678",
        "enrollment_semester": "Spring 2023",
        "residential_semester": "Summer 2023",
        "current_semester": "Fall 2025",
        "preferred_department": "it",
        "preferred_department_2": "rpm",
        "about": "I build line-following robots and want to help run workshops.",
        "facebook_link": "https://facebook.com/ayesha.rahman",
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def test_db():
    # Create the tables
    Base.metadata.create_all(bind=engine)
    yield
    # Drop the tables
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin():
    with get_db_session() as db:
        create_admin(db, ADMIN_EMAIL, ADMIN_PASSWORD)
    return {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}


@pytest.fixture
def auth_headers(client, admin):
    response = client.post("/auth/login", json=admin)
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def recruit_payload():
    return make_recruit_payload
