import os
import sys
from pathlib import Path

# Configure the app for tests before anything reads the environment
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

# Add project root to Python path FIRST
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

# Now import after path is set
from datetime import date
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import model  # noqa: F401
from db.database import Base, enable_sqlite_foreign_keys, get_db
from main import app
from model.Project_model import Project, ProjectStatus
from model.timesheet_model import Timesheet
from model.usermodels import Gender, User
from utils.hashing import PasswordHasher
from utils.token import issue_token

PASSWORD = "secret-password"

hasher = PasswordHasher(rounds=4)
_sequence = count(1)


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def factory(**overrides) -> User:
        n = next(_sequence)
        fields = {
            "first_name": f"First{n}",
            "last_name": f"Last{n}",
            "date_of_birth": date(1990, 1, 1),
            "gender": Gender.other,
            "email": f"user{n}@example.com",
            "password": hasher.hash(PASSWORD),
        }
        fields.update(overrides)
        user = User(**fields)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return factory


@pytest.fixture
def make_project(db_session):
    def factory(members=(), **overrides) -> Project:
        n = next(_sequence)
        fields = {
            "name": f"Project {n}",
            "department": "Engineering",
            "start_date": date(2024, 1, 1),
            "end_date": None,
            "status": ProjectStatus.active,
        }
        fields.update(overrides)
        project = Project(**fields)
        project.users.extend(members)
        db_session.add(project)
        db_session.commit()
        db_session.refresh(project)
        return project

    return factory


@pytest.fixture
def make_timesheet(db_session):
    def factory(user: User, project: Project, **overrides) -> Timesheet:
        fields = {
            "user_id": user.id,
            "project_id": project.id,
            "task_name": "Write tests",
            "date": date(2024, 2, 1),
            "hours": 4.0,
        }
        fields.update(overrides)
        timesheet = Timesheet(**fields)
        db_session.add(timesheet)
        db_session.commit()
        db_session.refresh(timesheet)
        return timesheet

    return factory


@pytest.fixture
def auth_headers(db_session):
    """Return a function producing Authorization headers for a user."""
    def headers_for(user: User) -> dict:
        token = issue_token(db_session, user)
        return {"Authorization": f"Bearer {token}"}

    return headers_for
