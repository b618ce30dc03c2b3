from datetime import date
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from dtos import UserDTO
from exceptions import AuthorizationError, ServiceError
from model.timesheet_model import Timesheet
from model.usermodels import Gender, User
from repository import TimesheetRepository, UserRepository
from service.user_service import UserService

from conftest import PASSWORD, hasher


@pytest.fixture
def service(db_session):
    return UserService(UserRepository(db_session), TimesheetRepository(db_session), hasher=hasher)


def new_user_dto(**overrides) -> UserDTO:
    data = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "date_of_birth": "1990-05-01",
        "gender": "female",
        "email": "ada@example.com",
        "password": "correct-horse",
    }
    data.update(overrides)
    return UserDTO.from_dict(data)


def test_create_hashes_the_password(service, make_user):
    actor = make_user()

    user = service.create(actor, new_user_dto())

    assert user.id is not None
    assert user.password != "correct-horse"
    assert hasher.verify("correct-horse", user.password)


def test_register_needs_no_actor(service):
    user = service.register(new_user_dto(email="new@example.com"))

    assert user.email == "new@example.com"
    assert hasher.verify("correct-horse", user.password)


def test_find_by_id_returns_none_when_missing(service, make_user):
    assert service.find_by_id(make_user(), 9999) is None


def test_find_all_filters_are_combined(service, make_user):
    actor = make_user(first_name="Zed")
    make_user(first_name="Johnny", last_name="Smith", gender=Gender.male)
    make_user(first_name="John", last_name="Doe", gender=Gender.male)
    make_user(first_name="Joan", last_name="Smithers", gender=Gender.female)

    found = service.find_all(actor, {"first_name": "JOH", "last_name": "smith"})

    assert [u.first_name for u in found] == ["Johnny"]


def test_find_all_matches_birth_date_by_day(service, make_user):
    actor = make_user(date_of_birth=date(1980, 1, 1))
    born = make_user(date_of_birth=date(1995, 7, 14))

    found = service.find_all(actor, {"date_of_birth": "1995-07-14", "email": ""})

    assert [u.id for u in found] == [born.id]


def test_update_touches_only_present_fields(service, make_user):
    actor = make_user()
    user = make_user(first_name="John", last_name="Doe", email="john@example.com")

    updated = service.update(actor, user.id, UserDTO.from_dict({"first_name": "Jane"}))

    assert updated.first_name == "Jane"
    assert updated.last_name == "Doe"
    assert updated.email == "john@example.com"
    assert hasher.verify(PASSWORD, updated.password)


def test_update_rehashes_a_new_password(service, make_user):
    actor = make_user()
    user = make_user()

    updated = service.update(actor, user.id, UserDTO.from_dict({"password": "brand-new-pass"}))

    assert hasher.verify("brand-new-pass", updated.password)


def test_update_returns_none_when_missing(service, make_user):
    assert service.update(make_user(), 9999, UserDTO.from_dict({"first_name": "X"})) is None


def test_delete_removes_the_user_and_their_timesheets(service, db_session, make_user, make_project, make_timesheet):
    actor = make_user()
    user = make_user()
    project = make_project(members=[user])
    make_timesheet(user, project)
    make_timesheet(user, project)
    kept = make_timesheet(actor, project)
    user_id = user.id

    assert service.delete(actor, user_id) is True

    assert db_session.get(User, user_id) is None
    assert [t.id for t in db_session.query(Timesheet).all()] == [kept.id]


def test_delete_returns_false_when_missing(service, make_user):
    assert service.delete(make_user(), 9999) is False


def test_self_delete_is_denied(service, db_session, make_user):
    user = make_user()

    with pytest.raises(AuthorizationError):
        service.delete(user, user.id)

    assert db_session.get(User, user.id) is not None


def test_store_failure_becomes_service_error(make_user):
    users = MagicMock(spec=UserRepository)
    users.create.side_effect = OperationalError("INSERT", {}, Exception("disk full"))
    service = UserService(users, MagicMock(spec=TimesheetRepository), hasher=hasher)

    with pytest.raises(ServiceError) as excinfo:
        service.create(make_user(), new_user_dto())

    assert excinfo.value.message == "Failed to create user. Please try again."
    assert isinstance(excinfo.value.__cause__, OperationalError)
    users.rollback.assert_called_once()


def test_unexpected_failure_becomes_service_error(make_user):
    users = MagicMock(spec=UserRepository)
    users.get_by_id.side_effect = RuntimeError("boom")
    service = UserService(users, MagicMock(spec=TimesheetRepository), hasher=hasher)

    with pytest.raises(ServiceError) as excinfo:
        service.find_by_id(make_user(), 1)

    assert excinfo.value.message == "An unexpected error occurred. Please try again."


def test_created_user_reads_back_unchanged(service, db_session, make_user):
    actor = make_user()
    created = service.create(actor, new_user_dto())
    db_session.expire_all()

    found = service.find_by_id(actor, created.id)

    assert found.id == created.id
    assert found.first_name == "Ada"
    assert found.last_name == "Lovelace"
    assert found.date_of_birth == date(1990, 5, 1)
    assert found.gender == Gender.female
    assert found.email == "ada@example.com"
    assert hasher.verify("correct-horse", found.password)
