# File: tests/test_user_repository.py

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import PersistenceError
from app.models.base import Base
from app.services.user_repository import UserRepository


@pytest.fixture
def repository(db_session):
    return UserRepository(db_session)


def test_list_users_empty(repository):
    assert repository.list_users() == []


def test_insert_assigns_distinct_ids(repository):
    first = repository.insert_user(name="A", email="a@x.com")
    second = repository.insert_user(name="B", email="b@x.com")

    assert first.id is not None
    assert second.id is not None
    assert first.id != second.id
    assert {u.id for u in repository.list_users()} == {first.id, second.id}


def test_get_user_by_id(repository):
    created = repository.insert_user(name="A", email="a@x.com")

    user = repository.get_user_by_id(created.id)
    assert user is not None
    assert (user.id, user.name, user.email) == (created.id, "A", "a@x.com")


def test_get_user_by_id_not_found(repository):
    assert repository.get_user_by_id(12345) is None


def test_update_user_by_id_returns_nothing(repository):
    created = repository.insert_user(name="A", email="a@x.com")

    assert repository.update_user_by_id(created.id, name="B", email="b@x.com") is None

    user = repository.get_user_by_id(created.id)
    assert (user.name, user.email) == ("B", "b@x.com")


def test_update_unknown_id_touches_nothing(repository):
    repository.insert_user(name="A", email="a@x.com")

    repository.update_user_by_id(12345, name="B", email="b@x.com")

    assert [u.name for u in repository.list_users()] == ["A"]
    assert repository.get_user_by_id(12345) is None


def test_delete_user_by_id(repository):
    created = repository.insert_user(name="A", email="a@x.com")

    assert repository.delete_user_by_id(created.id) is True
    assert repository.get_user_by_id(created.id) is None
    assert repository.delete_user_by_id(created.id) is False


def test_values_are_bound_not_interpolated(repository):
    payload = "x'); DROP TABLE users; --"
    created = repository.insert_user(name=payload, email=payload)

    assert repository.get_user_by_id(created.id).name == payload
    assert len(repository.list_users()) == 1


def test_database_errors_become_persistence_errors(engine, repository):
    Base.metadata.drop_all(bind=engine)

    with pytest.raises(PersistenceError) as exc_info:
        repository.list_users()
    assert isinstance(exc_info.value.__cause__, SQLAlchemyError)
    assert exc_info.value.operation == "list users"

    with pytest.raises(PersistenceError):
        repository.insert_user(name="A", email="a@x.com")

    # the session is usable again once the store recovers
    Base.metadata.create_all(bind=engine)
    assert repository.list_users() == []
