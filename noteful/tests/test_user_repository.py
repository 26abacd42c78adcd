from __future__ import annotations

import threading
from collections.abc import Iterator
from pathlib import Path

import pytest
from sqlalchemy import select

from noteful.domain.users.entities import NewUser
from noteful.domain.users.exceptions import DuplicateUsernameError
from noteful.infrastructure.db import build_engine, build_session_factory, init_db
from noteful.infrastructure.db.models import User
from noteful.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from noteful.shared.config import DatabaseConfig


@pytest.fixture()
def session_factory(tmp_path: Path) -> Iterator:
    engine = build_engine(DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'users.db'}"))
    init_db(engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture()
def repository(session_factory) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(session_factory)


def _new_user(username: str = "alice") -> NewUser:
    return NewUser(username=username, fullname="Alice Example", password_hash="digest")


def test_create_assigns_opaque_id(repository: SqlAlchemyUserRepository) -> None:
    first = repository.create(_new_user("alice"))
    second = repository.create(_new_user("bob"))

    assert first.id and second.id
    assert first.id != second.id
    assert first.username == "alice"
    assert first.fullname == "Alice Example"


def test_find_by_username(repository: SqlAlchemyUserRepository) -> None:
    created = repository.create(_new_user())

    assert repository.find_by_username("alice") == created
    assert repository.find_by_username("ALICE") is None
    assert repository.find_by_username("nobody") is None


def test_duplicate_username_is_translated(repository: SqlAlchemyUserRepository, session_factory) -> None:
    repository.create(_new_user())

    with pytest.raises(DuplicateUsernameError):
        repository.create(_new_user())

    session = session_factory()
    try:
        assert len(session.scalars(select(User)).all()) == 1
    finally:
        session.close()


def test_concurrent_create_has_single_winner(repository: SqlAlchemyUserRepository) -> None:
    attempts = 2
    barrier = threading.Barrier(attempts)
    outcomes: list[str] = []
    errors: list[BaseException] = []
    lock = threading.Lock()

    def _create() -> None:
        barrier.wait()
        try:
            repository.create(_new_user())
            outcome = "created"
        except DuplicateUsernameError:
            outcome = "duplicate"
        except BaseException as exc:  # noqa: BLE001
            with lock:
                errors.append(exc)
            return
        with lock:
            outcomes.append(outcome)

    threads = [threading.Thread(target=_create) for _ in range(attempts)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert sorted(outcomes) == ["created", "duplicate"]
