from __future__ import annotations

import threading
from collections.abc import Iterator
from datetime import timedelta

import pytest
from flask import Flask
from flask.testing import FlaskClient

from noteful.app import create_app
from noteful.application.services.tokens import JwtTokenIssuer
from noteful.domain.users.entities import NewUser, User
from noteful.domain.users.exceptions import DuplicateUsernameError
from noteful.domain.users.repositories import PasswordHasher, UserRepository
from noteful.infrastructure.container import Container
from noteful.shared.config import AppConfig, DatabaseConfig, TokenSettings

TEST_SECRET = "test-jwt-secret-that-is-long-enough-for-hs256"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1
        self._lock = threading.Lock()

    def create(self, user: NewUser) -> User:
        with self._lock:
            if user.username in self._users:
                raise DuplicateUsernameError()
            created = User(
                id=f"user-{self._seq}",
                username=user.username,
                fullname=user.fullname,
                password_hash=user.password_hash,
            )
            self._seq += 1
            self._users[created.username] = created
            return created

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verify_calls = 0

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls += 1
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def token_settings() -> TokenSettings:
    return TokenSettings(secret=TEST_SECRET, lifetime=timedelta(days=7))


@pytest.fixture()
def issuer(token_settings: TokenSettings) -> JwtTokenIssuer:
    return JwtTokenIssuer(token_settings)


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        JWT_SECRET=TEST_SECRET,
        JWT_EXPIRY="7d",
        PASSWORD_HASH_METHOD="pbkdf2:sha256:1000",
        database=DatabaseConfig(DATABASE_URL="sqlite://"),
    )


@pytest.fixture()
def container(app_config: AppConfig) -> Iterator[Container]:
    built = Container(app_config)
    yield built
    built.engine.dispose()


@pytest.fixture()
def flask_app(container: Container) -> Flask:
    return create_app(container)


@pytest.fixture()
def client(flask_app: Flask) -> Iterator[FlaskClient]:
    with flask_app.test_client() as test_client:
        yield test_client
