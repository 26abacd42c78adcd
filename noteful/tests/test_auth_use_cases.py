from __future__ import annotations

import threading

import pytest

from noteful.application.auth.strategies import LoginStrategy, RefreshStrategy
from noteful.application.services.tokens import JwtTokenIssuer
from noteful.application.use_cases.users.login_user import LoginUserUseCase
from noteful.application.use_cases.users.refresh_token import RefreshTokenUseCase
from noteful.application.use_cases.users.register_user import RegisterUserUseCase
from noteful.domain.users.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidOrExpiredTokenError,
    OutOfRangeError,
)


@pytest.fixture()
def register(users, hasher) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=hasher)


@pytest.fixture()
def login(users, hasher, issuer: JwtTokenIssuer) -> LoginUserUseCase:
    return LoginUserUseCase(
        strategy=LoginStrategy(users=users, password_hasher=hasher), tokens=issuer
    )


@pytest.fixture()
def refresh(issuer: JwtTokenIssuer) -> RefreshTokenUseCase:
    return RefreshTokenUseCase(strategy=RefreshStrategy(tokens=issuer), tokens=issuer)


def test_register_user_success(register: RegisterUserUseCase, users) -> None:
    user = register.execute(
        {"username": "alice", "password": "secret123", "fullname": " Alice Example "}
    )

    assert user.username == "alice"
    assert user.fullname == "Alice Example"
    stored = users.find_by_username("alice")
    assert stored is not None
    assert stored.password_hash == "hashed:secret123"
    assert "password_hash" not in user.to_dict()


def test_register_user_invalid_payload_stores_nothing(register: RegisterUserUseCase, users) -> None:
    with pytest.raises(OutOfRangeError):
        register.execute({"username": "alice", "password": "1"})

    assert users.find_by_username("alice") is None


def test_register_user_duplicate_raises(register: RegisterUserUseCase) -> None:
    register.execute({"username": "alice", "password": "secret123"})

    with pytest.raises(DuplicateUsernameError) as exc_info:
        register.execute({"username": "alice", "password": "other-secret"})

    assert exc_info.value.to_dict()["message"] == "The username already exists"


def test_concurrent_registrations_allow_one_winner(register: RegisterUserUseCase) -> None:
    barrier = threading.Barrier(8)
    results: list[str] = []
    lock = threading.Lock()

    def _attempt() -> None:
        barrier.wait()
        try:
            register.execute({"username": "alice", "password": "secret123"})
            outcome = "created"
        except DuplicateUsernameError:
            outcome = "duplicate"
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=_attempt) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count("created") == 1
    assert results.count("duplicate") == 7


def test_login_user_success(
    register: RegisterUserUseCase, login: LoginUserUseCase, issuer: JwtTokenIssuer
) -> None:
    alice = register.execute({"username": "alice", "password": "secret123"})

    token = login.execute("alice", "secret123")

    assert issuer.verify(token) == alice


def test_login_user_invalid_credentials(register: RegisterUserUseCase, login: LoginUserUseCase) -> None:
    register.execute({"username": "alice", "password": "secret123"})

    with pytest.raises(InvalidCredentialsError):
        login.execute("alice", "wrong")
    with pytest.raises(InvalidCredentialsError):
        login.execute("bob", "secret123")


def test_refresh_reissues_for_same_user(
    register: RegisterUserUseCase,
    login: LoginUserUseCase,
    refresh: RefreshTokenUseCase,
    issuer: JwtTokenIssuer,
) -> None:
    alice = register.execute({"username": "alice", "password": "secret123"})
    token = login.execute("alice", "secret123")

    renewed = refresh.execute(token)

    assert issuer.verify(renewed) == alice


def test_refresh_rejects_invalid_token(refresh: RefreshTokenUseCase) -> None:
    with pytest.raises(InvalidOrExpiredTokenError):
        refresh.execute("not-a-token")
