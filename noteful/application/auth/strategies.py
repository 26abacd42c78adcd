# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""The two ways a request proves who it is.

``LoginStrategy`` checks a username and password against the user store,
``RefreshStrategy`` checks a previously issued token. Both return either an
:class:`AuthenticatedUser` or an :class:`AuthFailure`; callers pick the
strategy they need directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from functools import cached_property
from typing import Protocol, TypeVar

from noteful.domain.users.entities import PublicUser
from noteful.domain.users.exceptions import InvalidCredentialsError, InvalidOrExpiredTokenError
from noteful.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from noteful.shared.errors.base import AppError
from noteful.shared.logging import logger

RequestT = TypeVar("RequestT", contravariant=True)


class AuthState(StrEnum):
    PENDING = "pending"
    CREDENTIALS_CHECKED = "credentials-checked"
    TOKEN_CHECKED = "token-checked"
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"


@dataclass(slots=True, frozen=True)
class LoginCredentials:
    username: str
    password: str = field(repr=False)


@dataclass(slots=True, frozen=True)
class AuthenticatedUser:
    user: PublicUser
    state: AuthState = AuthState.AUTHENTICATED


@dataclass(slots=True, frozen=True)
class AuthFailure:
    error: AppError
    # last state reached before the rejection
    reached: AuthState = AuthState.PENDING
    state: AuthState = AuthState.REJECTED


class AuthStrategy(Protocol[RequestT]):
    def authenticate(self, request: RequestT) -> AuthenticatedUser | AuthFailure: ...


class LoginStrategy(AuthStrategy[LoginCredentials]):
    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    @cached_property
    def _decoy_hash(self) -> str:
        return self._password_hasher.hash("decoy-password-for-unknown-users")

    def authenticate(self, request: LoginCredentials) -> AuthenticatedUser | AuthFailure:
        user = self._users.find_by_username(request.username)
        state = AuthState.CREDENTIALS_CHECKED

        if user is None:
            # Same hashing cost as a wrong password
            self._password_hasher.verify(request.password, self._decoy_hash)
            logger.info("auth.login: rejected")
            return AuthFailure(error=InvalidCredentialsError(), reached=state)

        if not self._password_hasher.verify(request.password, user.password_hash):
            logger.info("auth.login: rejected")
            return AuthFailure(error=InvalidCredentialsError(), reached=state)

        logger.info(f"auth.login: authenticated user_id={user.id}")
        return AuthenticatedUser(user=user.public())


class RefreshStrategy(AuthStrategy[str]):
    def __init__(self, *, tokens: TokenIssuer) -> None:
        self._tokens = tokens

    def authenticate(self, request: str) -> AuthenticatedUser | AuthFailure:
        try:
            user = self._tokens.verify(request)
        except InvalidOrExpiredTokenError as exc:
            logger.info("auth.refresh: rejected")
            return AuthFailure(error=exc, reached=AuthState.TOKEN_CHECKED)

        logger.info(f"auth.refresh: authenticated user_id={user.id}")
        return AuthenticatedUser(user=user)


__all__ = [
    "AuthFailure",
    "AuthState",
    "AuthStrategy",
    "AuthenticatedUser",
    "LoginCredentials",
    "LoginStrategy",
    "RefreshStrategy",
]
