# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import NewUser, PublicUser, User


class UserRepository(Protocol):
    def create(self, user: NewUser) -> User: ...
    def find_by_username(self, username: str) -> User | None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, user: PublicUser) -> str: ...
    def verify(self, token: str) -> PublicUser: ...
