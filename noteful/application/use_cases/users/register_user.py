# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from noteful.domain.users.entities import NewUser, PublicUser
from noteful.domain.users.repositories import PasswordHasher, UserRepository
from noteful.domain.users.validation import validate_registration
from noteful.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, payload: Any) -> PublicUser:
        registration = validate_registration(payload)
        hashed = self._password_hasher.hash(registration.password)
        persisted = self._users.create(
            NewUser(
                username=registration.username,
                fullname=registration.fullname,
                password_hash=hashed,
            )
        )
        logger.info(f"users.register: ok user_id={persisted.id}")
        return persisted.public()
