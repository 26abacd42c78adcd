# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from noteful.domain.users.entities import NewUser
from noteful.domain.users.entities import User as DomainUser
from noteful.domain.users.exceptions import DuplicateUsernameError
from noteful.domain.users.repositories import UserRepository
from noteful.infrastructure.db.models import User
from noteful.infrastructure.unit_of_work import unit_of_work_scope
from noteful.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        fullname=row.fullname or "",
        password_hash=row.password_hash,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def create(self, user: NewUser) -> DomainUser:
        # The UNIQUE index on username decides races, no lookup beforehand.
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    username=user.username,
                    fullname=user.fullname,
                    password_hash=user.password_hash,
                )
                session.add(row)
                session.flush()
                created = _to_domain(row)
        except IntegrityError as exc:
            logger.info("users.create: duplicate username")
            raise DuplicateUsernameError() from exc
        return created

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.username == username)).first()
            if row is None:
                return None
            return _to_domain(row)
