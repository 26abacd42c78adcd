# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from noteful.infrastructure.db.session import Base


def _new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"
    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_user_id)
    username: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    fullname: Mapped[str] = mapped_column(String(255), nullable=False, default="", server_default="")
    password_hash: Mapped[str] = mapped_column(String(256))
