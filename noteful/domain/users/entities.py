# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class PublicUser:
    """The only view of a user that leaves the core."""

    id: str
    username: str
    fullname: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "username": self.username, "fullname": self.fullname}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PublicUser:
        user_id = data.get("id")
        username = data.get("username")
        fullname = data.get("fullname", "")
        if not isinstance(user_id, str) or not isinstance(username, str):
            raise ValueError("user view requires string id and username")
        if not isinstance(fullname, str):
            raise ValueError("user view fullname must be a string")
        return cls(id=user_id, username=username, fullname=fullname)


@dataclass(slots=True, frozen=True)
class User:

    id: str
    username: str
    fullname: str
    password_hash: str = field(repr=False)

    def public(self) -> PublicUser:
        return PublicUser(id=self.id, username=self.username, fullname=self.fullname)


@dataclass(slots=True, frozen=True)
class Registration:
    """Registration input that passed every credential check."""

    username: str
    password: str = field(repr=False)
    fullname: str = ""


@dataclass(slots=True, frozen=True)
class NewUser:

    username: str
    fullname: str
    password_hash: str = field(repr=False)
