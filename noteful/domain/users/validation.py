# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Credential checks for registration payloads.

Checks run in a fixed order and stop at the first violation: presence, type,
trimming, then length. Uniqueness is left to the user store.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .entities import Registration
from .exceptions import MissingFieldError, NotTrimmedError, OutOfRangeError, WrongTypeError

REQUIRED_FIELDS = ("username", "password")
STRING_FIELDS = ("username", "password", "fullname")
TRIMMED_FIELDS = ("username", "password")
# Space separators, line terminators, tab, VT, FF and BOM. Information
# separators \x1c-\x1f and NEL \x85 are not whitespace here, unlike str.strip().
WHITESPACE = (
    " \t\n\v\f\r\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
SIZED_FIELDS: dict[str, tuple[int, int | None]] = {
    "username": (1, None),
    "password": (8, 72),
}


def _check_presence(payload: Mapping[str, Any]) -> None:
    for field in REQUIRED_FIELDS:
        if field not in payload:
            raise MissingFieldError(field)


def _check_types(payload: Mapping[str, Any]) -> None:
    for field in STRING_FIELDS:
        if field in payload and not isinstance(payload[field], str):
            raise WrongTypeError(field)


def _check_trimmed(payload: Mapping[str, Any]) -> None:
    for field in TRIMMED_FIELDS:
        if payload[field].strip(WHITESPACE) != payload[field]:
            raise NotTrimmedError(field)


def _check_lengths(payload: Mapping[str, Any]) -> None:
    for field, (min_length, max_length) in SIZED_FIELDS.items():
        size = len(payload[field])
        if size < min_length:
            raise OutOfRangeError(field, min_length=min_length)
        if max_length is not None and size > max_length:
            raise OutOfRangeError(field, max_length=max_length)


def validate_registration(payload: Any) -> Registration:
    if not isinstance(payload, Mapping):
        payload = {}

    _check_presence(payload)
    _check_types(payload)
    _check_trimmed(payload)
    _check_lengths(payload)

    return Registration(
        username=payload["username"],
        password=payload["password"],
        fullname=payload.get("fullname", "").strip(WHITESPACE),
    )


__all__ = ["validate_registration"]
