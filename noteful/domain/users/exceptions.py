# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from noteful.shared.errors.base import DomainError, ValidationError


class MissingFieldError(ValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Missing '{field}' in request body", location=field, code="missing_field")
        self.field = field


class WrongTypeError(ValidationError):
    def __init__(self, field: str) -> None:
        super().__init__("Incorrect field type: expected string", location=field, code="wrong_type")
        self.field = field


class NotTrimmedError(ValidationError):
    def __init__(self, field: str) -> None:
        super().__init__("Cannot start or end with whitespace", location=field, code="not_trimmed")
        self.field = field


class OutOfRangeError(ValidationError):
    def __init__(self, field: str, *, min_length: int | None = None, max_length: int | None = None) -> None:
        if min_length is not None:
            message = f"Must be at least {min_length} characters long"
        else:
            message = f"Must be at most {max_length} characters long"
        super().__init__(message, location=field, code="out_of_range")
        self.field = field
        self.min_length = min_length
        self.max_length = max_length


class DuplicateUsernameError(DomainError):
    default_code = "duplicate_username"
    default_status = HTTPStatus.BAD_REQUEST
    default_message = "The username already exists"

    def __init__(self) -> None:
        super().__init__(context={"location": "username"})


class InvalidCredentialsError(DomainError):
    default_code = "invalid_credentials"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "Unauthorized"


class InvalidOrExpiredTokenError(DomainError):
    default_code = "invalid_or_expired_token"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "Unauthorized"
