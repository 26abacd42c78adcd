# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        if field_path:
            fields_set.add(field_path)

        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
            }
        )

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def _first_message(exc: PydanticValidationError) -> tuple[str, str | None]:
    errors = exc.errors()
    if not errors:
        return "Invalid request body", None
    first = errors[0]
    loc = first.get("loc", ())
    field = str(loc[0]) if loc else None
    if first.get("type") == "missing" and field:
        return f"Missing '{field}' in request body", field
    if first.get("type") == "string_type":
        return "Incorrect field type: expected string", field
    return str(first.get("msg", "Invalid request body")), field


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    message, location = _first_message(exc)
    raise ValidationError(message, location=location, context=format_pydantic_errors(exc)) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
