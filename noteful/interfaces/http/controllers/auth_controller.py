# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from noteful.application.use_cases.users.login_user import LoginUserUseCase
from noteful.application.use_cases.users.refresh_token import RefreshTokenUseCase
from noteful.domain.users.exceptions import InvalidOrExpiredTokenError
from noteful.interfaces.http.dto.auth import AuthTokenDTO, LoginRequestDTO
from noteful.shared.errors.validation import raise_validation_error
from noteful.shared.logging import logger


def _bearer_token() -> str:
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise InvalidOrExpiredTokenError()
    return token.strip()


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        refresh_use_case: RefreshTokenUseCase,
    ) -> None:
        self._login_use_case = login_use_case
        self._refresh_use_case = refresh_use_case

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        token = self._login_use_case.execute(dto.username, dto.password)

        logger.info("auth.login: token issued")
        return jsonify(AuthTokenDTO(auth_token=token).model_dump(by_alias=True)), 200

    def refresh(self) -> tuple[Response, int]:
        token = self._refresh_use_case.execute(_bearer_token())

        logger.info("auth.refresh: token issued")
        return jsonify(AuthTokenDTO(auth_token=token).model_dump(by_alias=True)), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/refresh", view_func=self.refresh, methods=["POST"])
        return bp
