# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from noteful.application.use_cases.users.register_user import RegisterUserUseCase
from noteful.interfaces.http.dto.auth import UserDTO


class UsersController:
    def __init__(self, *, register_use_case: RegisterUserUseCase) -> None:
        self._register_use_case = register_use_case

    def register(self) -> tuple[Response, int]:
        payload = request.get_json(silent=True)
        user = self._register_use_case.execute(payload if isinstance(payload, dict) else {})

        response = jsonify(UserDTO(**user.to_dict()).model_dump())
        response.headers["Location"] = f"{request.path.rstrip('/')}/{user.id}"
        return response, 201

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api")
        bp.add_url_rule("/users", view_func=self.register, methods=["POST"])
        return bp
