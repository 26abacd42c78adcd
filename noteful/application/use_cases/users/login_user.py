# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from noteful.application.auth.strategies import AuthFailure, LoginCredentials, LoginStrategy
from noteful.domain.users.repositories import TokenIssuer


class LoginUserUseCase:
    def __init__(
        self,
        *,
        strategy: LoginStrategy,
        tokens: TokenIssuer,
    ) -> None:
        self._strategy = strategy
        self._tokens = tokens

    def execute(self, username: str, password: str) -> str:
        outcome = self._strategy.authenticate(LoginCredentials(username=username, password=password))
        if isinstance(outcome, AuthFailure):
            raise outcome.error
        return self._tokens.issue(outcome.user)
