"""Use-case for exchanging a valid token for a fresh one."""

from __future__ import annotations

from noteful.application.auth.strategies import AuthFailure, RefreshStrategy
from noteful.domain.users.repositories import TokenIssuer


class RefreshTokenUseCase:
    def __init__(self, *, strategy: RefreshStrategy, tokens: TokenIssuer) -> None:
        self._strategy = strategy
        self._tokens = tokens

    def execute(self, token: str) -> str:
        outcome = self._strategy.authenticate(token)
        if isinstance(outcome, AuthFailure):
            raise outcome.error
        return self._tokens.issue(outcome.user)
