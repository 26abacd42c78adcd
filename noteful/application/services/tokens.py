# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Issuing and verifying signed bearer tokens.

Tokens carry the public view of a user under the ``user`` claim, the username
as ``sub`` and ``iat``/``exp`` timestamps. Signing settings are fixed when the
issuer is built.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import jwt

from noteful.domain.users.entities import PublicUser
from noteful.domain.users.exceptions import InvalidOrExpiredTokenError
from noteful.domain.users.repositories import TokenIssuer
from noteful.shared.config import TokenSettings
from noteful.shared.logging import logger

_REQUIRED_CLAIMS = ["exp", "iat", "sub", "user"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        settings: TokenSettings,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._settings = settings
        self._clock = clock

    def issue(self, user: PublicUser) -> str:
        issued_at = self._clock()
        claims = {
            "user": user.to_dict(),
            "sub": user.username,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._settings.lifetime).timestamp()),
        }
        token = jwt.encode(claims, self._settings.secret, algorithm=self._settings.algorithm)
        logger.debug(f"tokens.issue: user_id={user.id} exp={claims['exp']}")
        return token

    def decode(self, token: str) -> dict:
        """Return verified claims or raise :class:`InvalidOrExpiredTokenError`."""
        if not token or not isinstance(token, str):
            raise InvalidOrExpiredTokenError()
        try:
            return jwt.decode(
                token,
                self._settings.secret,
                algorithms=[self._settings.algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.debug("tokens.verify: expired")
            raise InvalidOrExpiredTokenError() from exc
        except jwt.InvalidTokenError as exc:
            logger.debug(f"tokens.verify: invalid ({type(exc).__name__})")
            raise InvalidOrExpiredTokenError() from exc

    def verify(self, token: str) -> PublicUser:
        claims = self.decode(token)
        embedded = claims.get("user")
        if not isinstance(embedded, dict):
            raise InvalidOrExpiredTokenError()
        try:
            user = PublicUser.from_mapping(embedded)
        except ValueError as exc:
            raise InvalidOrExpiredTokenError() from exc
        if claims.get("sub") != user.username:
            raise InvalidOrExpiredTokenError()
        return user
