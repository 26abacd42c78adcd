# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from noteful.application.auth.strategies import LoginStrategy, RefreshStrategy
from noteful.application.services.password_hashing import WerkzeugPasswordHasher
from noteful.application.services.tokens import JwtTokenIssuer
from noteful.application.use_cases.users.login_user import LoginUserUseCase
from noteful.application.use_cases.users.refresh_token import RefreshTokenUseCase
from noteful.application.use_cases.users.register_user import RegisterUserUseCase
from noteful.infrastructure.db import build_engine, build_session_factory
from noteful.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from noteful.interfaces.http.controllers.auth_controller import AuthController
from noteful.interfaces.http.controllers.users_controller import UsersController
from noteful.shared.config import AppConfig, TokenSettings, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config if self._config is not None else load_config()

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def token_settings(self) -> TokenSettings:
        return self.config.token_settings()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.password_hash_method)

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(self.token_settings)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def login_strategy(self) -> LoginStrategy:
        return LoginStrategy(users=self.user_repository, password_hasher=self.password_hasher)

    @cached_property
    def refresh_strategy(self) -> RefreshStrategy:
        return RefreshStrategy(tokens=self.token_issuer)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(strategy=self.login_strategy, tokens=self.token_issuer)

    @cached_property
    def refresh_token_use_case(self) -> RefreshTokenUseCase:
        return RefreshTokenUseCase(strategy=self.refresh_strategy, tokens=self.token_issuer)

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(register_use_case=self.register_user_use_case)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            refresh_use_case=self.refresh_token_use_case,
        )


container = Container()
