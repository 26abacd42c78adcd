# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from noteful.shared.config import DatabaseConfig
from noteful.shared.logging import logger

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class Base(DeclarativeBase):
    pass


def build_engine(config: DatabaseConfig) -> Engine:
    options: dict[str, Any] = {"echo": False, "pool_pre_ping": True}
    if config.url.startswith("sqlite"):
        options["connect_args"] = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
        if config.url in _MEMORY_URLS:
            # one shared connection, otherwise every checkout sees an empty database
            options["poolclass"] = StaticPool
    else:
        options.update(
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
        )
    engine = create_engine(config.url, **options)
    logger.debug(f"db.engine: created for {engine.url.render_as_string(hide_password=True)}")
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured")
