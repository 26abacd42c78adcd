# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .durations import parse_duration
from .settings import AppConfig, DatabaseConfig, SecurityConfig, TokenSettings, load_config

__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "SecurityConfig",
    "TokenSettings",
    "load_config",
    "parse_duration",
]
