# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `AppState`, the lifecycle of an `Application` during one invocation.
"""
from enum import Enum


class AppState(Enum):
    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    PARSED = "parsed"
    VALIDATED = "validated"
