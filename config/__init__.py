"""Configuration package for the screening service."""
from .routing import (
    EVALUATION_KEY,
    QUESTION_KEY,
    SUMMARY_KEY,
    AppConfig,
    LlmRoute,
    load_app_registry,
    load_config,
    resolve_registry,
)
from .settings import Settings, settings

__all__ = [
    "AppConfig",
    "LlmRoute",
    "load_app_registry",
    "load_config",
    "resolve_registry",
    "QUESTION_KEY",
    "EVALUATION_KEY",
    "SUMMARY_KEY",
    "Settings",
    "settings",
]
