"""Observability utilities for the screening service."""
from .logger import log_event

__all__ = ["log_event"]
