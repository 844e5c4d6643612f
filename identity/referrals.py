"""Referral code validation."""
from __future__ import annotations

from config.settings import settings


def validate_referral(code: str) -> bool:
    """Return True when ``code`` is one of the configured referral codes (exact match)."""

    return bool(code) and code in settings.REFERRAL_CODES


__all__ = ["validate_referral"]
