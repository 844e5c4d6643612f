"""Caller identity and referral checks used by the orchestration layer."""
from .referrals import validate_referral
from .verifier import IdentityClaims, verify_token

__all__ = ["IdentityClaims", "validate_referral", "verify_token"]
