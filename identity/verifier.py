from __future__ import annotations  # Identity token verification

import logging
from typing import Optional

import jwt
from pydantic import BaseModel

from config.settings import settings
from interview_session.errors import IdentityVerificationError

logger = logging.getLogger(__name__)


class IdentityClaims(BaseModel):  # Verified caller identity
    uid: str
    email: Optional[str] = None


def verify_token(token: str) -> IdentityClaims:
    """Decode and verify a signed identity token; raise ``IdentityVerificationError`` on any problem."""

    if not token or not token.strip():
        raise IdentityVerificationError("Invalid token")
    options = {"verify_aud": settings.IDENTITY_AUDIENCE is not None}
    try:
        payload = jwt.decode(
            token,
            settings.IDENTITY_JWT_SECRET,
            algorithms=[settings.IDENTITY_JWT_ALGORITHM],
            audience=settings.IDENTITY_AUDIENCE,
            options=options,
        )
    except jwt.ExpiredSignatureError as exc:
        logger.info("Rejected expired identity token")
        raise IdentityVerificationError("Invalid token") from exc
    except jwt.InvalidTokenError as exc:
        logger.info("Rejected identity token: %s", exc)
        raise IdentityVerificationError("Invalid token") from exc

    uid = payload.get("uid") or payload.get("sub")
    if not uid:
        raise IdentityVerificationError("Invalid token")
    return IdentityClaims(uid=str(uid), email=payload.get("email"))


__all__ = ["IdentityClaims", "verify_token"]
