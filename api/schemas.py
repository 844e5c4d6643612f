"""Pydantic schemas for the screening API."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from interview_session import StartResult, UserInfo


class StartReq(BaseModel):
    candidate_id: str
    user_info: UserInfo = Field(default_factory=UserInfo)


class OnboardingReq(BaseModel):
    candidate_id: str
    user_info: UserInfo = Field(default_factory=UserInfo)


class SubmitReq(BaseModel):
    session_id: str
    answer: str = ""
    question_number: Optional[int] = Field(default=None, ge=1)


class TerminateReq(BaseModel):
    session_id: str


class UpdateUserInfoReq(BaseModel):
    session_id: str  # Session id, or an intake id from onboarding
    user_info: UserInfo


class UpdateUserInfoResp(BaseModel):
    success: bool = True
    missing_fields: List[str] = Field(default_factory=list)
    started: Optional[StartResult] = None


class ReferralReq(BaseModel):
    code: str = ""


class ReferralResp(BaseModel):
    valid: bool


class TokenReq(BaseModel):
    token: str = ""


class TokenResp(BaseModel):
    valid: bool
    uid: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
