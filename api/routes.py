"""FastAPI routes for interview session control."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_engine, get_onboarding
from api.schemas import OnboardingReq, StartReq, SubmitReq, TerminateReq, UpdateUserInfoReq, UpdateUserInfoResp
from interview_session import (
    InterviewEngine,
    Session,
    StartResult,
    SubmitResult,
    TerminateResult,
    ValidationFailure,
)
from services.onboarding import OnboardingOutcome, OnboardingService

router = APIRouter(prefix="/api")


@router.post("/start-interview", response_model=StartResult)
def start_interview(req: StartReq, engine: InterviewEngine = Depends(get_engine)) -> StartResult:
    missing = req.user_info.missing_fields()
    if missing:
        raise ValidationFailure(f"Missing required user info: {', '.join(missing)}")
    return engine.start_session(req.candidate_id, req.user_info)


@router.post("/onboarding", response_model=OnboardingOutcome)
def onboarding(req: OnboardingReq, service: OnboardingService = Depends(get_onboarding)) -> OnboardingOutcome:
    return service.register(req.candidate_id, req.user_info)


@router.post("/update-user-info", response_model=UpdateUserInfoResp)
def update_user_info(
    req: UpdateUserInfoReq, service: OnboardingService = Depends(get_onboarding)
) -> UpdateUserInfoResp:
    outcome = service.update_user_info(req.session_id, req.user_info)
    return UpdateUserInfoResp(missing_fields=outcome.missing_fields, started=outcome.started)


@router.post("/submit-answer", response_model=SubmitResult, response_model_exclude_none=True)
def submit_answer(req: SubmitReq, engine: InterviewEngine = Depends(get_engine)) -> SubmitResult:
    return engine.submit_answer(req.session_id, req.answer, question_number=req.question_number)


@router.post("/terminate-interview", response_model=TerminateResult)
def terminate_interview(req: TerminateReq, engine: InterviewEngine = Depends(get_engine)) -> TerminateResult:
    return engine.terminate_interview(req.session_id)


@router.get("/session/{session_id}", response_model=Session)
def get_session(session_id: str, engine: InterviewEngine = Depends(get_engine)) -> Session:
    return engine.get_session(session_id)
