from __future__ import annotations  # FastAPI server exposing the screening interview

import logging
import re
from typing import List, Optional

from fastapi import Depends, FastAPI, File, Request, Response, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.deps import get_candidates
from api.routes import router as interview_router
from api.schemas import ReferralReq, ReferralResp, TokenReq, TokenResp
from config.settings import settings
from identity import validate_referral, verify_token
from interview_session import (
    Candidate,
    CandidateRepository,
    CandidateSummary,
    IdentityVerificationError,
    SessionConflictError,
    ValidationFailure,
)
from interview_session.errors import CandidateNotFoundError, SessionNotFoundError
from resume_intake import ResumeExtraction, check_upload, parse_resume
from services import directory
from session_reports import generate_candidate_report_pdf


logger = logging.getLogger(__name__)

app = FastAPI(title="Screening Interview API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(interview_router)


@app.exception_handler(SessionNotFoundError)
@app.exception_handler(CandidateNotFoundError)
def _not_found(_: Request, exc: Exception) -> JSONResponse:  # Unknown session or candidate
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(SessionConflictError)
def _conflict(_: Request, exc: SessionConflictError) -> JSONResponse:  # Completed session or stale step
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(ValidationFailure)
def _invalid(_: Request, exc: ValidationFailure) -> JSONResponse:  # Rejected input
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(IdentityVerificationError)
def _unauthorized(_: Request, exc: IdentityVerificationError) -> JSONResponse:  # Bad identity token
    return JSONResponse(status_code=401, content={"valid": False, "message": str(exc)})


@app.exception_handler(Exception)
def _unexpected(request: Request, exc: Exception) -> JSONResponse:  # Anything unmapped
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.post("/api/validate-referral", response_model=ReferralResp)
def validate_referral_code(payload: ReferralReq) -> ReferralResp:  # Check a referral code
    return ReferralResp(valid=validate_referral(payload.code.strip()))


@app.post("/api/verify-token", response_model=TokenResp, response_model_exclude_none=True)
def verify_identity_token(payload: TokenReq) -> TokenResp:  # Verify caller identity token
    claims = verify_token(payload.token)
    return TokenResp(valid=True, uid=claims.uid, email=claims.email)


@app.post("/api/upload-resume", response_model=ResumeExtraction)
async def upload_resume(resume: Optional[UploadFile] = File(None)) -> ResumeExtraction:  # Parse résumé upload
    if resume is None:
        raise ValidationFailure("No file uploaded")
    data = await resume.read()
    content_type = check_upload(data, resume.content_type, resume.filename)
    extraction = parse_resume(data, content_type)
    logger.info(
        "Parsed resume %s (%d bytes, missing=%s)",
        resume.filename,
        len(data),
        ",".join(extraction.missing_fields) or "-",
    )
    return extraction


@app.get("/api/candidates", response_model=List[CandidateSummary])
def list_candidates(
    search: Optional[str] = None,
    sort_by: str = "final_score",
    order: str = "desc",
    repository: CandidateRepository = Depends(get_candidates),
) -> List[CandidateSummary]:  # Ranked candidate directory
    return directory.list_candidates(repository, search=search, sort_by=sort_by, order=order)


@app.get("/api/candidate/{session_id}", response_model=Candidate)
def fetch_candidate(
    session_id: str, repository: CandidateRepository = Depends(get_candidates)
) -> Candidate:  # Full candidate record
    return directory.get_candidate(repository, session_id)


@app.get("/api/candidate/{session_id}/report.pdf")
def fetch_candidate_report_pdf(
    session_id: str, repository: CandidateRepository = Depends(get_candidates)
) -> Response:  # Downloadable transcript report
    candidate = directory.get_candidate(repository, session_id)
    payload = generate_candidate_report_pdf(candidate)
    filename = f"{_safe_slug(candidate.name or '') or 'candidate'}-{candidate.session_id}.pdf"
    headers = {"Content-Disposition": f"attachment; filename=\"{filename}\""}
    return Response(content=payload, media_type="application/pdf", headers=headers)


def _safe_slug(value: str) -> str:  # Sanitize value for filenames
    if not value:
        return ""
    lowered = value.lower()
    slug = re.sub(r"[^a-z0-9]+", "-", lowered)
    slug = re.sub(r"-+", "-", slug).strip("-")
    return slug
