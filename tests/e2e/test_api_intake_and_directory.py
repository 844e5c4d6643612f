from __future__ import annotations

import io

import jwt
from docx import Document

from config.settings import settings
from resume_intake import DOCX_TYPE


def _docx_bytes(*lines: str) -> bytes:
    document = Document()
    for line in lines:
        document.add_paragraph(line)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def _finish(client, name: str, email: str, answers: int) -> str:
    started = client.post(
        "/api/start-interview",
        json={"candidate_id": email, "user_info": {"name": name, "email": email, "phone": "555 010 2030"}},
    ).json()
    for _ in range(answers):
        client.post("/api/submit-answer", json={"session_id": started["session_id"], "answer": "answer"})
    client.post("/api/terminate-interview", json={"session_id": started["session_id"]})
    return started["session_id"]


def test_upload_docx_resume(client):
    payload = _docx_bytes("Grace Hopper", "grace@navy.mil", "555-123-4567")
    resp = client.post("/api/upload-resume", files={"resume": ("cv.docx", payload, DOCX_TYPE)})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["user_info"] == {"name": "Grace Hopper", "email": "grace@navy.mil", "phone": "555-123-4567"}
    assert body["missing_fields"] == []
    assert "grace@navy.mil" in body["extracted_text"]


def test_upload_reports_missing_fields(client):
    payload = _docx_bytes("just some lowercase text")
    body = client.post("/api/upload-resume", files={"resume": ("cv.docx", payload, DOCX_TYPE)}).json()
    assert body["missing_fields"] == ["name", "email", "phone"]


def test_upload_rejects_bad_type_and_empty_request(client):
    resp = client.post("/api/upload-resume", files={"resume": ("notes.txt", b"hello", "text/plain")})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Only PDF and DOCX files are allowed"

    empty = client.post("/api/upload-resume")
    assert empty.status_code == 400
    assert empty.json()["detail"] == "No file uploaded"


def test_upload_rejects_oversized_file(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 1024 * 1024)
    big = b"0" * (1024 * 1024 + 10)
    resp = client.post("/api/upload-resume", files={"resume": ("cv.pdf", big, "application/pdf")})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "File too large. Max 1MB."


def test_candidate_directory_search_and_sort(client, stub_generators):
    stub_generators.score = 8
    strong = _finish(client, "Ada Lovelace", "ada@example.com", answers=2)
    stub_generators.score = 3
    weak = _finish(client, "Alan Turing", "alan@example.com", answers=3)

    ranked = client.get("/api/candidates").json()
    assert [c["session_id"] for c in ranked] == [strong, weak]

    by_answers = client.get("/api/candidates", params={"sort_by": "answered", "order": "desc"}).json()
    assert [c["session_id"] for c in by_answers] == [weak, strong]

    found = client.get("/api/candidates", params={"search": "ALAN@"}).json()
    assert [c["session_id"] for c in found] == [weak]

    bad = client.get("/api/candidates", params={"sort_by": "height"})
    assert bad.status_code == 400


def test_referral_validation(client):
    assert client.post("/api/validate-referral", json={"code": "INTERN123"}).json() == {"valid": True}
    assert client.post("/api/validate-referral", json={"code": "nope"}).json() == {"valid": False}


def test_verify_token(client, monkeypatch):
    secret = "api-test-secret-with-enough-bytes-for-hs256"
    monkeypatch.setattr(settings, "IDENTITY_JWT_SECRET", secret)
    monkeypatch.setattr(settings, "IDENTITY_AUDIENCE", None)
    token = jwt.encode({"sub": "user-9", "email": "ada@example.com"}, secret, algorithm="HS256")

    ok = client.post("/api/verify-token", json={"token": token})
    assert ok.status_code == 200
    assert ok.json() == {"valid": True, "uid": "user-9", "email": "ada@example.com"}

    bad = client.post("/api/verify-token", json={"token": "garbage"})
    assert bad.status_code == 401
    assert bad.json() == {"valid": False, "message": "Invalid token"}
