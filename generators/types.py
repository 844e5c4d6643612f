"""Shared type definitions for the generator adapters."""
from typing import Literal

from pydantic import BaseModel, Field

Difficulty = Literal["easy", "medium", "hard"]


class Question(BaseModel):
    id: int
    question: str
    answer: str  # reference answer, never shown to the candidate
    level: Difficulty
    time: int  # advisory seconds


class Evaluation(BaseModel):
    score: int = Field(ge=0, le=10)
    feedback: str


class EvaluationOut(BaseModel):
    score: float = Field(allow_inf_nan=False)
    feedback: str


class SummaryOut(BaseModel):
    summary: str = Field(min_length=1)


class TranscriptEntry(BaseModel):
    question: str
    answer: str
    score: int
