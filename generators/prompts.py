from __future__ import annotations  # Prompt builders for the generator adapters

import json
from textwrap import dedent
from typing import Sequence

from .types import Difficulty, TranscriptEntry

TIME_HINTS = {"easy": 60, "medium": 90, "hard": 120}  # Suggested seconds passed to the model


def question_task(difficulty: Difficulty, question_number: int) -> str:  # Build question generation prompt
    return dedent(
        f"""
        Generate a single, one-line full-stack development interview question related to React,
        Next.js, Vite, TailwindCSS, Node.js, or Express.js, together with a concise ideal answer.
        Focus on topics like hooks, components, props, state management, Context API, performance
        optimization, SSR, routing, lazy loading, custom hooks, backend API integration, or common
        front-end/back-end patterns.
        Difficulty: {difficulty}
        Question number: {question_number}

        Respond with a JSON object following this contract:
        - id: integer, use {question_number}.
        - question: the question text, one line, not a multi-step task.
        - answer: brief, technically accurate ideal answer.
        - level: "{difficulty}".
        - time: suggested answer time in seconds ({TIME_HINTS[difficulty]} for this level).
        Return only JSON without markdown fences, text, or commentary.
        """
    ).strip()


def evaluation_task(question: str, candidate_answer: str, ideal_answer: str, level: str) -> str:  # Build answer evaluation prompt
    return dedent(
        f"""
        Evaluate the candidate's answer by comparing it to the ideal answer. Consider the difficulty
        level when scoring.

        Question: {question}
        Candidate answer: {candidate_answer}
        Ideal answer (reference): {ideal_answer}
        Difficulty level: {level}

        Respond with a JSON object following this contract:
        - score: integer from 0 to 10 for accuracy, completeness, clarity, and technical correctness.
        - feedback: concise, constructive feedback of at most 50 words.
        Return only JSON without markdown fences, text, or commentary.
        """
    ).strip()


def summary_task(transcript: Sequence[TranscriptEntry]) -> str:  # Build final summary prompt
    data = json.dumps([entry.model_dump() for entry in transcript], ensure_ascii=False)
    return dedent(
        """
        Create a brief candidate summary (at most 100 words) from this interview transcript of
        questions, answers, and 0-10 scores:
        {data}

        Respond with a JSON object following this contract:
        - summary: the summary text.
        Return only JSON without markdown fences, text, or commentary.
        """
    ).strip().format(data=data)
