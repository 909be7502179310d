"""Pydantic models for the resume analysis step."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnalysisResult(BaseModel):
    score: int = Field(ge=0, le=100)
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    summary: str = ""
