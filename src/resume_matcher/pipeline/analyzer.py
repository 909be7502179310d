"""Resume Analyzer - scores a resume against a job description."""

from __future__ import annotations

import logging
import math

from resume_matcher.clients.llm_client import DEFAULT_MODEL, LLMClient
from resume_matcher.models.analysis import AnalysisResult

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are an expert technical recruiter and resume analyst.
Analyze the provided resume against the job description and return ONLY a valid JSON object.
No markdown, no code fences, no explanation - raw JSON only.

Required JSON shape:
{
  "score": <integer 0-100>,
  "matched_skills": [<skills present in both resume and JD>],
  "missing_skills": [<skills required by JD but absent from resume>],
  "summary": "<2-3 sentence tailored summary of the candidate's fit>"
}

Scoring guide:
- 80-100  Strong match - meets most or all key requirements
- 60-79   Good match - meets core requirements with minor gaps
- 40-59   Partial match - meets some requirements with notable gaps
- 0-39    Weak match - missing most key requirements

Rules:
- Use specific, concise skill names (e.g. "React", "TypeScript", "PostgreSQL", "Docker")
- Only include skills explicitly mentioned or clearly evidenced
- The summary must reference specific strengths and the most critical gaps
- score must be an integer"""


def clamp(value: float, low: int, high: int) -> int:
    return int(min(max(value, low), high))


def build_user_prompt(resume_text: str, jd_text: str) -> str:
    return f"RESUME:\n{resume_text}\n\n---\n\nJOB DESCRIPTION:\n{jd_text}"


class ResumeAnalyzer:
    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 1024,
    ):
        self.llm = llm
        self.model = model
        self.max_tokens = max_tokens

    async def analyze(self, resume_text: str, jd_text: str) -> AnalysisResult:
        """Score the resume and list matched and missing skills."""
        logger.info("Analyzing resume against job description...")
        data = await self.llm.generate_json(
            prompt=build_user_prompt(resume_text, jd_text),
            system=SYSTEM_PROMPT,
            model=self.model,
            max_tokens=self.max_tokens,
        )
        return self._coerce(data)

    @staticmethod
    def _coerce(data: dict) -> AnalysisResult:
        """Build a result from loosely-typed model output."""
        try:
            raw_score = float(data.get("score", 0))
        except (TypeError, ValueError):
            logger.warning("Non-numeric score %r; using 0", data.get("score"))
            raw_score = 0.0
        if not math.isfinite(raw_score):
            raw_score = 0.0

        matched = data.get("matched_skills")
        missing = data.get("missing_skills")
        summary = data.get("summary")
        return AnalysisResult(
            score=clamp(round(raw_score), 0, 100),
            matched_skills=[str(s) for s in matched] if isinstance(matched, list) else [],
            missing_skills=[str(s) for s in missing] if isinstance(missing, list) else [],
            summary=summary.strip() if isinstance(summary, str) else "",
        )
