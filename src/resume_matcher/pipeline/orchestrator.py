"""Main pipeline orchestrator - analysis, rewrite, PDF build and delivery."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable

from resume_matcher.clients.llm_client import DEFAULT_MODEL, LLMClient
from resume_matcher.delivery.email_sender import EmailSender
from resume_matcher.layout.document import build_resume_pdf
from resume_matcher.layout.style import LayoutStyle
from resume_matcher.models.analysis import AnalysisResult
from resume_matcher.pipeline.analyzer import ResumeAnalyzer
from resume_matcher.pipeline.rewriter import ResumeRewriter

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Complete result from the matching pipeline."""

    analysis: AnalysisResult
    structured_text: str
    pdf_bytes: bytes | None = None
    email_sent: bool = False
    elapsed_seconds: float = 0.0


class PipelineOrchestrator:
    """Runs analysis and rewrite concurrently, then renders and delivers the PDF."""

    def __init__(
        self,
        llm: LLMClient,
        *,
        model: str = DEFAULT_MODEL,
        analysis_max_tokens: int = 1024,
        email_sender: EmailSender | None = None,
        style: LayoutStyle | None = None,
    ):
        self.analyzer = ResumeAnalyzer(llm, model=model, max_tokens=analysis_max_tokens)
        self.rewriter = ResumeRewriter(llm, model=model)
        self.email_sender = email_sender
        self.style = style

    async def run(
        self,
        resume_text: str,
        jd_text: str,
        pages: int = 1,
        *,
        recipient: str | None = None,
        on_phase: Callable[[str, str], None] | None = None,
    ) -> PipelineResult:
        """Run the full pipeline.

        Args:
            resume_text: Applicant's resume as plain text.
            jd_text: Job description text.
            pages: Page budget for the rewrite, 1 or 2.
            recipient: Email address for the PDF; skipped when None.
            on_phase: Optional callback(phase_name, detail) for progress.

        Analysis and rewrite failures propagate. The PDF and email steps
        are non-fatal: failures are logged and reflected in the result.
        """
        start = time.monotonic()

        def _notify(phase: str, detail: str = ""):
            if on_phase:
                on_phase(phase, detail)

        _notify("analyze", "Scoring resume and rewriting it for the job...")
        analysis, structured_text = await asyncio.gather(
            self.analyzer.analyze(resume_text, jd_text),
            self.rewriter.rewrite(resume_text, jd_text, pages),
        )
        _notify("analyze_done", f"Match score: {analysis.score}")

        result = PipelineResult(analysis=analysis, structured_text=structured_text)

        _notify("render", "Rendering tailored resume PDF...")
        try:
            result.pdf_bytes = build_resume_pdf(structured_text, self.style)
        except Exception:
            logger.error("PDF build failed", exc_info=True)

        if result.pdf_bytes is not None and self.email_sender and recipient:
            _notify("deliver", f"Emailing resume to {recipient}...")
            try:
                await self.email_sender.send_resume(
                    recipient, result.pdf_bytes, analysis.score, analysis.summary
                )
                result.email_sent = True
            except Exception:
                logger.error("Email delivery to %s failed", recipient, exc_info=True)

        result.elapsed_seconds = time.monotonic() - start
        _notify("done", f"Finished in {result.elapsed_seconds:.1f}s")
        return result
