"""Tests for pipeline orchestrator."""

from unittest.mock import AsyncMock, patch

import pytest

from resume_matcher.delivery.email_sender import EmailSender
from resume_matcher.pipeline.orchestrator import PipelineOrchestrator, PipelineResult


@pytest.fixture
def mock_analysis_json():
    return {
        "score": 81,
        "matched_skills": ["Go"],
        "missing_skills": ["Kubernetes"],
        "summary": "Strong backend fit.",
    }


@pytest.fixture
def mock_sender():
    sender = AsyncMock(spec=EmailSender)
    sender.send_resume = AsyncMock(return_value="msg_123")
    return sender


class TestPipelineOrchestrator:
    async def test_full_pipeline(self, mock_llm_client, mock_analysis_json):
        mock_llm_client.generate_json.return_value = mock_analysis_json
        orchestrator = PipelineOrchestrator(mock_llm_client, model="test-model")

        result = await orchestrator.run("resume text", "jd text", pages=2)

        assert isinstance(result, PipelineResult)
        assert result.analysis.score == 81
        assert result.structured_text == "[NAME]\nJane Doe"
        assert result.pdf_bytes.startswith(b"%PDF")
        assert result.email_sent is False
        assert result.elapsed_seconds >= 0
        assert mock_llm_client.generate.call_args.kwargs["max_tokens"] == 3000

    async def test_phases_reported_in_order(self, mock_llm_client, mock_sender):
        phases = []
        orchestrator = PipelineOrchestrator(mock_llm_client, email_sender=mock_sender)

        await orchestrator.run(
            "resume", "jd", recipient="jane@example.com",
            on_phase=lambda phase, detail: phases.append(phase),
        )

        assert phases == ["analyze", "analyze_done", "render", "deliver", "done"]

    async def test_analysis_failure_propagates(self, mock_llm_client):
        mock_llm_client.generate_json.side_effect = ValueError("Could not extract JSON")
        orchestrator = PipelineOrchestrator(mock_llm_client)

        with pytest.raises(ValueError, match="Could not extract JSON"):
            await orchestrator.run("resume", "jd")

    async def test_rewrite_failure_propagates(self, mock_llm_client):
        mock_llm_client.generate.side_effect = RuntimeError("API down")
        orchestrator = PipelineOrchestrator(mock_llm_client)

        with pytest.raises(RuntimeError, match="API down"):
            await orchestrator.run("resume", "jd")

    async def test_pdf_failure_is_not_fatal(self, mock_llm_client, mock_sender):
        orchestrator = PipelineOrchestrator(mock_llm_client, email_sender=mock_sender)

        with patch(
            "resume_matcher.pipeline.orchestrator.build_resume_pdf",
            side_effect=RuntimeError("font missing"),
        ):
            result = await orchestrator.run("resume", "jd", recipient="jane@example.com")

        assert result.pdf_bytes is None
        assert result.email_sent is False
        mock_sender.send_resume.assert_not_called()

    async def test_email_sent(self, mock_llm_client, mock_sender, mock_analysis_json):
        mock_llm_client.generate_json.return_value = mock_analysis_json
        orchestrator = PipelineOrchestrator(mock_llm_client, email_sender=mock_sender)

        result = await orchestrator.run("resume", "jd", recipient="jane@example.com")

        assert result.email_sent is True
        to, pdf_bytes, score, summary = mock_sender.send_resume.call_args.args
        assert to == "jane@example.com"
        assert pdf_bytes == result.pdf_bytes
        assert (score, summary) == (81, "Strong backend fit.")

    async def test_email_failure_is_not_fatal(self, mock_llm_client, mock_sender):
        mock_sender.send_resume.side_effect = RuntimeError("422 from provider")
        orchestrator = PipelineOrchestrator(mock_llm_client, email_sender=mock_sender)

        result = await orchestrator.run("resume", "jd", recipient="jane@example.com")

        assert result.pdf_bytes is not None
        assert result.email_sent is False

    async def test_no_recipient_skips_email(self, mock_llm_client, mock_sender):
        orchestrator = PipelineOrchestrator(mock_llm_client, email_sender=mock_sender)

        result = await orchestrator.run("resume", "jd")

        assert result.email_sent is False
        mock_sender.send_resume.assert_not_called()
