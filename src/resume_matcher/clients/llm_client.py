"""Anthropic Messages client used by the analyzer and the rewriter."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import anthropic
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from resume_matcher.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"

# Failures worth another attempt; bad requests and auth errors are not.
TRANSIENT_ERRORS = (
    anthropic.APIConnectionError,
    anthropic.RateLimitError,
    anthropic.InternalServerError,
)


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


def _response_text(message: anthropic.types.Message) -> str:
    """Concatenate the text blocks of a reply, ignoring any other block types."""
    return "".join(block.text for block in message.content if block.type == "text").strip()


class LLMClient:
    """Async Claude client that retries transient API failures."""

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        options: dict = {}
        if api_key is not None:
            options["api_key"] = api_key
        if timeout is not None:
            options["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**options)
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    @retry(
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        stop=stop_after_attempt(3),
        wait=wait_exponential(min=1, max=10),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    async def _create(self, request: dict) -> anthropic.types.Message:
        return await self.client.messages.create(**request)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        """Send one user turn and return the reply text with token usage."""
        request: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            request["system"] = system

        logger.debug("LLM call: model=%s max_tokens=%d", model, max_tokens)
        try:
            message = await self._create(request)
        except Exception:
            logger.error("LLM call to %s failed", model, exc_info=True)
            raise

        usage = message.usage
        self._token_log.append((model, usage.input_tokens, usage.output_tokens))
        logger.debug("LLM response: %d input, %d output tokens", usage.input_tokens, usage.output_tokens)
        return LLMResponse(
            text=_response_text(message),
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
        )

    async def generate_json(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ) -> dict:
        """Like :meth:`generate`, but parse a JSON object out of the reply."""
        response = await self.generate(prompt, system, model, temperature, max_tokens)
        return extract_json(response.text)

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        calls = list(self._token_log)
        self._token_log.clear()
        return {
            "input": sum(inp for _, inp, _ in calls),
            "output": sum(out for _, _, out in calls),
            "calls": calls,
        }
