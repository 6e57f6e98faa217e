"""
Anthropic Claude model client
"""

import os
import time

from anthropic import Anthropic, APIConnectionError, RateLimitError, InternalServerError

from prompt_valuation_core.domain.value_objects import ModelResponse
from prompt_valuation_core.infrastructure.model_clients.base import ModelClient, RetryMixin


class ClaudeClient(RetryMixin, ModelClient):
    """Claude client using the Anthropic API"""

    def __init__(
        self,
        model_name: str,
        api_key: str | None = None,
        temperature: float = 0.1,
        timeout_seconds: int = 30,
        max_retries: int = 3,
        retry_delay_seconds: float = 1.0,
    ):
        """
        Args:
            model_name: Model name (e.g. claude-haiku-4-5-20251001)
            api_key: Anthropic API key (falls back to environment variable if not specified)
            temperature: Sampling temperature
            timeout_seconds: Request timeout in seconds
            max_retries: Maximum number of retries (default: 3)
            retry_delay_seconds: Base delay for exponential backoff
        """
        self.model_name = model_name
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        self.temperature = temperature
        self.max_retries = max_retries
        self.retry_delay_seconds = retry_delay_seconds

        if not self.api_key:
            raise ValueError("ANTHROPIC_API_KEY is not set")

        # SDK-level retries are disabled; RetryMixin owns the backoff
        self.client = Anthropic(api_key=self.api_key, timeout=timeout_seconds, max_retries=0)

    def generate(
        self,
        prompt: str,
        *,
        system_instruction: str | None = None,
        json_mode: bool = False,
    ) -> ModelResponse:
        """
        Send a prompt and retrieve the response

        The Messages API has no JSON response mode, so json_mode only appends a
        reminder to the system instruction.

        Raises:
            Exception: If the maximum number of retries is exceeded
        """
        system = system_instruction or ""
        if json_mode:
            system = f"{system}\n\nRespond with the JSON object only.".strip()

        kwargs = {}
        if system:
            kwargs["system"] = system

        def _call():
            start_time = time.time()
            response = self.client.messages.create(
                model=self.model_name,
                max_tokens=1024,
                temperature=self.temperature,
                messages=[{"role": "user", "content": prompt}],
                **kwargs,
            )
            end_time = time.time()

            latency_ms = int((end_time - start_time) * 1000)
            output = response.content[0].text.strip()

            # Retrieve token usage
            input_tokens = getattr(response.usage, "input_tokens", 0) or 0
            output_tokens = getattr(response.usage, "output_tokens", 0) or 0

            return ModelResponse(
                output=output,
                latency_ms=latency_ms,
                model_name=self.model_name,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
            )

        return self._with_retry(
            _call,
            retryable_exceptions=(APIConnectionError, RateLimitError, InternalServerError),
        )
