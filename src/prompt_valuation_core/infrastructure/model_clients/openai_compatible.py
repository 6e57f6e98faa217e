"""
OpenAI-compatible model client (LM Studio, Groq, Cerebras, SambaNova, OpenRouter, Hugging Face)
"""

import os
import time

import openai
from openai import OpenAI

from prompt_valuation_core.domain.constants import OPENAI_COMPATIBLE_PROVIDERS
from prompt_valuation_core.domain.value_objects import ModelResponse
from prompt_valuation_core.infrastructure.model_clients.base import ModelClient, RetryMixin


def split_provider(model_name: str) -> tuple[str, str]:
    """Split 'provider/model' into (provider, model); the model part may contain further slashes"""
    provider, sep, api_model = model_name.partition("/")
    if not sep or provider not in OPENAI_COMPATIBLE_PROVIDERS:
        raise ValueError(
            f"Not an OpenAI-compatible model name: {model_name} "
            f"(expected one of {sorted(OPENAI_COMPATIBLE_PROVIDERS)} as prefix)"
        )
    return provider, api_model


class OpenAICompatibleClient(RetryMixin, ModelClient):
    """Client for any provider exposing the OpenAI chat completions API"""

    def __init__(
        self,
        model_name: str,
        base_url: str | None = None,
        api_key: str | None = None,
        temperature: float = 0.1,
        timeout_seconds: int = 30,
        max_retries: int = 3,
        retry_delay_seconds: float = 1.0,
        max_tokens: int = 1024,
    ):
        """
        Args:
            model_name: Prefixed model name (e.g. lmstudio/qwen2.5-7b, groq/llama-3.3-70b-versatile)
            base_url: API endpoint (defaults to the provider's public endpoint)
            api_key: API key (falls back to the provider's environment variable)
            temperature: Sampling temperature
            timeout_seconds: Request timeout in seconds
            max_retries: Maximum number of retries (default: 3)
            retry_delay_seconds: Base delay for exponential backoff
            max_tokens: Maximum number of tokens (default: 1024)
        """
        self.model_name = model_name
        self.provider, self.api_model_name = split_provider(model_name)
        self.temperature = temperature
        self.max_retries = max_retries
        self.retry_delay_seconds = retry_delay_seconds
        self.max_tokens = max_tokens

        default_url, key_env = OPENAI_COMPATIBLE_PROVIDERS[self.provider]

        # Configuration priority: argument > environment variable > default value
        api_key = api_key or os.environ.get(key_env)
        if not api_key:
            if self.provider != "lmstudio":
                raise ValueError(f"{key_env} is not set")
            # LM Studio ignores the key but the SDK requires one
            api_key = "lm-studio"

        self.base_url = base_url or default_url
        self.client = OpenAI(
            base_url=self.base_url,
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )

    def generate(
        self,
        prompt: str,
        *,
        system_instruction: str | None = None,
        json_mode: bool = False,
    ) -> ModelResponse:
        """
        Send a prompt and retrieve the response

        Raises:
            Exception: If the maximum number of retries is exceeded
        """
        messages = []
        if system_instruction:
            messages.append({"role": "system", "content": system_instruction})
        messages.append({"role": "user", "content": prompt})

        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        def _call():
            start_time = time.time()
            response = self.client.chat.completions.create(
                model=self.api_model_name,
                messages=messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                **kwargs,
            )
            end_time = time.time()

            latency_ms = int((end_time - start_time) * 1000)
            output = (response.choices[0].message.content or "").strip()

            # Retrieve token usage
            input_tokens = 0
            output_tokens = 0
            if response.usage:
                input_tokens = response.usage.prompt_tokens or 0
                output_tokens = response.usage.completion_tokens or 0

            return ModelResponse(
                output=output,
                latency_ms=latency_ms,
                model_name=self.model_name,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
            )

        return self._with_retry(
            _call,
            retryable_exceptions=(
                openai.APIConnectionError,
                openai.RateLimitError,
                openai.InternalServerError,
            ),
        )
