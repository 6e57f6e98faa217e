"""
Model client factory

Creates the appropriate client instance based on the model name.
"""

from __future__ import annotations

from prompt_valuation_core.domain.constants import OPENAI_COMPATIBLE_PROVIDERS
from prompt_valuation_core.engine_config import EngineConfig, load_config
from prompt_valuation_core.infrastructure.model_clients.base import ModelClient
from prompt_valuation_core.infrastructure.model_clients.claude import ClaudeClient
from prompt_valuation_core.infrastructure.model_clients.gemini import GeminiClient
from prompt_valuation_core.infrastructure.model_clients.openai_compatible import OpenAICompatibleClient


def create_client(model_name: str, config: EngineConfig | None = None) -> ModelClient:
    """
    Create the appropriate client based on the model name

    Args:
        model_name: Model name ("claude-*", "<provider>/<model>", otherwise Gemini)
        config: EngineConfig (loads from env if not provided)

    Returns:
        ModelClient: The appropriate client instance
    """
    if config is None:
        config = load_config()

    common = {
        "temperature": config.judge.temperature,
        "timeout_seconds": config.isolation.timeout_seconds,
        "max_retries": config.isolation.max_retries,
        "retry_delay_seconds": config.isolation.retry_delay_seconds,
    }

    provider = model_name.partition("/")[0]
    if provider == "lmstudio":
        return OpenAICompatibleClient(
            model_name,
            base_url=config.lmstudio.base_url,
            api_key=config.lmstudio.api_key,
            **common,
        )
    elif provider in OPENAI_COMPATIBLE_PROVIDERS:
        return OpenAICompatibleClient(model_name, **common)
    elif model_name.startswith("claude"):
        return ClaudeClient(model_name, **common)
    else:
        return GeminiClient(model_name, **common)
