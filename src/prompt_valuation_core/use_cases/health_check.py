"""
Health Check

Performs a connectivity check for the qualitative scorer model.
"""

from typing import Callable

from prompt_valuation_core.domain.entities import HealthCheckResult
from prompt_valuation_core.infrastructure.model_clients.base import ModelClient


HEALTH_CHECK_PROMPT = "Reply with only 'OK' if you can read this message."


def check_judge_health(
    model_name: str,
    create_client_fn: Callable[[str], ModelClient] | None = None,
) -> HealthCheckResult:
    """
    Execute a health check for the scorer model.

    Uses prompt_valuation_core.infrastructure.model_clients.create_client if
    create_client_fn is not specified.

    Args:
        model_name: Scorer model name
        create_client_fn: Function to create a model client (optional)

    Returns:
        HealthCheckResult: Health check result
    """
    if create_client_fn is None:
        from prompt_valuation_core.infrastructure.model_clients.factory import create_client
        create_client_fn = create_client

    try:
        client = create_client_fn(model_name)
        response = client.generate(HEALTH_CHECK_PROMPT)
    except Exception as e:
        error_msg = (
            f"Scorer ({model_name}) health check failed: {str(e)[:200]}\n"
            f"Troubleshooting:\n"
            f"- For Gemini: Set GEMINI_API_KEY, or GCP_PROJECT_ID and run `gcloud auth application-default login`\n"
            f"- For Claude: Set the ANTHROPIC_API_KEY environment variable\n"
            f"- For LMStudio: Verify LMStudio is running (LMSTUDIO_BASE_URL)\n"
            f"- For other OpenAI-compatible providers: Set the provider's API key variable"
        )
        return HealthCheckResult(model_name=model_name, success=False, latency_ms=None, error=error_msg)

    if not response.output:
        return HealthCheckResult(
            model_name=model_name,
            success=False,
            latency_ms=response.latency_ms,
            error=f"Scorer ({model_name}) returned an empty response",
        )
    return HealthCheckResult(
        model_name=model_name,
        success=True,
        latency_ms=response.latency_ms,
        error=None,
    )
