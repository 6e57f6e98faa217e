"""
Valuation Engine Configuration

Manages loading from environment variables and default values.
"""

import os
from dataclasses import dataclass, field, asdict

from prompt_valuation_core.domain.constants import DEFAULT_JUDGE_MODEL, METHODS


def _env_bool(key: str, default: bool) -> bool:
    """Convert an environment variable to bool"""
    val = os.environ.get(key)
    if val is None:
        return default
    return val.lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Convert an environment variable to int"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to an integer.")


def _env_float(key: str, default: float) -> float:
    """Convert an environment variable to float"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return float(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to a number.")


def _env_str(key: str, default: str) -> str:
    """Get an environment variable as a string"""
    return os.environ.get(key, default)


@dataclass
class JudgeConfig:
    """Qualitative scorer configuration"""
    model: str = DEFAULT_JUDGE_MODEL
    temperature: float = 0.1
    health_check: bool = True


@dataclass
class IsolationConfig:
    """Model client timeout and retry configuration"""
    timeout_seconds: int = 30
    max_retries: int = 2
    retry_delay_seconds: float = 1.0


@dataclass
class BatchConfig:
    """CORE/ALL batch execution configuration"""
    max_workers: int = len(METHODS)


@dataclass
class LMStudioConfig:
    """LMStudio (OpenAI-compatible local LLM) configuration"""
    base_url: str = "http://localhost:1234/v1"
    api_key: str = "lm-studio"


@dataclass
class EngineConfig:
    """Overall valuation engine configuration"""
    judge: JudgeConfig = field(default_factory=JudgeConfig)
    isolation: IsolationConfig = field(default_factory=IsolationConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
    lmstudio: LMStudioConfig = field(default_factory=LMStudioConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {"engine_config": asdict(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "EngineConfig":
        """Create from dictionary (handles presence/absence of engine_config key)"""
        config_data = data.get("engine_config", data)
        return cls(
            judge=JudgeConfig(**config_data.get("judge", {})),
            isolation=IsolationConfig(**config_data.get("isolation", {})),
            batch=BatchConfig(**config_data.get("batch", {})),
            lmstudio=LMStudioConfig(**config_data.get("lmstudio", {})),
        )


def load_config() -> EngineConfig:
    """
    Load configuration from environment variables

    Uses default values when environment variables are not set.

    Returns:
        EngineConfig
    """
    judge = JudgeConfig(
        model=_env_str("VALUATION_JUDGE_MODEL", DEFAULT_JUDGE_MODEL),
        temperature=_env_float("VALUATION_JUDGE_TEMPERATURE", 0.1),
        health_check=_env_bool("VALUATION_JUDGE_HEALTH_CHECK", True),
    )
    isolation = IsolationConfig(
        timeout_seconds=_env_int("VALUATION_TIMEOUT_SECONDS", 30),
        max_retries=_env_int("VALUATION_MAX_RETRIES", 2),
        retry_delay_seconds=_env_float("VALUATION_RETRY_DELAY_SECONDS", 1.0),
    )
    batch = BatchConfig(
        max_workers=_env_int("VALUATION_MAX_WORKERS", len(METHODS)),
    )
    lmstudio = LMStudioConfig(
        base_url=_env_str("LMSTUDIO_BASE_URL", "http://localhost:1234/v1"),
        api_key=_env_str("LMSTUDIO_API_KEY", "lm-studio"),
    )
    return EngineConfig(judge=judge, isolation=isolation, batch=batch, lmstudio=lmstudio)
