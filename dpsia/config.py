"""Configuration management for dpsia."""

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from dpsia.core.errors import InvalidConfigError

# Load .env file
load_dotenv()

DEFAULT_RESEARCH_TIMEOUT = 90.0

DEFAULT_PERPLEXITY_MODEL = "sonar"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_GROK_MODEL = "grok-3"


def _env_timeout() -> Any:
    return os.getenv("DPSIA_RESEARCH_TIMEOUT", DEFAULT_RESEARCH_TIMEOUT)


class ResearchConfig(BaseModel):
    """Credentials and tuning for one research run across all providers."""

    model_config = ConfigDict(validate_default=True)

    # Provider credentials
    perplexity_api_key: Optional[str] = Field(default=None, description="Perplexity API key")
    google_api_key: Optional[str] = Field(default=None, description="Google Gemini API key")
    xai_api_key: Optional[str] = Field(default=None, description="xAI Grok API key")

    # Per-call timeout applied uniformly to every research task
    timeout: float = Field(default_factory=_env_timeout, description="Per-query timeout in seconds")

    # Model selection
    perplexity_model: str = Field(
        default_factory=lambda: os.getenv("DPSIA_PERPLEXITY_MODEL", DEFAULT_PERPLEXITY_MODEL),
        description="Perplexity model",
    )
    gemini_model: str = Field(
        default_factory=lambda: os.getenv("DPSIA_GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        description="Gemini model",
    )
    grok_model: str = Field(
        default_factory=lambda: os.getenv("DPSIA_GROK_MODEL", DEFAULT_GROK_MODEL),
        description="Grok model",
    )

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Timeouts must be positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @model_validator(mode="after")
    def resolve_api_keys(self) -> "ResearchConfig":
        """Fill missing API keys from the environment."""
        if not self.perplexity_api_key:
            self.perplexity_api_key = os.getenv("PERPLEXITY_API_KEY")
        if not self.google_api_key:
            self.google_api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
        if not self.xai_api_key:
            self.xai_api_key = os.getenv("XAI_API_KEY")
        return self

    def to_dict(self, mask_keys: bool = True) -> Dict[str, Any]:
        """Convert to dictionary."""

        def _key(value: Optional[str]) -> Optional[str]:
            return "***" if mask_keys and value else value

        return {
            "perplexity_api_key": _key(self.perplexity_api_key),
            "google_api_key": _key(self.google_api_key),
            "xai_api_key": _key(self.xai_api_key),
            "timeout": self.timeout,
            "perplexity_model": self.perplexity_model,
            "gemini_model": self.gemini_model,
            "grok_model": self.grok_model,
        }


def load_config(**overrides: Any) -> ResearchConfig:
    """Build a ResearchConfig from the environment plus explicit overrides.

    None-valued overrides are ignored so CLI options can be passed through
    unconditionally.

    Raises:
        InvalidConfigError: If a value fails validation
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return ResearchConfig(**values)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ())) or "config"
        raise InvalidConfigError(key, first.get("input"), first.get("msg", str(e))) from e
