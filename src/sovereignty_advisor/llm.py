"""
Model creation for the advisory gateway.

Builds pydantic-ai models from ``AdvisorConfig``. Supported tiers:
- "heavy": evidence analysis and auto-assessment
- "light": diagram descriptions and general chat
"""

import os
from typing import Literal

from pydantic_ai.models import Model
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider

from sovereignty_scorer.app_logging import get_logger
from sovereignty_scorer.config import AdvisorConfig

from .exceptions import AdvisoryConfigError

logger = get_logger('advisor.llm')

LLM_TIER_TYPE = Literal["heavy", "light"]

SUPPORTED_PROVIDERS = ("google-gla", "google-vertex")


def model_name_for(config: AdvisorConfig, tier: LLM_TIER_TYPE) -> str:
    return config.heavy_model if tier == "heavy" else config.light_model


def create_model(config: AdvisorConfig, tier: LLM_TIER_TYPE = "light") -> Model:
    """
    Create a pydantic-ai model for the specified tier.

    The API key is read from the environment on every call so a rotated key
    is picked up by the next model created.

    Raises:
        AdvisoryConfigError: If the provider is unsupported or the API key is missing
    """
    if config.provider not in SUPPORTED_PROVIDERS:
        raise AdvisoryConfigError(
            f"Unsupported advisor provider '{config.provider}'. "
            f"Expected one of: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    model_name = model_name_for(config, tier)

    if config.provider == "google-vertex":
        provider = GoogleProvider(vertexai=True)
    else:
        api_key = os.environ.get(config.api_key_env)
        if not api_key:
            raise AdvisoryConfigError(
                f"No API key found. Set the {config.api_key_env} environment variable."
            )
        provider = GoogleProvider(api_key=api_key)

    logger.info(f"Model created: tier={tier}, provider={config.provider}, model={model_name}")
    return GoogleModel(model_name, provider=provider)
