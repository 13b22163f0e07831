"""Centralized configuration management for the sovereignty assessment."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from .schema import Language


class AdvisorConfig(BaseModel):
    """Settings for the AI advisory gateway.

    The heavy model handles evidence analysis and auto-assessment; the light
    model handles diagram descriptions and the general chat.
    """
    provider: str = Field(
        "google-gla",
        description="pydantic-ai provider prefix for the models (google-gla, google-vertex)"
    )
    heavy_model: str = Field(
        "gemini-3-pro-preview",
        description="Model used for advice and auto-assessment"
    )
    light_model: str = Field(
        "gemini-2.5-flash",
        description="Model used for image descriptions and chat"
    )
    api_key_env: str = Field(
        "GEMINI_API_KEY",
        description="Environment variable holding the API key"
    )
    timeout_seconds: float = Field(
        60.0,
        description="Request timeout for a single model call"
    )
    max_chat_history: int = Field(
        20,
        description="Maximum number of previous chat messages sent with a question"
    )


class ReportConfig(BaseModel):
    """Settings for exported reports."""
    empty_note_placeholder: str = Field(
        "---",
        description="Text shown in reports for objectives without evidence"
    )
    file_stem: str = Field(
        "sovereignty_assessment",
        description="Base name for downloaded report files"
    )


class UIConfig(BaseModel):
    """Settings for the Streamlit app."""
    default_language: Language = Field(
        Language.ES,
        description="Language shown when a session starts (es, en)"
    )


class LoggingConfig(BaseModel):
    level: str = Field("INFO", description="Log level for the 'sovereignty' logger")
    dev_mode: bool = Field(True, description="Use Rich console output")
    include_logfire: bool = Field(False, description="Forward logs to Logfire")


class AppConfig(BaseModel):
    """Complete configuration for the sovereignty assessment."""
    advisor: AdvisorConfig = Field(default_factory=AdvisorConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the current configuration.

    Returns the global config, loading it from the first config file found
    (or defaults) if not yet loaded.
    """
    global _config
    if _config is None:
        path = find_config_file()
        _config = load_config(path) if path else AppConfig()
    return _config


def load_config(path: Path) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        The loaded AppConfig.
    """
    global _config

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    _config = AppConfig.model_validate(data or {})
    return _config


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _config
    _config = AppConfig()


def find_config_file() -> Optional[Path]:
    """Find a configuration file.

    Looks in (order of priority):
    1. SOVEREIGNTY_CONFIG environment variable
    2. ./sovereignty-config.yaml
    3. ./sovereignty-config.yml
    4. ~/.config/sovereignty-assessment/config.yaml
    """
    env_path = os.environ.get("SOVEREIGNTY_CONFIG")
    if env_path:
        path = Path(env_path)
        if path.exists():
            return path

    for name in ["sovereignty-config.yaml", "sovereignty-config.yml"]:
        path = Path(name)
        if path.exists():
            return path

    user_config = Path.home() / ".config" / "sovereignty-assessment" / "config.yaml"
    if user_config.exists():
        return user_config

    return None


def save_default_config(path: Path) -> None:
    """Save the default configuration to a YAML file.

    Args:
        path: Path where to save the configuration.
    """
    data = AppConfig().model_dump(mode="json")

    yaml_content = """# EU Cloud Sovereignty Assessment Configuration
# =============================================
#
# Copy this file to one of these locations:
#   - ./sovereignty-config.yaml (current directory)
#   - ~/.config/sovereignty-assessment/config.yaml (user config)
#
# Or set the SOVEREIGNTY_CONFIG environment variable.
#
# The advisor API key is read from the environment variable named in
# advisor.api_key_env; it is never stored in this file.

"""
    yaml_content += yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(yaml_content)
