"""Application configuration for SepsisWatch.

This module provides centralized configuration management with support for
environment variable overrides and a singleton pattern for consistent access.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Determine the project root directory
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Application configuration settings.

    Attributes:
        SAMPLE_DATA_PATH: Path to the bundled sample import payload.
        RESP_RATE_THRESHOLD: qSOFA respiratory rate threshold (breaths/min).
        SBP_THRESHOLD: qSOFA systolic blood pressure threshold (mmHg).
        HR_HISTORY_LENGTH: Number of samples heart-rate trends are
            normalized to on import.
        SKIP_INVALID_RECORDS: If True, imports skip invalid records instead
            of rejecting the whole file.
        LOG_LEVEL: Logging level name for the dashboard process.

    Example:
        >>> config = get_config()
        >>> config.RESP_RATE_THRESHOLD
        22.0
    """

    SAMPLE_DATA_PATH: Path = field(
        default_factory=lambda: _PROJECT_ROOT / "data" / "sample" / "patients.json"
    )

    # qSOFA thresholds (Sepsis-3)
    RESP_RATE_THRESHOLD: float = 22.0
    SBP_THRESHOLD: float = 100.0

    # Import settings
    HR_HISTORY_LENGTH: int = 5  # -4h, -3h, -2h, -1h, Now
    SKIP_INVALID_RECORDS: bool = False

    LOG_LEVEL: str = "INFO"


# Singleton instance storage
_config_instance: Optional[Config] = None


def get_config() -> Config:
    """Get the singleton configuration instance.

    Returns:
        Config: The singleton configuration instance.

    Example:
        >>> config1 = get_config()
        >>> config2 = get_config()
        >>> config1 is config2
        True
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = Config()
        load_env_config(_config_instance)

    return _config_instance


def load_env_config(config: Optional[Config] = None) -> Config:
    """Load configuration from environment variables if present.

    Environment variables override default values. Supported variables:
        - SEPSISWATCH_SAMPLE_DATA_PATH: Override SAMPLE_DATA_PATH
        - SEPSISWATCH_RESP_RATE_THRESHOLD: Override respiratory rate threshold (> 0)
        - SEPSISWATCH_SBP_THRESHOLD: Override systolic BP threshold (> 0)
        - SEPSISWATCH_HR_HISTORY_LENGTH: Override trend length (>= 1)
        - SEPSISWATCH_SKIP_INVALID_RECORDS: true/false
        - SEPSISWATCH_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR

    Invalid values are ignored and the default is kept.

    Args:
        config: Optional Config instance to update. If None, creates a new one.

    Returns:
        Config: The updated configuration instance.

    Example:
        >>> import os
        >>> os.environ["SEPSISWATCH_SBP_THRESHOLD"] = "90"
        >>> config = load_env_config()
        >>> config.SBP_THRESHOLD
        90.0
    """
    if config is None:
        config = Config()

    if sample_path := os.environ.get("SEPSISWATCH_SAMPLE_DATA_PATH"):
        config.SAMPLE_DATA_PATH = Path(sample_path)

    if rr := os.environ.get("SEPSISWATCH_RESP_RATE_THRESHOLD"):
        try:
            value = float(rr)
            if value > 0:
                config.RESP_RATE_THRESHOLD = value
        except ValueError:
            pass  # Keep default if invalid

    if sbp := os.environ.get("SEPSISWATCH_SBP_THRESHOLD"):
        try:
            value = float(sbp)
            if value > 0:
                config.SBP_THRESHOLD = value
        except ValueError:
            pass

    if history_length := os.environ.get("SEPSISWATCH_HR_HISTORY_LENGTH"):
        try:
            value = int(history_length)
            if value >= 1:
                config.HR_HISTORY_LENGTH = value
        except ValueError:
            pass

    if skip_invalid := os.environ.get("SEPSISWATCH_SKIP_INVALID_RECORDS"):
        flag = skip_invalid.strip().lower()
        if flag in _TRUE_VALUES:
            config.SKIP_INVALID_RECORDS = True
        elif flag in _FALSE_VALUES:
            config.SKIP_INVALID_RECORDS = False

    if log_level := os.environ.get("SEPSISWATCH_LOG_LEVEL"):
        level = log_level.strip().upper()
        if isinstance(logging.getLevelName(level), int):
            config.LOG_LEVEL = level

    return config


def reset_config() -> None:
    """Reset the configuration singleton to None.

    Useful for testing or when configuration needs to be reloaded.
    """
    global _config_instance
    _config_instance = None
