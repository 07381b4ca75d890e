"""YAML and environment configuration for the identifier codecs.

Example YAML configuration:

    codec:
      default_century: "19"
      ignore_case: true
      mask_keep: 6

Environment variables:
    CIN_CODEC_CONFIG: Path to a YAML file in the format above.
    CIN_CODEC_DEFAULT_CENTURY: Overrides ``default_century``.
"""

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml

from cin_codec.logging.setup import get_logger

logger = get_logger(__name__)

_CENTURY_PATTERN = re.compile(r"[0-9]{2}")


@dataclass(frozen=True)
class CodecSettings:
    """Tunable conventions of the codecs.

    Attributes:
        default_century: Two-digit century inserted when widening a 15-digit
            CIN. Legacy numbers were issued before 2000, hence "19".
        ignore_case: Whether a lowercase ``x`` control character is accepted
            by default.
        mask_keep: Number of leading characters left visible when an
            identifier is written to the logs.
    """

    default_century: str = "19"
    ignore_case: bool = True
    mask_keep: int = 6

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.default_century, str) or not _CENTURY_PATTERN.fullmatch(
            self.default_century
        ):
            raise ValueError(
                f"default_century must be two digits, got {self.default_century!r}"
            )
        if not isinstance(self.ignore_case, bool):
            raise ValueError(f"ignore_case must be a boolean, got {self.ignore_case!r}")
        if (
            not isinstance(self.mask_keep, int)
            or isinstance(self.mask_keep, bool)
            or self.mask_keep < 0
        ):
            raise ValueError(f"mask_keep must be a non-negative integer, got {self.mask_keep!r}")


def load_settings_from_yaml(path: Path | str) -> CodecSettings:
    """Load codec settings from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        CodecSettings built from the ``codec`` section; missing keys keep
        their defaults.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        ValueError: If the YAML structure or a value is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return CodecSettings()

    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

    section = data.get("codec", {})
    if section is None:
        return CodecSettings()
    if not isinstance(section, dict):
        raise ValueError(
            f"Invalid codec section: expected dict, got {type(section).__name__}"
        )

    unknown = set(section) - {"default_century", "ignore_case", "mask_keep"}
    if unknown:
        raise ValueError(f"Unknown codec settings: {', '.join(sorted(unknown))}")

    century = section.get("default_century", "19")
    # YAML reads an unquoted 19 as an int
    if isinstance(century, int) and not isinstance(century, bool):
        century = f"{century:02d}"

    return CodecSettings(
        default_century=century,
        ignore_case=section.get("ignore_case", True),
        mask_keep=section.get("mask_keep", 6),
    )


def load_settings_from_yaml_safe(path: Path | str) -> tuple[CodecSettings, Optional[str]]:
    """Load settings, returning defaults and an error message on failure.

    Returns:
        Tuple of (settings, error_message). If successful, error_message is None.
        If failed, settings are the defaults.
    """
    try:
        return load_settings_from_yaml(path), None
    except FileNotFoundError as e:
        return CodecSettings(), str(e)
    except ValueError as e:
        return CodecSettings(), f"Configuration error: {e}"
    except yaml.YAMLError as e:
        return CodecSettings(), f"YAML parsing error: {e}"


@lru_cache(maxsize=1)
def get_settings() -> CodecSettings:
    """Return process-wide settings from CIN_CODEC_CONFIG and env overrides.

    The result is cached; call ``reset_settings`` after changing the
    environment.
    """
    settings = CodecSettings()

    config_path = os.getenv("CIN_CODEC_CONFIG")
    if config_path:
        settings, error = load_settings_from_yaml_safe(config_path)
        if error:
            logger.warning("Falling back to default codec settings: %s", error)

    century = os.getenv("CIN_CODEC_DEFAULT_CENTURY")
    if century:
        try:
            settings = CodecSettings(
                default_century=century,
                ignore_case=settings.ignore_case,
                mask_keep=settings.mask_keep,
            )
        except ValueError as e:
            logger.warning("Ignoring CIN_CODEC_DEFAULT_CENTURY override: %s", e)

    return settings


def reset_settings() -> None:
    """Clear the cached settings."""
    get_settings.cache_clear()
