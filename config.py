"""Default configuration for the log word analyzer."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Supported output formats
OUTPUT_FORMATS = ["list", "table", "json"]

# Environment variables (also read from .env)
ENV_K = "LOG_ANALYZER_K"
ENV_ENCODING = "LOG_ANALYZER_ENCODING"
ENV_FORMAT = "LOG_ANALYZER_FORMAT"


class InvalidTopKError(ValueError):
    """Raised when K is not a non-negative integer."""

    def __init__(self, value, context: str = ""):
        self.value = value
        self.context = context
        message = f"k must be a non-negative integer, got '{value}'"
        if context:
            message += f" in {context}"
        super().__init__(message)


def validate_k(value, context: str = "") -> int:
    """Parse and validate K.

    Args:
        value: int or string to validate
        context: Context for error message (e.g. "LOG_ANALYZER_K")

    Returns:
        K as int

    Raises:
        InvalidTopKError: If value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise InvalidTopKError(value, context)
    if isinstance(value, int):
        k = value
    else:
        try:
            k = int(str(value).strip())
        except ValueError:
            raise InvalidTopKError(value, context) from None
    if k < 0:
        raise InvalidTopKError(value, context)
    return k


@dataclass
class Config:
    """Application configuration."""

    default_k: int = 2
    encoding: str = "utf-8"
    output_format: str = "list"  # list, table, json

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Config":
        """Build config from environment variables (and .env file)."""
        load_dotenv(dotenv_path)
        config = cls()

        k = os.getenv(ENV_K)
        if k:
            config.default_k = validate_k(k, ENV_K)

        encoding = os.getenv(ENV_ENCODING)
        if encoding:
            config.encoding = encoding

        output_format = os.getenv(ENV_FORMAT)
        if output_format:
            if output_format not in OUTPUT_FORMATS:
                raise ValueError(
                    f"Unsupported output format: '{output_format}' in {ENV_FORMAT}. "
                    f"Supported: {', '.join(OUTPUT_FORMATS)}"
                )
            config.output_format = output_format

        return config
