"""
Runtime settings read from the environment.

Environment Variables:
    ANTHROPIC_API_KEY: API key for natural-language query generation
    CLAUDE_MODEL: Model used for query generation
    TOOLPROBE_LOG_LEVEL: Log level for the toolprobe logger (default: WARNING)

A .env file in the working directory is loaded first, if present.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_CLAUDE_MODEL = "claude-3-7-sonnet-20250219"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """
    Settings for the CLI and query generator.

    Attributes:
        anthropic_api_key: API key (None disables query generation)
        claude_model: Model name passed to the Messages API
        log_level: Logging level name
    """
    anthropic_api_key: Optional[str] = None
    claude_model: str = DEFAULT_CLAUDE_MODEL
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
            claude_model=os.getenv("CLAUDE_MODEL") or DEFAULT_CLAUDE_MODEL,
            log_level=(os.getenv("TOOLPROBE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
        )
