"""docstore configuration settings using Pydantic.

Values come from ``DOCSTORE_``-prefixed environment variables or a
``.env`` file. The store itself takes no configuration; these settings
only drive logging.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docstore.utils import setup_logging


class DocstoreSettings(BaseSettings):
    """Central configuration for docstore."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # --- Logging ---
    log_level: str = Field(default="INFO")
    log_file: str | None = None


def configure_logging(config: DocstoreSettings | None = None) -> None:
    """Apply logging settings, defaulting to the module singleton."""
    config = config or settings
    setup_logging(config.log_level, config.log_file)


# Singleton instance
settings = DocstoreSettings()
