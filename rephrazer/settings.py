"""Host configuration for Rephrazer.

Settings are loaded from environment variables with .env file support via
pydantic-settings. They only affect the host surface (clipboard access);
prompt compilation is never configurable from the environment.

Environment variables:
    REPHRAZER_CLIPBOARD_COMMAND: Command the compiled prompt is piped into (e.g. "pbcopy")
    REPHRAZER_CLIPBOARD_TIMEOUT: Seconds to wait for the clipboard command

Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values

Example:
    >>> from rephrazer.settings import settings
    >>> print(settings.clipboard_command or "auto-detect")
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Host configuration for clipboard access.

    Attributes:
        clipboard_command: Shell-style command that receives the prompt on stdin.
                           Empty string means auto-detect a platform tool.

        clipboard_timeout: Seconds before the clipboard command is abandoned.
    """

    model_config = SettingsConfigDict(
        env_prefix="REPHRAZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    clipboard_command: str = ""
    clipboard_timeout: float = 5.0


settings = Settings()
"""Global settings instance, created once at import."""
