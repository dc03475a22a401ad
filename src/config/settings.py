"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use GOMODCLEAN_ prefix (e.g., GOMODCLEAN_USE_GO_ENV=true).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use GOMODCLEAN_ prefix.

    Examples:
        GOMODCLEAN_MANIFEST_NAME=go.mod
        GOMODCLEAN_USE_GO_ENV=true
        GOMODCLEAN_GO_BINARY=/usr/local/go/bin/go
    """

    model_config = SettingsConfigDict(
        env_prefix="GOMODCLEAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Manifest location
    manifest_name: str = Field(
        default="go.mod",
        description="Manifest file name looked up inside the input directory",
    )

    use_go_env: bool = Field(
        default=False,
        description="Locate the manifest by asking the go toolchain (go env GOMOD)",
    )

    go_binary: str = Field(
        default="go",
        description="go executable used for the go env query",
    )

    go_env_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait for go env GOMOD before giving up",
    )

    # Output configuration
    report_name: str = Field(
        default="gomodclean.json",
        description="File name of the JSON report written to the output directory",
    )

    highlight_source: bool = Field(
        default=True,
        description="Show syntax-highlighted offending lines at verbosity >= 2",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
