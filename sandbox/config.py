"""
Sandbox application configuration.

Configuration values are loaded from environment variables with defaults
suitable for a throwaway local server.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    SECRET_KEY: str = os.environ.get("SANDBOX_SECRET_KEY", "sandbox-secret-key")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "SANDBOX_DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'sandbox.db'}?check_same_thread=False"
    )

    ADMIN_USERNAME: str = os.environ.get("UIFLOWS_SANDBOX_USERNAME", "9000000001")
    ADMIN_PASSWORD: str = os.environ.get("UIFLOWS_SANDBOX_PASSWORD", "sandbox-pass")

    # Seed for the generated "Created By" names
    SEED: int = 1234


class DevelopmentConfig(Config):
    """Interactive use: ``flask --app sandbox run``."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Configuration used by the UI suite."""

    DEBUG: bool = False
    TESTING: bool = True


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing).
             If None, uses SANDBOX_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("SANDBOX_ENV", "development")
    return config.get(env, config["default"])
