"""
Environment configuration module.

This module defines configuration classes for the environments the suites
run against (live, sandbox). Values are loaded from environment variables
with sensible defaults; credentials never have a literal default and must
come from the environment or a secret store.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from urllib.parse import urlsplit

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent


class Config:
    """Base configuration with default settings."""

    LOGIN_URL: str = os.environ.get("UIFLOWS_LOGIN_URL", "https://admin.kitchencab.in/login")
    HOME_URL: str = os.environ.get("UIFLOWS_HOME_URL", "https://dev.kitchencab.in/home")
    USERNAME: str | None = os.environ.get("UIFLOWS_USERNAME")
    PASSWORD: str | None = os.environ.get("UIFLOWS_PASSWORD")

    ACTION_TIMEOUT_MS: int = int(os.environ.get("UIFLOWS_ACTION_TIMEOUT_MS", "60000"))
    EXPECT_TIMEOUT_MS: int = int(os.environ.get("UIFLOWS_EXPECT_TIMEOUT_MS", "10000"))
    ARTIFACTS_DIR: str = os.environ.get("UIFLOWS_ARTIFACTS_DIR", str(BASE_DIR / "test-results"))


class LiveConfig(Config):
    """Live environment configuration (the deployed admin panel and storefront)."""


class SandboxConfig(Config):
    """Local sandbox configuration used by the offline UI suite."""

    BASE_URL: str = os.environ.get("UIFLOWS_SANDBOX_URL", "http://127.0.0.1:5055")
    LOGIN_URL: str = f"{BASE_URL}/login"
    HOME_URL: str = f"{BASE_URL}/home"
    USERNAME: str | None = os.environ.get("UIFLOWS_SANDBOX_USERNAME", "9000000001")
    PASSWORD: str | None = os.environ.get("UIFLOWS_SANDBOX_PASSWORD", "sandbox-pass")

    # Local pages respond quickly; fail fast
    ACTION_TIMEOUT_MS: int = 10000
    EXPECT_TIMEOUT_MS: int = 5000


# Configuration mapping for easy access
config = {
    "live": LiveConfig,
    "sandbox": SandboxConfig,
    "default": LiveConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (live, sandbox).
             If None, uses UIFLOWS_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("UIFLOWS_ENV", "default")
    return config.get(env, config["default"])


@dataclass(frozen=True)
class Environment:
    """
    Resolved, injectable environment configuration.

    Workflows receive an Environment instead of reading URLs or
    credentials themselves.

    Attributes:
        login_url: Admin login page URL.
        home_url: Storefront home page URL.
        username: Admin mobile number.
        password: Admin password.
        action_timeout_ms: Default timeout for clicks, fills and navigation.
        expect_timeout_ms: Default timeout for web-first assertions.
        viewport: Default browser viewport.
        artifacts_dir: Directory for screenshots and other artifacts.
    """

    login_url: str
    home_url: str
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    action_timeout_ms: int = 60000
    expect_timeout_ms: int = 10000
    viewport: dict[str, int] = field(default_factory=lambda: {"width": 1280, "height": 720})
    artifacts_dir: str = "test-results"

    @property
    def has_credentials(self) -> bool:
        """True when both username and password are configured."""
        return bool(self.username) and bool(self.password)

    @property
    def admin_origin(self) -> str:
        """Scheme and host of the admin surface, e.g. ``https://admin.example``."""
        parts = urlsplit(self.login_url)
        return f"{parts.scheme}://{parts.netloc}"

    @property
    def storefront_origin(self) -> str:
        """Scheme and host of the storefront surface."""
        parts = urlsplit(self.home_url)
        return f"{parts.scheme}://{parts.netloc}"

    def for_base_url(self, base_url: str) -> "Environment":
        """Return a copy whose admin and storefront URLs live under ``base_url``."""
        base_url = base_url.rstrip("/")
        return replace(
            self,
            login_url=f"{base_url}/login",
            home_url=f"{base_url}/home",
        )

    @classmethod
    def from_config(cls, config_class: type[Config]) -> "Environment":
        """Build an Environment from a configuration class."""
        return cls(
            login_url=config_class.LOGIN_URL,
            home_url=config_class.HOME_URL,
            username=config_class.USERNAME,
            password=config_class.PASSWORD,
            action_timeout_ms=config_class.ACTION_TIMEOUT_MS,
            expect_timeout_ms=config_class.EXPECT_TIMEOUT_MS,
            artifacts_dir=config_class.ARTIFACTS_DIR,
        )


def load_environment(env: str | None = None) -> Environment:
    """
    Resolve the Environment for the given (or current) environment name.

    Args:
        env: Environment name; see :func:`get_config`.

    Returns:
        Frozen Environment instance.
    """
    return Environment.from_config(get_config(env))
