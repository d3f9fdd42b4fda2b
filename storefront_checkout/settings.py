"""Runtime settings, read from STOREFRONT_* environment variables."""
import os

from pydantic import BaseModel

DEFAULT_BASE_URL = "https://demo.spreecommerce.org"


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


class Settings(BaseModel):
    """Where the storefront lives and how long we are willing to wait for it."""
    base_url: str = DEFAULT_BASE_URL
    headless: bool = True
    page_load_timeout_ms: int = 30000
    element_timeout_ms: int = 10000
    network_timeout_ms: int = 15000
    run_e2e: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            base_url=os.environ.get("STOREFRONT_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            headless=_env_flag("STOREFRONT_HEADLESS", "true"),
            page_load_timeout_ms=int(os.environ.get("STOREFRONT_PAGE_LOAD_TIMEOUT", "30000")),
            element_timeout_ms=int(os.environ.get("STOREFRONT_ELEMENT_TIMEOUT", "10000")),
            network_timeout_ms=int(os.environ.get("STOREFRONT_NETWORK_TIMEOUT", "15000")),
            run_e2e=_env_flag("STOREFRONT_E2E", "false"),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
