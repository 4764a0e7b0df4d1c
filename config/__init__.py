import os
from typing import Optional

_ENV_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Settings module for ``env`` (default: the APP_ENV variable).

    Anything that is not production or testing runs with development settings.
    """
    name = (env or os.getenv("APP_ENV", "development")).strip().lower()
    return f"config.{_ENV_ALIASES.get(name, 'development')}"
