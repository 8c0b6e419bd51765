"""Settings selection for the employee directory.

``APP_ENV`` names the environment; the aliases below are accepted so that the
values used by CI and deploy scripts work unchanged. ``SETTINGS_MODULE`` wins
over ``APP_ENV`` when a dotted module path is given explicitly.
"""

import os

DEFAULT_ENV = "development"

ENV_ALIASES = {
    "development": "development",
    "dev": "development",
    "local": "development",
    "testing": "testing",
    "test": "testing",
    "ci": "testing",
    "production": "production",
    "prod": "production",
    "live": "production",
}


def resolve_env(value=None) -> str:
    """Canonical environment name for ``value``; unknown names mean development."""
    env = (value or DEFAULT_ENV).strip().lower()
    return ENV_ALIASES.get(env, DEFAULT_ENV)


def get_settings_module() -> str:
    explicit = os.getenv("SETTINGS_MODULE", "").strip()
    if explicit:
        return explicit
    return f"config.{resolve_env(os.getenv('APP_ENV'))}"
