import os

ENV_MODULES = {
    "development": "config.development",
    "dev": "config.development",
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}


def get_settings_module(env=None) -> str:
    """Settings module for ``env`` (falls back to ``$APP_ENV``).

    Unknown names use the development settings.
    """
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return ENV_MODULES.get(env.strip().lower(), "config.development")
