import os


def get_settings_module() -> str:
    """Settings module for the payroll console, picked by APP_ENV.

    "prod"/"production" and "test"/"testing" select their modules; anything
    else, including an unset APP_ENV, runs with config.development.
    """
    env = os.getenv("APP_ENV", "development").strip().lower()

    if env in {"prod", "production"}:
        return "config.production"
    if env in {"test", "testing"}:
        return "config.testing"
    return "config.development"
