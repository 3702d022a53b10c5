import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def env_list(name: str, default: str = "") -> tuple:
    """Comma separated environment variable as a tuple (empty entries dropped)."""
    raw = os.getenv(name, default)
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def env_optional_float(name: str, default: str):
    """Float env var; an empty value means None."""
    raw = os.getenv(name, default).strip()
    return float(raw) if raw else None
