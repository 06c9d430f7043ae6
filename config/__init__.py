import os

DEFAULT_CLASS_NAMES = "Berçário,Maternal,Jardim,Primários,Juniores,Adolescentes"


def get_settings_module() -> str:
    # Environment comes from APP_ENV, 'development' by default.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def class_names_from_env() -> tuple:
    """Class groups from CLASS_NAMES (comma separated), in display order."""
    raw = os.getenv("CLASS_NAMES", DEFAULT_CLASS_NAMES)
    return tuple(name.strip() for name in raw.split(",") if name.strip())
