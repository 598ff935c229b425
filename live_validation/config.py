import os

from live_validation.utils.env_utils import get_bool_env

# Values are read on every call so that `.env` files loaded by `boot()` and
# variables changed at runtime are honoured.


# Raise `RuleDefinitionException` for malformed or duplicated rules instead of skipping them
def strict_rules() -> bool:
    return get_bool_env("VALIDATION_STRICT_RULES", False)


# Emit a DEBUG line for every evaluation (noisy: validators run on each keystroke)
def log_evaluations() -> bool:
    return get_bool_env("VALIDATION_LOG_EVALUATIONS", False)


def locale_default() -> str:
    return os.getenv("LOCALE_DEFAULT", "en")


def locale_fallback() -> str:
    return os.getenv("LOCALE_FALLBACK", "en")


def locale_path() -> str:
    return os.getenv("LOCALE_PATH", os.path.join(os.getcwd(), "lang"))
