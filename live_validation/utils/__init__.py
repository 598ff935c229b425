from .env_utils import configure_env, get_bool_env
from .logging import get_log_file_path, reset_logging, setup_logging
from .value_utils import is_empty

__all__ = [
    "configure_env",
    "get_bool_env",
    "get_log_file_path",
    "setup_logging",
    "reset_logging",
    "is_empty",
]
