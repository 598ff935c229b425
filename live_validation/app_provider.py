from typing import Optional

from live_validation.utils.env_utils import configure_env
from live_validation.utils.logging import setup_logging


def boot(*,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
) -> None:
    """
    Prepares the process for live-validation.
    - Loads environment variables from `.env.<ENV>` / `.env` (or `env_file_name`)
    - Sets up logging

    Validators work without calling this; it only wires configuration and logs
    for applications that do not set them up themselves.
    """
    configure_env(env_file_name)
    setup_logging(log_file_name)
