"""
Log output for the `live_validation` logger tree.

Library modules log through `logging.getLogger(__name__)`, so everything lands
under the `live_validation` logger and propagates to whatever the host
application configured. `setup_logging` is for hosts that want a dedicated file
for validation messages; it never touches the root logger, other libraries'
handlers or `sys.excepthook`.
"""

import logging
import os
from pathlib import Path

PACKAGE_LOGGER = "live_validation"
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s - %(name)s - %(message)s'

_handlers: list[logging.Handler] = []
_log_file_path: Path | None = None


def _log_dir() -> Path:
    # <LOG_PATH>/log, or the project root's log/ directory
    base = os.getenv('LOG_PATH')
    return (Path(base) if base else Path(__file__).parent.parent.parent) / "log"


def setup_logging(log_file_name: str | None = None) -> Path:
    """
    Send `live_validation` records to `<log dir>/<log_file_name or LOG_FILE_NAME or app.log>`.

    `LOG_LEVEL` sets the package logger's level (default DEBUG); `ENV=debug` adds a
    console handler. Calling again replaces only the handlers added by a previous call.
    """
    global _log_file_path

    log_file = _log_dir() / (log_file_name or os.getenv('LOG_FILE_NAME', 'app.log'))
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    if _log_file_path == log_file and _handlers:
        return log_file

    reset_logging()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    package_logger.setLevel(os.getenv('LOG_LEVEL', 'DEBUG').upper())

    file_handler = logging.FileHandler(str(log_file), mode='a', encoding='utf-8')
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    _handlers.append(file_handler)

    if os.getenv('ENV') == 'debug':
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        _handlers.append(console_handler)

    for handler in _handlers:
        package_logger.addHandler(handler)

    _log_file_path = log_file
    package_logger.debug(f"[LOGGING] Writing validation logs to {log_file}")
    return log_file


def reset_logging() -> None:
    """Detach and close the handlers installed by `setup_logging`."""
    global _log_file_path

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    while _handlers:
        handler = _handlers.pop()
        package_logger.removeHandler(handler)
        handler.close()
    _log_file_path = None


def get_log_file_path() -> Path | None:
    return _log_file_path
