import atexit
from datetime import (
    datetime,
)
import logging
import logging.handlers
import os
from pathlib import (
    Path,
)
import queue
import sys
import tempfile
from typing import (
    Any,
)

# Create a log queue
log_queue: "queue.Queue[Any]" = queue.Queue()

# Store the current listener to stop it on exit
_current_listener: logging.handlers.QueueListener | None = None

# Default format for log messages
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ROOT_LOGGER_NAME = "cidcodec"


def _parse_debug_modules(debug_str: str) -> dict[str, int]:
    """
    Parse the CIDCODEC_DEBUG environment variable into module-specific levels.

    Format examples:
    - "DEBUG"  # All modules at DEBUG level
    - "cidcodec.cid.v1:DEBUG"  # Only the CIDv1 codec at DEBUG
    - "cid.v1:DEBUG"  # Same as above, cidcodec prefix is optional
    - "cid:DEBUG,multiformats:INFO"  # Multiple modules
    """
    module_levels: dict[str, int] = {}

    if not debug_str or debug_str.isspace():
        return module_levels

    # A plain level without any colons applies to everything
    if ":" not in debug_str and debug_str.upper() in logging._nameToLevel:
        return {"": getattr(logging, debug_str.upper())}

    for part in debug_str.split(","):
        if ":" not in part:
            continue

        module, level = part.split(":", 1)
        level = level.strip().upper()

        if level not in logging._nameToLevel:
            continue

        module = module.strip()
        if module.startswith(f"{ROOT_LOGGER_NAME}."):
            module = module[len(ROOT_LOGGER_NAME) + 1 :]
        module = module.replace("/", ".").strip(".")

        module_levels[module] = getattr(logging, level)

    return module_levels


def _disable(root_logger: logging.Logger) -> None:
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)
    root_logger.propagate = False


def _default_log_file() -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    unique_id = os.urandom(4).hex()
    return str(Path(tempfile.gettempdir()) / f"cidcodec_{timestamp}_{unique_id}.log")


def setup_logging() -> None:
    """
    Set up logging configuration based on environment variables.

    Environment Variables:
        CIDCODEC_DEBUG
            Controls logging levels. Examples:
            - "DEBUG" (all modules at DEBUG level)
            - "cidcodec.cid.v1:DEBUG" (only the CIDv1 codec at DEBUG)
            - "cid:DEBUG,multiformats:INFO" (multiple modules)

        CIDCODEC_DEBUG_FILE
            File path for log output. If not set, logs go to a timestamped
            file in the system temp directory. Records are always echoed to
            stderr as well.

    When CIDCODEC_DEBUG is unset or names no valid level, the ``cidcodec``
    logger stays at WARNING with no handlers and does not propagate.
    """
    global _current_listener

    if _current_listener is not None:
        _current_listener.stop()
        _current_listener = None

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    module_levels = _parse_debug_modules(os.environ.get("CIDCODEC_DEBUG", ""))
    if not module_levels:
        _disable(root_logger)
        return

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)
    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    log_file = os.environ.get("CIDCODEC_DEBUG_FILE")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    else:
        log_file = _default_log_file()
        print(f"Logging to: {log_file}", file=sys.stderr)

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setFormatter(formatter)
    handlers.append(file_handler)

    queue_handler = logging.handlers.QueueHandler(log_queue)

    root_logger.handlers.clear()
    root_logger.addHandler(queue_handler)
    root_logger.propagate = False
    # Module-specific configuration defaults everything else to INFO
    root_logger.setLevel(module_levels.get("", logging.INFO))

    for module, level in module_levels.items():
        if module:
            logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{module}")
            logger.handlers.clear()
            logger.addHandler(queue_handler)
            logger.setLevel(level)
            logger.propagate = False

    _current_listener = logging.handlers.QueueListener(
        log_queue, *handlers, respect_handler_level=True
    )
    _current_listener.start()


@atexit.register
def cleanup_logging() -> None:
    """Stop the queue listener, flushing pending records."""
    global _current_listener
    if _current_listener is not None:
        _current_listener.stop()
        _current_listener = None
