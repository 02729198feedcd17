import logging as root_logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_sdk_logging(
    level="INFO",
    pretty: bool = False,
    console: Optional[Console] = None,
    propagate: bool = False,
):
    """
    Configures the global logging strategy for the searchdsl library.

    This function initializes the 'searchdsl' logger namespace and provides two
    distinct output modes: a 'pretty' mode using the Rich library, and a
    standard stream mode for basic environments.
    Existing handlers are cleared to prevent duplicate log entries
    during re-initialization.

    Args:
        level (str): The logging threshold (e.g., "DEBUG", "INFO", "WARNING").
            Defaults to "INFO".
        pretty (bool): If True, enables Rich terminal output with colors,
            timestamps, and formatted tracebacks.
        console (Optional[rich.console.Console]): An optional Rich Console
            instance the handler writes to. Defaults to a new
            Console(stderr=True).
        propagate (bool): Whether records bubble up to the root logger.

    Notes:
        - Propagation is disabled by default to prevent logs from
          bubbling up to the root logger and causing duplicate output in
          test runners like pytest.
    """
    logger = root_logging.getLogger("searchdsl")

    # Clear existing handlers to prevent duplicates
    if logger.hasHandlers():
        logger.handlers.clear()

    if pretty:
        # --- RICH PATH ---
        console = console or Console(stderr=True)

        handler = RichHandler(
            level=level,
            console=console,
            show_time=True,
            show_path=True,
            markup=True,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        formatter = root_logging.Formatter(
            fmt="[dim white]%(name)s[/dim white]: %(message)s", datefmt="[%X]"
        )
        handler.setFormatter(formatter)
        init_message = f"Logging initialized at level: [bold]{level}[/bold]"
        extra = {"markup": True}
    else:
        # --- STANDARD PATH ---
        handler = root_logging.StreamHandler(sys.stderr)
        # Standard format: Time [Level] Name: Message
        formatter = root_logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        init_message = f"Logging initialized at level: {level}"
        extra = {}

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate

    logger.info(init_message, extra=extra)


def get_logger(name: Optional[str] = None):
    """
    Retrieves a logger instance within the searchdsl namespace.

    Args:
        name (Optional[str]): The name of the logger.
            Typically passed as __name__ to reflect the module's path
            (e.g., 'searchdsl.search.search').
            If None, the top-level 'searchdsl' logger is returned.

    Returns:
        logging.Logger: A logger instance for the library subsystem.
    """
    if name is not None:
        return root_logging.getLogger(name=name)
    else:
        return root_logging.getLogger("searchdsl")
