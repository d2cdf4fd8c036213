"""Logging setup shared by the CLI and GUI entry points."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger.

    Args:
        verbose: Log DEBUG messages instead of WARNING and above
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    # urllib3 debug output repeats every request line
    logging.getLogger("urllib3").setLevel(logging.INFO if verbose else logging.WARNING)
