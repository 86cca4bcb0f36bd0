import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

def configure_logging(verbose: bool = False) -> None:
    """Send diagnostics to stderr. stdout is reserved for the registration lines."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
