"""Logging setup, called once from the application lifespan."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the root logger."""
    root = logging.getLogger()
    if any(getattr(handler, "_storefront", False) for handler in root.handlers):
        root.setLevel(getattr(logging, level.upper(), logging.INFO))
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._storefront = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
