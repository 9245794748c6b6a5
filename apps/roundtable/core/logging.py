import logging
import os
import sys


def setup_logging(level: str | int | None = None) -> None:
    """Initialize root logger once with stream handler and level.

    Level is resolved by precedence:
      1) explicit `level` arg
      2) env `ROUNDTABLE_LOG_LEVEL` or `LOG_LEVEL`
      3) default INFO
    """
    raw = (
        level
        if level is not None
        else (os.getenv("ROUNDTABLE_LOG_LEVEL") or os.getenv("LOG_LEVEL"))
    )
    desired_level = _resolve_level(raw)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        handler.setFormatter(fmt)
        root.addHandler(handler)
        logging.captureWarnings(True)
    root.setLevel(desired_level)


def _resolve_level(raw: str | int | None) -> int:
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        return logging.INFO

    name = raw.strip().upper()
    if name.isdigit():
        return int(name)
    name_map = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    return name_map.get(name, logging.INFO)
