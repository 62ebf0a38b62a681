"""
Run the MagicStream Movies API with uvicorn.

Usage:
    python -m api

HOST and PORT default to 0.0.0.0 and 8080. LOG_LEVEL defaults to INFO.
"""
from __future__ import annotations

import logging
import os

import uvicorn

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_log_level() -> str:
    level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    if level not in LOG_LEVELS:
        raise RuntimeError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def main() -> None:
    log_level = get_log_level()
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    uvicorn.run("api.main:app", host=host, port=port, log_level=log_level.lower())


if __name__ == "__main__":
    main()
