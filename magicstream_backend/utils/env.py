from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

ENV_FILE_VAR = "MAGICSTREAM_ENV_FILE"


def load_env(*, override: bool = False) -> Path | None:
    """
    Load API settings from a dotenv file and return the file used.

    `MAGICSTREAM_ENV_FILE` names the file explicitly and must exist. Otherwise
    the first `.env` in the project root, then the working directory, is used.
    Variables already set in the process win unless `override` is true.
    """
    explicit = (os.getenv(ENV_FILE_VAR) or "").strip()
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise RuntimeError(f"{ENV_FILE_VAR} points to a missing file: {path}")
        load_dotenv(dotenv_path=path, override=override)
        return path

    project_root = Path(__file__).resolve().parents[2]
    for path in (project_root / ".env", Path.cwd() / ".env"):
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None
