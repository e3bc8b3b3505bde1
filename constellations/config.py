from __future__ import annotations

from pathlib import Path


def default_store_dir() -> Path:
    """
    Per-user task store:
      ~/.constellations/

    The directory is not created here; `cst` expects it to exist.
    """
    return Path.home() / ".constellations"
