import os
from functools import lru_cache
from pathlib import Path


@lru_cache
def get_configfile() -> Path | None:
    # Priority: ENV > default file in current working directory
    raw = os.getenv("CLONESAFECONFIG")

    if raw is None:
        file = Path.cwd() / "clonesafe.yaml"
        return file if file.is_file() else None

    file = Path(raw)

    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            "  - Fix or unset the CLONESAFECONFIG environment variable\n"
            "  - Or place a 'clonesafe.yaml' file in the current working directory."
        )

    return file
