"""Run nuzzlify from a source checkout without installing it.

    python main.py ZooSnugglers Muffalo:12 Elephant:36 Chicken

The installed `nuzzlify` script points at `cli.main:run`; this file only
makes the `src/` layout importable first.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    # Legacy Windows consoles (cp1252) cannot print non-ASCII mod names.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
