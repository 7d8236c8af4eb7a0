"""Run textecho from a checkout: `python -m main hello world`.

Same behavior as the installed `textecho` command; `src/` is added to
`sys.path` so `cli` and `core` import without `pip install`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
