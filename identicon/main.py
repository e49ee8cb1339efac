"""Точка входа: командная строка и окно просмотра.

    identicon test            -> ./test.png
    identicon a b -o avatars  -> avatars/a.png, avatars/b.png
    identicon --gui
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from identicon.controllers.app_controller import AppController
from identicon.settings import settings


def create_identicon(seed: str, output_dir: str | Path | None = None) -> Tuple[bool, str]:
    """Создаёт `<output_dir>/<seed>.png` и возвращает `(ok, message)`."""
    directory = settings.output_dir if output_dir is None else output_dir
    return AppController(output_dir=directory).create_identicon(seed)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Deterministic 5x5 symmetric avatar from a string, saved as <seed>.png",
    )
    parser.add_argument("seeds", nargs="*", metavar="SEED", help="input string(s)")
    parser.add_argument("-o", "--output-dir", default=None, help=f"target directory (default: {settings.output_dir})")
    parser.add_argument("--log-level", default=settings.log_level, help="logging level (default: %(default)s)")
    parser.add_argument("--gui", action="store_true", help="open the preview window")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    output_dir = settings.output_dir if args.output_dir is None else args.output_dir

    if args.gui or not args.seeds:
        # imported lazily so the CLI works without a display
        from identicon.app import IdenticonApp

        app = IdenticonApp(output_dir=output_dir)
        app.mainloop()
        return 0

    failed = 0
    for seed in args.seeds:
        ok, message = create_identicon(seed, output_dir)
        print(message, file=sys.stdout if ok else sys.stderr)
        if not ok:
            failed += 1
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
