from __future__ import annotations

import sys

from .cli.analyze import main as analyze_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # optional "analyze" subcommand; flags alone also run the analysis
    if argv and argv[0].lower() in {"analyze", "analysis"}:
        argv = argv[1:]

    if argv and not argv[0].startswith("-"):
        print("Usage:")
        print("  python -m cfour_analysis [analyze] [--scores ...] [--outdir figures] [--show]")
        return 2

    return analyze_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
