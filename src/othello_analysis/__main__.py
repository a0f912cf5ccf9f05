from __future__ import annotations

import sys

from othello.scripts.league_main import main as league_main

from .cli.analyze_csv import main as analyze_main

COMMANDS = {
    "analyze": analyze_main,
    "league": league_main,
}


def main(argv: list[str] | None = None) -> int:
    """`othello-analysis [analyze|league] ...`; bare flags mean analyze."""
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0].startswith("-"):
        return analyze_main(argv)

    cmd, *rest = argv
    handler = COMMANDS.get(cmd.lower())
    if handler is None:
        print(f"Unknown command {cmd!r}; expected one of: {', '.join(COMMANDS)}", file=sys.stderr)
        return 2
    return handler(rest)


if __name__ == "__main__":
    raise SystemExit(main())
