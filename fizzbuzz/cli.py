"""fizzbuzz CLI entrypoint."""

from __future__ import annotations

from .runner import run


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint.

    The program takes no arguments; ``argv`` is accepted and ignored.

    Returns:
        Exit status code.
    """
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
