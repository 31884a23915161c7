"""Module entry point for `python -m sdl_register_filter`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
