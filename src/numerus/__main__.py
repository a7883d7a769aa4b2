"""Entry point for `python -m numerus`."""
import sys

from numerus.cli import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
