"""Entry point for ``python -m vrow``."""

from vrow.cli import main


if __name__ == "__main__":
    main()
