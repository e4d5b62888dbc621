"""Allow ``python -m hostos``."""

from hostos.cli.main import main


if __name__ == "__main__":
    main()
