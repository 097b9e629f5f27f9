"""Allow ``python -m dirtree PATH ...`` as an alias for the console script."""

from .cli import main


if __name__ == "__main__":
    main()
