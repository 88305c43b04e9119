"""Module entrypoint for ``python -m tmages``."""

from .cli import main


if __name__ == "__main__":
    main()
