"""Module entrypoint for ``python -m docshelf``.

All argument parsing and logging setup happen in ``docshelf.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
