"""Module entrypoint for ``python -m tidy``.

All argument parsing and startup happen in ``tidy.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
