"""Module entrypoint for ``python -m worldviewer``.

All argument parsing and session setup happen in ``worldviewer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
