"""Module entrypoint for ``python -m treescan``.

All argument parsing and output happen in ``treescan.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
