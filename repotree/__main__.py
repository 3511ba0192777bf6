"""Module entrypoint for ``python -m repotree``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and output happen in ``repotree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
