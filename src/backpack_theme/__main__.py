"""Entry point for ``python -m backpack_theme``."""

from backpack_theme.cli import main

if __name__ == "__main__":
    main()
