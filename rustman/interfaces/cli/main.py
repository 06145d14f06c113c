"""Entry point for the rustman CLI.

Usage:
    python -m rustman

Or via installed entry point:
    rustman [--list] [--dir PATH]
"""

from rustman.interfaces.cli import app


def main() -> None:
    """Run the rustman CLI application."""
    app()


if __name__ == "__main__":
    main()
