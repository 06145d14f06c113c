"""Allow running rustman with ``python -m rustman``."""

from rustman.interfaces.cli.main import main

if __name__ == "__main__":
    main()
