"""Allow running cliref as ``python -m cliref``."""

from cliref.cli import main

if __name__ == "__main__":
    main()
