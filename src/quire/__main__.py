"""Allow running quire as a module: python -m quire."""

from quire.cli import main

if __name__ == "__main__":
    main()
