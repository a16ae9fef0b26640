"""Allow ``python -m keycount``."""

from keycount.cli import main

if __name__ == "__main__":
    main()
