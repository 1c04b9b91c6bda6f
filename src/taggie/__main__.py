"""Allow running taggie with ``python -m taggie``."""

from .cli import main

if __name__ == "__main__":
    main()
