"""Allow ``python -m sxl``."""

from .cli import main

if __name__ == "__main__":
    main()
