"""Allow ``python -m pyfd``."""

from .cli import main

if __name__ == "__main__":
    main()
