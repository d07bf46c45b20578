"""
CLI entry point for pyfd.

Executed by ``python -m pyfd.cli``.
"""

from .main import main

if __name__ == "__main__":
    main()
