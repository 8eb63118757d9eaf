"""Main entry point for the gridpath package when run as a module.

This module enables running gridpath directly using 'python -m gridpath'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    sys.exit(cli.main())


if __name__ == "__main__":
    main()
