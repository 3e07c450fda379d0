"""Entry point for the magic packet builder.
Run: python -m main <host-or-mac>...  (or python main.py)
"""
import sys

from wolpacket.cli import main

if __name__ == "__main__":
    sys.exit(main())
