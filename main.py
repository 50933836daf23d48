#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

    python main.py generate alice@example.com

Or use the full CLI:

    python -m identicon.cli generate --help
    python -m identicon.cli batch users.txt -o avatars
"""

from identicon.cli import app

if __name__ == "__main__":
    app()
