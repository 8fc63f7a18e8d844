#!/usr/bin/env python3
"""TickTock — entry point.

Run with:
    python main.py
    python -m ticktock
"""

from ticktock.__main__ import main


if __name__ == "__main__":
    main()
