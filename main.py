#!/usr/bin/env python3
"""IntervalTimer entry point.

Run with:
    python main.py
    python -m intervaltimer
"""

from intervaltimer.__main__ import main


if __name__ == "__main__":
    main()
