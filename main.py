#!/usr/bin/env python3
"""HIIT — entry point.

Run with:
    python main.py
    python -m hiit
"""

from hiit.__main__ import main


if __name__ == "__main__":
    main()
