#!/usr/bin/env python3
"""
ABOUTME: Entry point for the envlookup CLI
ABOUTME: Simple wrapper that imports and runs the modular CLI
"""

from envlookup.cli import main

if __name__ == "__main__":
    main()
