#!/usr/bin/env python3
"""Main entry point for the process simulation package."""

import sys

from process_simulation.scripts.run_simulation import main

if __name__ == '__main__':
    sys.exit(main())
