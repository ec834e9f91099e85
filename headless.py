#!/usr/bin/env python3
"""
Convenience entry point for headless runs.

Usage:
    python headless.py                        # 125 boids, 1000 ticks
    python headless.py -n 500 --backend numba # Bigger flock, compiled tick
    python headless.py --preset calm --every 100
"""

import sys

from tools.headless import main

if __name__ == "__main__":
    sys.exit(main())
