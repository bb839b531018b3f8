"""
Enable running FlowBot as a module: python -m flowbot

Usage:
    python -m flowbot generate "a -> b -> c"
    python -m flowbot serve
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
