#!/usr/bin/env python3
"""Mine behavioral rules from a trade file."""

import sys
sys.path.insert(0, "src")

from behavioral_rules.cli import main

if __name__ == "__main__":
    main(["mine"] + sys.argv[1:], standalone_mode=False)
