#!/usr/bin/env python3
# =============================================================================
# scripts/export_shell_config.py - Write capacitor.config.json
# =============================================================================
# Writes the native app shell descriptor where the packaging tool expects it.
#
# Usage:
#   python scripts/export_shell_config.py            # ./capacitor.config.json
#   python scripts/export_shell_config.py mobile/    # mobile/capacitor.config.json
# =============================================================================

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.shell import CAPACITOR_CONFIG_FILENAME, write_capacitor_config


def main():
    """Write the shell config to the path given on the command line."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
    target = sys.argv[1] if len(sys.argv) > 1 else CAPACITOR_CONFIG_FILENAME
    path = write_capacitor_config(target)
    print(f"Wrote {path}")


if __name__ == "__main__":
    main()
