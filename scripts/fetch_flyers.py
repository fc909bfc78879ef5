#!/usr/bin/env python3
# =============================================================================
# scripts/fetch_flyers.py - Fetch Flyers From PocketBase
# =============================================================================
# Logs in as a superuser, fetches the first page of flyers and prints each
# record with its imageUrl.
#
# Usage:
#   python scripts/fetch_flyers.py
#
# Prerequisites:
#   - PocketBase must be running (default http://127.0.0.1:8090)
#   - POCKETBASE_EMAIL / POCKETBASE_PASSWORD set (env or .env file)
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.runner import main


if __name__ == "__main__":
    sys.exit(main())
