# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: Shared utilities (base error, log masking)
# - pocketbase_client.py: Typed PocketBase HTTP wrapper
#
# These modules are self-contained and can be tested in isolation.
# Import them by module path, e.g. `from lib.pocketbase_client import ...`.
# =============================================================================
