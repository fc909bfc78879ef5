# =============================================================================
# app/ - Application Package
# =============================================================================
# This package contains the program edges:
# - config.py: Environment variable loading and settings
# - exceptions.py: Domain exception types
# - runner.py: Fetch-and-print entry point (console output, exit code)
# - shell.py: Native app shell descriptor (Capacitor)
#
# The app layer is thin - it handles configuration and console concerns and
# delegates the fetch flow to the core/ package.
# =============================================================================
