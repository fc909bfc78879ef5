# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for FlyerTown:
# - test_models.py: Unit tests for model validation
# - test_pocketbase_client.py: PocketBase wrapper against a mock transport
# - test_flyer_service.py: Fetch flow and imageUrl enrichment
# - test_runner.py: Console output of a full run
# - test_shell.py: App shell descriptor export
#
# Run tests with: pytest
# =============================================================================
