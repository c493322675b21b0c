# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Storefront API:
# - test_config.py: Settings loading and computed properties
# - test_status_service.py: State labels and the status snapshot
# - test_bootstrap.py: Startup ordering, fail-fast policy, lifespan wiring
# - test_pipeline.py: Middleware chain, error envelope, 404s, route mounts
# - test_mongodb_client.py / test_cloudinary_client.py: Service clients
#
# Run tests with: pytest
# =============================================================================
