# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware order, error handlers, bootstrap lifespan
# - config.py: Environment variable loading and settings
# - middleware.py: JSON body parsing stage
# - exceptions.py: Error envelope and exception handlers
# - routers/: Health/status endpoints and the domain route mount points
#
# The app layer is thin - it handles HTTP concerns and delegates
# dependency state to the core/ and lib/ packages.
# =============================================================================
