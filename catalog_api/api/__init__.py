"""HTTP API routers for the catalog."""
