"""HTTP API: FastAPI application, dependencies and rate limiter."""
