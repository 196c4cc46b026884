"""LinkGuard HTTP application: FastAPI routes, schemas and services around the core."""
