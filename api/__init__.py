"""api/ -- FastAPI application, HTTP models, and routes."""
