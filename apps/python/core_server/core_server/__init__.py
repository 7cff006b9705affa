"""FastAPI application serving the ideas spiral."""
