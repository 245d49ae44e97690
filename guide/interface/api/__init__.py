"""FastAPI interface."""
