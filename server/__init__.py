"""FastAPI binding for Keyhub."""
