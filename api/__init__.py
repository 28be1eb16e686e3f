"""API module - backend FastAPI dla auto-battlera."""
