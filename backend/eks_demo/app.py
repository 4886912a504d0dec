"""FastAPI application entrypoint.

This module imports the application factory from main.py and creates the app instance
that will be used by ASGI servers (uvicorn, gunicorn, etc.).

Usage:
    uvicorn eks_demo.app:app --reload

For the container entrypoint (fatal bind errors, SIGTERM hard exit) use
``python -m eks_demo`` instead.
"""
from eks_demo.main import create_app

app = create_app()

__all__ = ["app"]
