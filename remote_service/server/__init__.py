"""
Server module for the remote service.

This module provides the FastAPI application that uvicorn serves once the
bootstrapper hands over control.
"""

from .app import create_app

__all__ = ["create_app"]
