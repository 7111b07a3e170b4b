"""API route handlers.

This module contains FastAPI routers for:
- Health check endpoints
- Contact submission endpoint
"""
