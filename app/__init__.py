"""Intake Service Application Package.

This package contains the core application components:
- models: submission types and response envelopes
- routers: API route handlers
- services: field validation rules
- utils: request body decoding
"""

__version__ = "0.1.0"
