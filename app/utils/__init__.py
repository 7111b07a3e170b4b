"""Utility functions and helpers.

This module contains utility functions for:
- Request body decoding (JSON and form data)
"""
