"""Business logic services.

This module contains the contact submission validation rules.
"""
