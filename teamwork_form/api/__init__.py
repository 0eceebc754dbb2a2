"""
Read-only status API for the form access configuration
"""

from .app import create_app
