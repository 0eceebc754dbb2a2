"""
Record Teamwork form access configuration
"""

__version__ = "1.0.0"
