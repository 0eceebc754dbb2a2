"""
API endpoints
"""
