"""
Services module
"""

from .verifier import FormAccessVerifier, VerificationReport
