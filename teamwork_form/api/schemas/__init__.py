"""
Schemas module untuk API
"""

from .responses import (
    BaseResponse,
    KeyStatus,
    FormAccessStatusResponse,
)
