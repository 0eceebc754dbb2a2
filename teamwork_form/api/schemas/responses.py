"""
Pydantic schemas untuk response models
"""

from pydantic import BaseModel
from typing import Dict, List, Optional


class BaseResponse(BaseModel):
    """Base response schema"""
    success: bool
    message: str


class KeyStatus(BaseModel):
    """Schema untuk status satu configuration key"""
    key: str
    group: str
    configured: bool
    problem: Optional[str] = None


class FormAccessStatusResponse(BaseResponse):
    """Schema untuk response status form access configuration"""
    keys: List[KeyStatus] = []
    values: Optional[Dict[str, str]] = None
    total_keys: int = 0
    configured_keys: int = 0
