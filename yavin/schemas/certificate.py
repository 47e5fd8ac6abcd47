"""
Pydantic schemas for the completion certificate.
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class CertificateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    success: bool = True
    eligible: bool
    remaining: List[str] = []
    certificate_id: Optional[str] = None
    name: Optional[str] = None
    total_xp: Optional[int] = None
    average_score: Optional[float] = None
    issued_on: Optional[date] = None
