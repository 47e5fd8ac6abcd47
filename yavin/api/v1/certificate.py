"""
Completion certificate endpoint.
"""
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from yavin.core.dependencies import get_current_user
from yavin.db.base import get_db
from yavin.models.user import User
from yavin.schemas.certificate import CertificateResponse
from yavin.services.certificate import build_certificate

router = APIRouter()


@router.get("", response_model=CertificateResponse)
def get_certificate(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    return CertificateResponse.model_validate(build_certificate(db, current_user))
