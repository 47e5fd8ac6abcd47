"""
Completion certificate, gated on the core sections.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from yavin.core.catalog import CORE_SECTION_IDS
from yavin.models.user import User
from yavin.services.progress import list_progress
from yavin.services.streak import utc_today


@dataclass(frozen=True)
class CertificateReport:
    eligible: bool
    remaining: List[str] = field(default_factory=list)
    certificate_id: Optional[str] = None
    name: Optional[str] = None
    total_xp: Optional[int] = None
    average_score: Optional[float] = None
    issued_on: Optional[date] = None


def certificate_id_for(user: User, issued_on: date) -> str:
    prefix = user.id.hex[:8].upper()
    return f"YAVIN-{prefix}-{issued_on:%Y%m%d}"


def build_certificate(db: Session, user: User, today: Optional[date] = None) -> CertificateReport:
    """
    Report certificate eligibility for ``user``.

    Ineligible users get the core sections they still have to complete.
    """
    records = list_progress(db, user.id)
    completed = {record.section_id for record in records if record.completed}
    remaining = [section_id for section_id in CORE_SECTION_IDS if section_id not in completed]
    if remaining:
        return CertificateReport(eligible=False, remaining=remaining)

    scores = [record.quiz_score for record in records if record.quiz_score is not None]
    average = round(sum(scores) / len(scores), 1) if scores else 0.0
    issued_on = today or utc_today()

    return CertificateReport(
        eligible=True,
        certificate_id=certificate_id_for(user, issued_on),
        name=user.display_name,
        total_xp=user.total_xp or 0,
        average_score=average,
        issued_on=issued_on,
    )
