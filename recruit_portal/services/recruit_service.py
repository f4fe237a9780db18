"""
Recruit Service - CRUD operations for submitted applications.

Storage enforces uniqueness of student_id; this layer turns the
database's integrity errors into 409/400 responses with readable
messages and kicks off the confirmation email after a create.
"""

import logging
from typing import List, Optional

from fastapi import BackgroundTasks, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from recruit_portal.db.database import get_db
from recruit_portal.models.recruit import Recruit
from recruit_portal.schemas.schemas import RecruitCreate, RecruitResponse, RecruitUpdate
from recruit_portal.services.notification_service import send_recruit_confirmation

logger = logging.getLogger(__name__)

# SQLite: "UNIQUE constraint failed: recruits.student_id"
# PostgreSQL: 'duplicate key value violates unique constraint "uq_recruits_student_id"'
UNIQUE_MARKERS = ("UNIQUE constraint failed", "duplicate key value violates unique constraint")

GENERIC_CONFLICT = "A recruit with these details already exists."

# Largest value an INTEGER primary key can hold (SQLite and PostgreSQL bigint)
MAX_RECRUIT_ID = 2**63 - 1


def is_unique_violation(message: str) -> bool:
    return any(marker in message for marker in UNIQUE_MARKERS)


def is_student_id_violation(message: str) -> bool:
    return is_unique_violation(message) and "student_id" in message


class RecruitService:
    """
    Handles the recruits table.
    One instance per request, bound to that request's session.
    """

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, student_id_conflict: str) -> None:
        """
        Commit pending changes, translating integrity errors.
        student_id_conflict is the 409 message used when the student_id
        unique index is what failed.
        """
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            message = str(e.orig)
            if is_student_id_violation(message):
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=student_id_conflict)
            if is_unique_violation(message):
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=GENERIC_CONFLICT)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Database error: {message}")

    def create(self, data: RecruitCreate, background_tasks: Optional[BackgroundTasks] = None) -> Recruit:
        """
        Insert a new recruit and schedule the confirmation email.
        The email is not awaited and its outcome doesn't affect the result.
        """
        recruit = Recruit(**data.model_dump())
        self.db.add(recruit)
        self._commit(
            f'A recruit with student ID "{data.student_id}" has already been submitted. '
            "Each student can only submit once."
        )
        self.db.refresh(recruit)
        logger.info("Recruit %s created (student ID %s)", recruit.id, recruit.student_id)

        if background_tasks is not None:
            snapshot = RecruitResponse.model_validate(recruit).model_dump()
            background_tasks.add_task(send_recruit_confirmation, snapshot)

        return recruit

    def find_all(self) -> List[Recruit]:
        return self.db.query(Recruit).order_by(Recruit.id).all()

    def find_one(self, recruit_id: int) -> Recruit:
        recruit = None
        if 1 <= recruit_id <= MAX_RECRUIT_ID:
            recruit = self.db.get(Recruit, recruit_id)
        if recruit is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Recruit with ID {recruit_id} not found")
        return recruit

    def update(self, recruit_id: int, data: RecruitUpdate) -> Recruit:
        """Overwrite only the fields present in the request body."""
        recruit = self.find_one(recruit_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(recruit, field, value)

        self._commit(f'Another recruit already exists with student ID "{recruit.student_id}".')
        self.db.refresh(recruit)
        logger.info("Recruit %s updated", recruit.id)
        return recruit

    def remove(self, recruit_id: int) -> None:
        recruit = self.find_one(recruit_id)
        self.db.delete(recruit)
        self.db.commit()
        logger.info("Recruit %s deleted", recruit_id)


def get_recruit_service(db: Session = Depends(get_db)) -> RecruitService:
    """FastAPI dependency - RecruitService bound to the request session."""
    return RecruitService(db)
