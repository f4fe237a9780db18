from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text, UniqueConstraint

from recruit_portal.db.database import Base


class Recruit(Base):
    """One applicant's submitted recruitment form."""

    __tablename__ = "recruits"
    __table_args__ = (
        UniqueConstraint("student_id", name="uq_recruits_student_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Personal information
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    student_id = Column(String(50), nullable=False)
    personal_email = Column(String(255), nullable=False)
    gsuite_email = Column(String(255), nullable=False)
    phone_number = Column(String(30), nullable=False)

    # Academic information
    enrollment_semester = Column(String(30), nullable=False)
    residential_semester = Column(String(30), nullable=False)
    current_semester = Column(String(30), nullable=False)

    # Department preferences (codes, see core.options)
    preferred_department = Column(String(10), nullable=False)
    preferred_department_2 = Column(String(10), nullable=False)

    hobbies = Column(String(500), nullable=True)
    about = Column(Text, nullable=False)
    skills = Column(String(1000), nullable=True)

    # Social links
    facebook_link = Column(String(500), nullable=False)
    linkedin_link = Column(String(500), nullable=True)
    github_link = Column(String(500), nullable=True)
    portfolio_link = Column(String(500), nullable=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Recruit id={self.id} student_id={self.student_id!r}>"
