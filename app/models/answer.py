import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base

ANSWER_OPTIONS = ("A", "B", "C", "D")


class Answer(Base):
    __tablename__ = "answers"
    __table_args__ = (
        # (학생, 세션, 문항)당 답안 1개 - 재제출은 덮어쓰기
        UniqueConstraint(
            "student_id", "quiz_session_id", "question_number",
            name="uq_answers_student_session_question",
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    student_id: Mapped[str] = mapped_column(ForeignKey("students.id"), nullable=False, index=True)
    quiz_session_id: Mapped[str] = mapped_column(ForeignKey("quiz_sessions.id"), nullable=False, index=True)
    question_number: Mapped[int] = mapped_column(nullable=False)
    selected_option: Mapped[str] = mapped_column(String(1), nullable=False)
    answered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    student: Mapped["Student"] = relationship("Student", back_populates="answers")
    quiz_session: Mapped["QuizSession"] = relationship("QuizSession", back_populates="answers")
