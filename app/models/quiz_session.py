import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin

DEFAULT_TITLE = "Quiz Session"
DEFAULT_DURATION_MINUTES = 5
# 문항 번호 상한 (세션 이력 조회 범위 제한)
MAX_QUESTION_NUMBER = 500


class QuizSession(Base, TimestampMixin):
    __tablename__ = "quiz_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title: Mapped[str] = mapped_column(Text, default=DEFAULT_TITLE, nullable=False)
    current_question_number: Mapped[int] = mapped_column(default=1, nullable=False)
    duration: Mapped[int] = mapped_column(default=DEFAULT_DURATION_MINUTES, nullable=False)  # 분 단위
    start_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=None)
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=None)
    is_active: Mapped[bool] = mapped_column(default=False, nullable=False, index=True)
    created_by: Mapped[str | None] = mapped_column(String(100), default=None)

    answers: Mapped[list["Answer"]] = relationship("Answer", back_populates="quiz_session")
