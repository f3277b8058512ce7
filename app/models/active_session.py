from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base

ACTIVE_SLOT_ID = 1


class ActiveSessionSlot(Base):
    """현재 진행 중인 세션을 가리키는 단일 행 레코드 (id는 항상 1)"""
    __tablename__ = "active_session_slot"

    id: Mapped[int] = mapped_column(primary_key=True, default=ACTIVE_SLOT_ID)
    quiz_session_id: Mapped[str | None] = mapped_column(ForeignKey("quiz_sessions.id"), nullable=True)
