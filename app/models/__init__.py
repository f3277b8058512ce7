from app.models.base import Base, get_db
from app.models.active_session import ActiveSessionSlot
from app.models.answer import Answer
from app.models.quiz_session import QuizSession
from app.models.student import Student

__all__ = ["Base", "Student", "QuizSession", "Answer", "ActiveSessionSlot", "get_db"]
