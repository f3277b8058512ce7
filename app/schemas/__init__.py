from app.schemas.answer import (
    AnswerListResponse,
    AnswerResponse,
    AnswerStatsResponse,
    AnswerSubmitRequest,
    QuestionHistoryResponse,
)
from app.schemas.quiz_session import (
    QuestionAdvanceRequest,
    QuizSessionCreateRequest,
    QuizSessionResponse,
    QuizSessionUpdateRequest,
)
from app.schemas.student import (
    StudentCreateRequest,
    StudentListResponse,
    StudentResponse,
    StudentStatusUpdateRequest,
)

__all__ = [
    "StudentCreateRequest",
    "StudentStatusUpdateRequest",
    "StudentResponse",
    "StudentListResponse",
    "QuizSessionCreateRequest",
    "QuizSessionUpdateRequest",
    "QuestionAdvanceRequest",
    "QuizSessionResponse",
    "AnswerSubmitRequest",
    "AnswerResponse",
    "AnswerListResponse",
    "AnswerStatsResponse",
    "QuestionHistoryResponse",
]
