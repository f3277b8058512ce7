from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from app.models.quiz_session import MAX_QUESTION_NUMBER


class AnswerSubmitRequest(BaseModel):
    """답안 제출 요청 스키마"""
    student_id: str = Field(..., description="학생 ID")
    quiz_session_id: str = Field(..., description="퀴즈 세션 ID")
    question_number: int = Field(..., ge=1, le=MAX_QUESTION_NUMBER, description="문항 번호")
    selected_option: Literal["A", "B", "C", "D"] = Field(..., description="선택지 (A-D)")


class AnswerResponse(BaseModel):
    """답안 응답 스키마"""
    id: str
    student_id: str
    quiz_session_id: str
    question_number: int
    selected_option: str
    answered_at: datetime

    model_config = {"from_attributes": True}


class AnswerListResponse(BaseModel):
    """문항별 답안 목록 응답 스키마"""
    answers: list[AnswerResponse]
    total: int


class AnswerStatsResponse(BaseModel):
    """문항별 선택지 집계 응답 스키마"""
    A: int = 0
    B: int = 0
    C: int = 0
    D: int = 0
    total: int = 0


class QuestionHistoryResponse(BaseModel):
    """세션 이력의 문항별 항목"""
    question_number: int
    stats: AnswerStatsResponse
