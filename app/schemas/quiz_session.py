from datetime import datetime

from pydantic import BaseModel, Field

from app.models.quiz_session import DEFAULT_DURATION_MINUTES, DEFAULT_TITLE, MAX_QUESTION_NUMBER


class QuizSessionCreateRequest(BaseModel):
    """퀴즈 세션 생성 요청 스키마"""
    title: str = Field(DEFAULT_TITLE, min_length=1, max_length=200, description="세션 제목")
    duration: int = Field(DEFAULT_DURATION_MINUTES, ge=1, description="제한 시간 (분, 클라이언트 타이머용)")


class QuizSessionUpdateRequest(BaseModel):
    """퀴즈 세션 부분 수정 요청 스키마 (활성 상태는 start/stop으로만 변경)"""
    title: str | None = Field(None, min_length=1, max_length=200)
    duration: int | None = Field(None, ge=1)
    current_question_number: int | None = Field(None, ge=1, le=MAX_QUESTION_NUMBER, description="현재 문항 번호 (뒤로 이동 허용)")


class QuestionAdvanceRequest(BaseModel):
    """현재 문항 변경 요청 스키마"""
    question_number: int = Field(..., ge=1, le=MAX_QUESTION_NUMBER, description="이동할 문항 번호")


class QuizSessionResponse(BaseModel):
    """퀴즈 세션 응답 스키마"""
    id: str
    title: str
    current_question_number: int
    duration: int
    start_time: datetime | None
    end_time: datetime | None
    is_active: bool
    created_by: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
