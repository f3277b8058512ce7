from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import answer as answer_schema
from app.services import answer_service

router = APIRouter(prefix="/answers", tags=["answers"])


@router.post("", response_model=answer_schema.AnswerResponse)
async def submit_answer(
    request: answer_schema.AnswerSubmitRequest,
    db: AsyncSession = Depends(get_db),
):
    """답안 제출 API (재제출 시 덮어쓰기)"""
    return await answer_service.submit_answer(db, request)


@router.get("", response_model=answer_schema.AnswerResponse | None)
async def get_student_answer(
    student_id: str = Query(..., description="학생 ID"),
    quiz_session_id: str = Query(..., description="퀴즈 세션 ID"),
    question_number: int = Query(..., ge=1, description="문항 번호"),
    db: AsyncSession = Depends(get_db),
):
    """학생의 특정 문항 답안 조회 API (없으면 null)"""
    return await answer_service.get_student_answer(db, student_id, quiz_session_id, question_number)
