from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import require_admin
from app.models.base import get_db
from app.schemas import answer as answer_schema, quiz_session as quiz_session_schema
from app.services import answer_service, session_service, stats_service

router = APIRouter(prefix="/quiz-sessions", tags=["quiz-sessions"])


@router.post(
    "",
    response_model=quiz_session_schema.QuizSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_quiz_session(
    request: quiz_session_schema.QuizSessionCreateRequest,
    admin_id: str = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """퀴즈 세션 생성 API (관리자용)"""
    return await session_service.create_session(db, request, admin_id)


@router.get("/current", response_model=quiz_session_schema.QuizSessionResponse | None)
async def get_current_quiz_session(
    db: AsyncSession = Depends(get_db),
):
    """현재 진행 중인 세션 조회 API (없으면 null)"""
    return await session_service.get_current_session(db)


@router.get("/{quiz_session_id}", response_model=quiz_session_schema.QuizSessionResponse)
async def get_quiz_session(
    quiz_session_id: str,
    db: AsyncSession = Depends(get_db),
):
    """퀴즈 세션 조회 API"""
    return await session_service.get_session(db, quiz_session_id)


@router.post(
    "/{quiz_session_id}/start",
    response_model=quiz_session_schema.QuizSessionResponse,
    dependencies=[Depends(require_admin)],
)
async def start_quiz_session(
    quiz_session_id: str,
    db: AsyncSession = Depends(get_db),
):
    """퀴즈 세션 시작 API (관리자용)"""
    return await session_service.start_session(db, quiz_session_id)


@router.post(
    "/{quiz_session_id}/stop",
    response_model=quiz_session_schema.QuizSessionResponse,
    dependencies=[Depends(require_admin)],
)
async def stop_quiz_session(
    quiz_session_id: str,
    db: AsyncSession = Depends(get_db),
):
    """퀴즈 세션 종료 API (관리자용)"""
    return await session_service.stop_session(db, quiz_session_id)


@router.patch(
    "/{quiz_session_id}",
    response_model=quiz_session_schema.QuizSessionResponse,
    dependencies=[Depends(require_admin)],
)
async def update_quiz_session(
    quiz_session_id: str,
    request: quiz_session_schema.QuizSessionUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    """퀴즈 세션 부분 수정 API (관리자용)"""
    return await session_service.update_session(db, quiz_session_id, request)


@router.put(
    "/{quiz_session_id}/question",
    response_model=quiz_session_schema.QuizSessionResponse,
    dependencies=[Depends(require_admin)],
)
async def advance_question(
    quiz_session_id: str,
    request: quiz_session_schema.QuestionAdvanceRequest,
    db: AsyncSession = Depends(get_db),
):
    """현재 문항 변경 API (관리자용)"""
    return await session_service.advance_question(db, quiz_session_id, request.question_number)


@router.get(
    "/{quiz_session_id}/questions/{question_number}/stats",
    response_model=answer_schema.AnswerStatsResponse,
)
async def get_answer_stats(
    quiz_session_id: str,
    question_number: int,
    db: AsyncSession = Depends(get_db),
):
    """문항별 선택지 집계 API"""
    return await stats_service.compute_stats(db, quiz_session_id, question_number)


@router.get(
    "/{quiz_session_id}/questions/{question_number}/answers",
    response_model=answer_schema.AnswerListResponse,
)
async def get_question_answers(
    quiz_session_id: str,
    question_number: int,
    db: AsyncSession = Depends(get_db),
):
    """문항별 답안 목록 API"""
    return await answer_service.get_answers_for_question(db, quiz_session_id, question_number)


@router.get(
    "/{quiz_session_id}/history",
    response_model=list[answer_schema.QuestionHistoryResponse],
)
async def get_session_history(
    quiz_session_id: str,
    db: AsyncSession = Depends(get_db),
):
    """세션 전체 문항 이력 API"""
    return await stats_service.get_session_history(db, quiz_session_id)
