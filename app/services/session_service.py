import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import quiz_session as quiz_session_crud
from app.exceptions import QuizSessionNotFoundError, ValidationError
from app.models.quiz_session import MAX_QUESTION_NUMBER, QuizSession
from app.schemas import quiz_session as quiz_session_schema
from app.services import broadcaster

logger = logging.getLogger(__name__)

# 세션 상태: Created(is_active=False, start_time 없음) -> Running -> Stopped
# 제한 시간(duration)은 클라이언트 타이머용 안내값이며, 만료 스윕을 켜지 않으면 서버는 stop 호출 전까지 세션을 종료하지 않는다.


def _to_response(quiz_session: QuizSession) -> quiz_session_schema.QuizSessionResponse:
    return quiz_session_schema.QuizSessionResponse.model_validate(quiz_session)


async def create_session(
    session: AsyncSession,
    request: quiz_session_schema.QuizSessionCreateRequest,
    admin_id: str,
) -> quiz_session_schema.QuizSessionResponse:
    """퀴즈 세션 생성 (진행 중인 세션은 건드리지 않음)"""
    if request.duration < 1:
        raise ValidationError("제한 시간은 1분 이상이어야 합니다")

    quiz_session = await quiz_session_crud.create_quiz_session(
        session,
        title=request.title,
        duration=request.duration,
        created_by=admin_id,
    )
    logger.info(f"퀴즈 세션 생성: quiz_session_id={quiz_session.id}, created_by={admin_id}")
    return _to_response(quiz_session)


async def get_current_session(session: AsyncSession) -> quiz_session_schema.QuizSessionResponse | None:
    """현재 진행 중인 세션 스냅샷 (없으면 None)"""
    quiz_session = await quiz_session_crud.get_current_quiz_session(session)
    if not quiz_session:
        return None
    return _to_response(quiz_session)


async def get_session(session: AsyncSession, quiz_session_id: str) -> quiz_session_schema.QuizSessionResponse:
    """세션 단건 조회"""
    quiz_session = await quiz_session_crud.get_quiz_session_by_id(session, quiz_session_id)
    if not quiz_session:
        raise QuizSessionNotFoundError(quiz_session_id)
    return _to_response(quiz_session)


async def start_session(session: AsyncSession, quiz_session_id: str) -> quiz_session_schema.QuizSessionResponse:
    """세션 시작 - 다른 세션이 진행 중이었다면 같은 트랜잭션에서 종료됨"""
    quiz_session, displaced = await quiz_session_crud.start_quiz_session(session, quiz_session_id)
    if not quiz_session:
        raise QuizSessionNotFoundError(quiz_session_id)

    if displaced is not None:
        logger.info(
            f"이전 세션 자동 종료: quiz_session_id={displaced.id}, replaced_by={quiz_session.id}"
        )
        await broadcaster.manager.broadcast(
            broadcaster.build_event(broadcaster.QUIZ_STOPPED, quiz_session_id=displaced.id, reason="replaced")
        )

    logger.info(f"퀴즈 세션 시작: quiz_session_id={quiz_session.id}, start_time={quiz_session.start_time}")
    await broadcaster.manager.broadcast(
        broadcaster.build_event(
            broadcaster.QUIZ_STARTED,
            quiz_session_id=quiz_session.id,
            question_number=quiz_session.current_question_number,
            duration=quiz_session.duration,
            start_time=quiz_session.start_time,
        )
    )
    return _to_response(quiz_session)


async def stop_session(
    session: AsyncSession,
    quiz_session_id: str,
    reason: str = "stopped",
) -> quiz_session_schema.QuizSessionResponse:
    """세션 종료 (이미 종료된 세션도 end_time만 갱신)"""
    quiz_session = await quiz_session_crud.stop_quiz_session(session, quiz_session_id)
    if not quiz_session:
        raise QuizSessionNotFoundError(quiz_session_id)

    logger.info(f"퀴즈 세션 종료: quiz_session_id={quiz_session.id}, reason={reason}")
    await broadcaster.manager.broadcast(
        broadcaster.build_event(broadcaster.QUIZ_STOPPED, quiz_session_id=quiz_session.id, reason=reason)
    )
    return _to_response(quiz_session)


async def update_session(
    session: AsyncSession,
    quiz_session_id: str,
    request: quiz_session_schema.QuizSessionUpdateRequest,
) -> quiz_session_schema.QuizSessionResponse:
    """세션 부분 수정 (문항 번호가 포함되면 question_changed 발행)"""
    if request.duration is not None and request.duration < 1:
        raise ValidationError("제한 시간은 1분 이상이어야 합니다")
    if request.current_question_number is not None and request.current_question_number < 1:
        raise ValidationError("문항 번호는 1 이상이어야 합니다")
    if request.current_question_number is not None and request.current_question_number > MAX_QUESTION_NUMBER:
        raise ValidationError(f"문항 번호는 {MAX_QUESTION_NUMBER} 이하여야 합니다")

    quiz_session = await quiz_session_crud.update_quiz_session(
        session,
        quiz_session_id,
        title=request.title,
        duration=request.duration,
        current_question_number=request.current_question_number,
    )
    if not quiz_session:
        raise QuizSessionNotFoundError(quiz_session_id)

    if request.current_question_number is not None:
        logger.info(
            f"문항 변경: quiz_session_id={quiz_session.id}, "
            f"question_number={quiz_session.current_question_number}"
        )
        await broadcaster.manager.broadcast(
            broadcaster.build_event(
                broadcaster.QUESTION_CHANGED,
                quiz_session_id=quiz_session.id,
                question_number=quiz_session.current_question_number,
            )
        )
    return _to_response(quiz_session)


async def advance_question(
    session: AsyncSession,
    quiz_session_id: str,
    question_number: int,
) -> quiz_session_schema.QuizSessionResponse:
    """현재 문항 변경 (이전 문항으로 되돌아가는 것도 허용)"""
    if question_number < 1:
        raise ValidationError("문항 번호는 1 이상이어야 합니다")
    if question_number > MAX_QUESTION_NUMBER:
        raise ValidationError(f"문항 번호는 {MAX_QUESTION_NUMBER} 이하여야 합니다")
    return await update_session(
        session,
        quiz_session_id,
        quiz_session_schema.QuizSessionUpdateRequest(current_question_number=question_number),
    )
