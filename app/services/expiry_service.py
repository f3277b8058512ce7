"""선택적 세션 만료 스윕

기본적으로 세션 제한 시간은 클라이언트 타이머용이며 서버는 세션을 자동 종료하지 않는다.
settings.session_expiry_sweep_enabled가 켜진 경우에만 애플리케이션 lifespan에서
백그라운드 작업으로 실행되어, start_time + duration이 지난 현재 세션을 종료한다.
"""
import asyncio
import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.crud import quiz_session as quiz_session_crud
from app.models.quiz_session import QuizSession
from app.services import session_service

logger = logging.getLogger(__name__)

EXPIRED_REASON = "expired"


def session_deadline(quiz_session: QuizSession) -> datetime | None:
    """세션 종료 예정 시각 (시작 전이면 None)"""
    if quiz_session.start_time is None:
        return None
    start_time = quiz_session.start_time
    # SQLite는 tz 정보를 보존하지 않으므로 UTC로 간주
    if start_time.tzinfo is None:
        start_time = start_time.replace(tzinfo=timezone.utc)
    return start_time + timedelta(minutes=quiz_session.duration)


def _is_expired(quiz_session: QuizSession, now: datetime) -> bool:
    deadline = session_deadline(quiz_session)
    return deadline is not None and now >= deadline


async def stop_expired_session(session: AsyncSession, now: datetime | None = None) -> str | None:
    """현재 세션이 제한 시간을 넘겼으면 종료하고 세션 ID 반환"""
    quiz_session = await quiz_session_crud.get_current_quiz_session(session)
    if not quiz_session:
        return None

    now = now or datetime.now(timezone.utc)
    if not _is_expired(quiz_session, now):
        return None

    # 조회 이후 재시작되었을 수 있으므로 잠금 후 최신 값으로 다시 확인
    quiz_session = await quiz_session_crud.get_quiz_session_for_update(session, quiz_session.id)
    if not quiz_session or not quiz_session.is_active or not _is_expired(quiz_session, now):
        await session.rollback()
        return None

    await session_service.stop_session(session, quiz_session.id, reason=EXPIRED_REASON)
    return quiz_session.id


async def run_expiry_sweeper(
    session_maker: async_sessionmaker[AsyncSession],
    interval_seconds: int,
) -> None:
    """주기적으로 만료 세션 종료 (취소될 때까지 실행)"""
    logger.info(f"세션 만료 스윕 시작: interval={interval_seconds}s")
    while True:
        try:
            async with session_maker() as session:
                expired_id = await stop_expired_session(session)
            if expired_id:
                logger.info(f"제한 시간 경과로 세션 종료: quiz_session_id={expired_id}")
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"세션 만료 스윕 오류: {e.__class__.__name__}: {e}", exc_info=True)
        await asyncio.sleep(interval_seconds)
