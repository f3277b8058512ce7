from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.active_session import ACTIVE_SLOT_ID, ActiveSessionSlot
from app.models.quiz_session import QuizSession


def _now() -> datetime:
    return datetime.now(timezone.utc)


async def create_quiz_session(
    session: AsyncSession,
    title: str,
    duration: int,
    created_by: str | None = None,
) -> QuizSession:
    """퀴즈 세션 생성 (Created 상태)"""
    quiz_session = QuizSession(
        title=title,
        duration=duration,
        current_question_number=1,
        is_active=False,
        created_by=created_by,
    )
    session.add(quiz_session)
    await session.commit()
    await session.refresh(quiz_session)
    return quiz_session


async def get_quiz_session_by_id(session: AsyncSession, quiz_session_id: str) -> QuizSession | None:
    """ID로 퀴즈 세션 조회"""
    result = await session.execute(select(QuizSession).where(QuizSession.id == quiz_session_id))
    return result.scalar_one_or_none()


async def get_quiz_session_for_update(session: AsyncSession, quiz_session_id: str) -> QuizSession | None:
    """세션 행을 잠그고 DB의 최신 값으로 다시 읽음"""
    result = await session.execute(
        select(QuizSession)
        .where(QuizSession.id == quiz_session_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_current_quiz_session(session: AsyncSession) -> QuizSession | None:
    """활성 세션 슬롯이 가리키는 진행 중 세션 조회"""
    stmt = (
        select(QuizSession)
        .join(ActiveSessionSlot, ActiveSessionSlot.quiz_session_id == QuizSession.id)
        .where(
            ActiveSessionSlot.id == ACTIVE_SLOT_ID,
            QuizSession.is_active.is_(True),
        )
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def _get_slot_for_update(session: AsyncSession) -> ActiveSessionSlot | None:
    result = await session.execute(
        select(ActiveSessionSlot)
        .where(ActiveSessionSlot.id == ACTIVE_SLOT_ID)
        .with_for_update()
    )
    return result.scalar_one_or_none()


async def start_quiz_session(
    session: AsyncSession,
    quiz_session_id: str,
) -> tuple[QuizSession | None, QuizSession | None]:
    """세션 시작 및 활성 슬롯 교체

    Returns:
        (시작된 세션, 슬롯에서 밀려나 종료된 이전 세션) 튜플.
        세션이 없으면 (None, None).
    """
    quiz_session = await get_quiz_session_by_id(session, quiz_session_id)
    if not quiz_session:
        return None, None
    
    now = _now()
    displaced = None
    
    slot = await _get_slot_for_update(session)
    if slot is None:
        slot = ActiveSessionSlot(id=ACTIVE_SLOT_ID)
        session.add(slot)
    elif slot.quiz_session_id and slot.quiz_session_id != quiz_session_id:
        previous = await get_quiz_session_by_id(session, slot.quiz_session_id)
        if previous and previous.is_active:
            previous.is_active = False
            previous.end_time = now
            displaced = previous
    
    slot.quiz_session_id = quiz_session_id
    quiz_session.is_active = True
    quiz_session.start_time = now
    
    # 슬롯/세션 변경을 한 트랜잭션으로 커밋
    await session.commit()
    await session.refresh(quiz_session)
    if displaced is not None:
        await session.refresh(displaced)
    return quiz_session, displaced


async def stop_quiz_session(session: AsyncSession, quiz_session_id: str) -> QuizSession | None:
    """세션 종료 (슬롯이 이 세션을 가리키면 비움)"""
    quiz_session = await get_quiz_session_by_id(session, quiz_session_id)
    if not quiz_session:
        return None
    
    slot = await _get_slot_for_update(session)
    if slot is not None and slot.quiz_session_id == quiz_session_id:
        slot.quiz_session_id = None
    
    quiz_session.is_active = False
    quiz_session.end_time = _now()
    
    await session.commit()
    await session.refresh(quiz_session)
    return quiz_session


async def update_quiz_session(
    session: AsyncSession,
    quiz_session_id: str,
    title: str | None = None,
    duration: int | None = None,
    current_question_number: int | None = None,
) -> QuizSession | None:
    """퀴즈 세션 부분 수정"""
    quiz_session = await get_quiz_session_by_id(session, quiz_session_id)
    if not quiz_session:
        return None
    
    if title is not None:
        quiz_session.title = title
    if duration is not None:
        quiz_session.duration = duration
    if current_question_number is not None:
        quiz_session.current_question_number = current_question_number
    
    await session.commit()
    await session.refresh(quiz_session)
    return quiz_session
