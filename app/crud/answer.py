import uuid
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud._upsert import dialect_insert
from app.models.answer import Answer


async def upsert_answer(
    session: AsyncSession,
    student_id: str,
    quiz_session_id: str,
    question_number: int,
    selected_option: str,
) -> Answer:
    """(학생, 세션, 문항) 기준 답안 저장 - 이미 있으면 선택지/제출 시각 덮어쓰기"""
    insert = dialect_insert(session)
    stmt = insert(Answer).values(
        id=str(uuid.uuid4()),
        student_id=student_id,
        quiz_session_id=quiz_session_id,
        question_number=question_number,
        selected_option=selected_option,
        answered_at=datetime.now(timezone.utc),
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Answer.student_id, Answer.quiz_session_id, Answer.question_number],
        set_={
            "selected_option": stmt.excluded.selected_option,
            "answered_at": stmt.excluded.answered_at,
        },
    )
    result = await session.scalars(
        stmt.returning(Answer),
        execution_options={"populate_existing": True},
    )
    answer = result.one()
    await session.commit()
    return answer


async def get_answers_for_question(
    session: AsyncSession,
    quiz_session_id: str,
    question_number: int,
) -> Sequence[Answer]:
    """세션/문항별 답안 목록 조회"""
    stmt = select(Answer).where(
        Answer.quiz_session_id == quiz_session_id,
        Answer.question_number == question_number,
    )
    result = await session.execute(stmt)
    return result.scalars().all()


async def get_student_answer(
    session: AsyncSession,
    student_id: str,
    quiz_session_id: str,
    question_number: int,
) -> Answer | None:
    """(학생, 세션, 문항)으로 답안 단건 조회"""
    stmt = select(Answer).where(
        Answer.student_id == student_id,
        Answer.quiz_session_id == quiz_session_id,
        Answer.question_number == question_number,
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def get_answers_by_session(
    session: AsyncSession,
    quiz_session_id: str,
) -> Sequence[Answer]:
    """세션 전체 답안 조회 (이력 집계용)"""
    stmt = (
        select(Answer)
        .where(Answer.quiz_session_id == quiz_session_id)
        .order_by(Answer.question_number)
    )
    result = await session.execute(stmt)
    return result.scalars().all()
