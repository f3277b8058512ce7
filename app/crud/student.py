import uuid
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud._upsert import dialect_insert
from app.models.student import Student


async def get_student_by_id(session: AsyncSession, student_id: str) -> Student | None:
    """ID로 학생 조회"""
    result = await session.execute(select(Student).where(Student.id == student_id))
    return result.scalar_one_or_none()


async def get_student_by_name(session: AsyncSession, name: str) -> Student | None:
    """이름(정확히 일치)으로 학생 조회"""
    result = await session.execute(select(Student).where(Student.name == name))
    return result.scalar_one_or_none()


async def upsert_student_by_name(session: AsyncSession, name: str) -> Student:
    """이름으로 학생 생성 또는 기존 학생 재활성화 (단일 INSERT ... ON CONFLICT)"""
    insert = dialect_insert(session)
    stmt = insert(Student).values(
        id=str(uuid.uuid4()),
        name=name,
        is_active=True,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Student.name],
        set_={"is_active": True},
    )
    result = await session.scalars(
        stmt.returning(Student),
        execution_options={"populate_existing": True},
    )
    student = result.one()
    await session.commit()
    return student


async def get_active_students(session: AsyncSession) -> Sequence[Student]:
    """활성 학생 목록 조회"""
    result = await session.execute(
        select(Student)
        .where(Student.is_active.is_(True))
        .order_by(Student.joined_at)
    )
    return result.scalars().all()


async def update_student_status(
    session: AsyncSession,
    student_id: str,
    is_active: bool,
) -> Student | None:
    """학생 활성 상태 변경 (학생이 없으면 None)"""
    student = await get_student_by_id(session, student_id)
    if not student:
        return None
    
    student.is_active = is_active
    await session.commit()
    await session.refresh(student)
    return student
