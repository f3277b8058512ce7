import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import student as student_crud
from app.exceptions import StudentNotFoundError, ValidationError
from app.schemas import student as student_schema
from app.services import broadcaster

logger = logging.getLogger(__name__)


async def register_student(
    session: AsyncSession,
    request: student_schema.StudentCreateRequest,
) -> student_schema.StudentResponse:
    """학생 입장 - 같은 이름이 있으면 재활성화 후 기존 학생 반환"""
    name = request.name.strip()
    if not name:
        raise ValidationError("이름을 입력해주세요")

    student = await student_crud.upsert_student_by_name(session, name)
    logger.info(f"학생 입장: student_id={student.id}, name={student.name}")

    await broadcaster.manager.broadcast(
        broadcaster.build_event(broadcaster.STUDENT_JOINED, student_id=student.id, name=student.name)
    )
    return student_schema.StudentResponse.model_validate(student)


async def get_student(session: AsyncSession, student_id: str) -> student_schema.StudentResponse:
    """학생 단건 조회"""
    student = await student_crud.get_student_by_id(session, student_id)
    if not student:
        raise StudentNotFoundError(student_id)
    return student_schema.StudentResponse.model_validate(student)


async def list_active_students(session: AsyncSession) -> student_schema.StudentListResponse:
    """활성 학생 목록"""
    students = await student_crud.get_active_students(session)
    responses = [student_schema.StudentResponse.model_validate(s) for s in students]
    return student_schema.StudentListResponse(students=responses, total=len(responses))


async def set_student_active(
    session: AsyncSession,
    student_id: str,
    is_active: bool,
) -> student_schema.StudentResponse | None:
    """학생 활성 상태 변경 (학생이 없으면 아무것도 하지 않음)"""
    student = await student_crud.update_student_status(session, student_id, is_active)
    if not student:
        logger.warning(f"존재하지 않는 학생 상태 변경 요청 무시: student_id={student_id}")
        return None

    event_type = broadcaster.STUDENT_JOINED if is_active else broadcaster.STUDENT_LEFT
    await broadcaster.manager.broadcast(
        broadcaster.build_event(event_type, student_id=student.id, name=student.name)
    )
    return student_schema.StudentResponse.model_validate(student)
