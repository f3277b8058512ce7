"""Student Service 테스트"""
import pytest
from unittest.mock import AsyncMock, patch
from sqlalchemy import func, select

from app.exceptions import StudentNotFoundError, ValidationError
from app.models.student import Student
from app.schemas import student as student_schema
from app.services import broadcaster, student_service


async def _count_students(session, name: str) -> int:
    return await session.scalar(select(func.count()).select_from(Student).where(Student.name == name))


@pytest.mark.asyncio
async def test_register_student_creates_active_student(test_db_session):
    """새 이름이면 활성 상태로 생성"""
    response = await student_service.register_student(
        test_db_session, student_schema.StudentCreateRequest(name="Lan")
    )

    assert response.id
    assert response.name == "Lan"
    assert response.is_active is True


@pytest.mark.asyncio
async def test_register_student_twice_returns_same_identity(test_db_session):
    """같은 이름으로 두 번 입장하면 같은 ID, 레코드는 1개"""
    first = await student_service.register_student(
        test_db_session, student_schema.StudentCreateRequest(name="Lan")
    )
    second = await student_service.register_student(
        test_db_session, student_schema.StudentCreateRequest(name="Lan")
    )

    assert first.id == second.id
    assert await _count_students(test_db_session, "Lan") == 1


@pytest.mark.asyncio
async def test_register_student_reactivates_inactive_student(test_db_session):
    """비활성 학생이 다시 입장하면 재활성화"""
    student = await student_service.register_student(
        test_db_session, student_schema.StudentCreateRequest(name="Minh")
    )
    await student_service.set_student_active(test_db_session, student.id, False)

    active = await student_service.list_active_students(test_db_session)
    assert active.total == 0

    again = await student_service.register_student(
        test_db_session, student_schema.StudentCreateRequest(name="Minh")
    )
    assert again.id == student.id
    assert again.is_active is True


@pytest.mark.asyncio
async def test_register_student_trims_name(test_db_session):
    """앞뒤 공백은 제거 후 같은 이름으로 취급"""
    first = await student_service.register_student(
        test_db_session, student_schema.StudentCreateRequest(name="  Lan ")
    )
    second = await student_service.register_student(
        test_db_session, student_schema.StudentCreateRequest(name="Lan")
    )

    assert first.name == "Lan"
    assert first.id == second.id


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
async def test_register_student_empty_name(test_db_session, name):
    """공백뿐인 이름은 예외 발생"""
    with pytest.raises(ValidationError):
        await student_service.register_student(
            test_db_session, student_schema.StudentCreateRequest(name=name)
        )


@pytest.mark.asyncio
async def test_list_active_students_excludes_inactive(test_db_session):
    """활성 학생만 조회"""
    lan = await student_service.register_student(
        test_db_session, student_schema.StudentCreateRequest(name="Lan")
    )
    await student_service.register_student(
        test_db_session, student_schema.StudentCreateRequest(name="Minh")
    )
    await student_service.set_student_active(test_db_session, lan.id, False)

    response = await student_service.list_active_students(test_db_session)

    assert response.total == 1
    assert [s.name for s in response.students] == ["Minh"]


@pytest.mark.asyncio
async def test_set_student_active_unknown_student_is_noop(test_db_session):
    """존재하지 않는 학생 상태 변경은 조용히 무시"""
    result = await student_service.set_student_active(test_db_session, "missing-id", False)

    assert result is None


@pytest.mark.asyncio
async def test_set_student_active_is_idempotent(test_db_session):
    """같은 상태로 여러 번 변경해도 결과 동일"""
    student = await student_service.register_student(
        test_db_session, student_schema.StudentCreateRequest(name="Lan")
    )

    first = await student_service.set_student_active(test_db_session, student.id, False)
    second = await student_service.set_student_active(test_db_session, student.id, False)

    assert first.is_active is False
    assert second.is_active is False


@pytest.mark.asyncio
async def test_get_student_not_found(test_db_session):
    """학생을 찾을 수 없을 때 예외 발생"""
    with pytest.raises(StudentNotFoundError):
        await student_service.get_student(test_db_session, "missing-id")


@pytest.mark.asyncio
async def test_register_and_leave_broadcast_events(test_db_session):
    """입장/퇴장 시 student_joined, student_left 이벤트 발행"""
    with patch.object(broadcaster.manager, "broadcast", new_callable=AsyncMock) as mock_broadcast:
        student = await student_service.register_student(
            test_db_session, student_schema.StudentCreateRequest(name="Lan")
        )
        await student_service.set_student_active(test_db_session, student.id, False)

    events = [call.args[0] for call in mock_broadcast.await_args_list]
    assert [e["type"] for e in events] == [broadcaster.STUDENT_JOINED, broadcaster.STUDENT_LEFT]
    assert events[0]["data"] == {"student_id": student.id, "name": "Lan"}
