from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import student as student_schema
from app.services import student_service

router = APIRouter(prefix="/students", tags=["students"])


@router.post("", response_model=student_schema.StudentResponse)
async def register_student(
    request: student_schema.StudentCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """학생 입장 API (같은 이름이면 기존 학생 재활성화)"""
    return await student_service.register_student(db, request)


@router.get("/active", response_model=student_schema.StudentListResponse)
async def get_active_students(
    db: AsyncSession = Depends(get_db),
):
    """활성 학생 목록 API"""
    return await student_service.list_active_students(db)


@router.get("/{student_id}", response_model=student_schema.StudentResponse)
async def get_student(
    student_id: str,
    db: AsyncSession = Depends(get_db),
):
    """학생 조회 API"""
    return await student_service.get_student(db, student_id)


@router.patch("/{student_id}/status", status_code=status.HTTP_204_NO_CONTENT)
async def update_student_status(
    student_id: str,
    request: student_schema.StudentStatusUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    """학생 활성 상태 변경 API (존재하지 않는 학생은 무시)"""
    await student_service.set_student_active(db, student_id, request.is_active)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
