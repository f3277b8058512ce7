from datetime import datetime

from pydantic import BaseModel, Field


class StudentCreateRequest(BaseModel):
    """학생 입장(로그인) 요청 스키마"""
    name: str = Field(..., max_length=100, description="표시 이름 (앞뒤 공백 제거 후 비어 있으면 안 됨)")


class StudentStatusUpdateRequest(BaseModel):
    """학생 활성 상태 변경 요청 스키마"""
    is_active: bool = Field(..., description="활성 여부")


class StudentResponse(BaseModel):
    """학생 응답 스키마"""
    id: str
    name: str
    is_active: bool
    joined_at: datetime

    model_config = {"from_attributes": True}


class StudentListResponse(BaseModel):
    """활성 학생 목록 응답 스키마"""
    students: list[StudentResponse]
    total: int
