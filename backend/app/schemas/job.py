# 채용공고 관련 스키마

from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from app.schemas.company import CompanyResponse

class JobCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, description="공고 제목")
    salary: Optional[int] = Field(None, ge=0, description="연봉")
    equity: Optional[Decimal] = Field(None, ge=0, le=1, description="지분 (0 ~ 1)")
    company_handle: str = Field(..., min_length=1, max_length=25, description="회사 식별자")

class JobUpdate(BaseModel):
    """부분 수정용 스키마"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1, description="공고 제목")
    salary: Optional[int] = Field(None, ge=0, description="연봉")
    equity: Optional[Decimal] = Field(None, ge=0, le=1, description="지분 (0 ~ 1)")
    company_handle: Optional[str] = Field(None, min_length=1, max_length=25, description="회사 식별자")

class JobResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str

class JobDetailResponse(BaseModel):
    """공고 상세 조회용 스키마 (회사 정보 포함)"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company: Optional[CompanyResponse] = None

class JobOut(BaseModel):
    job: JobResponse

class JobDetailOut(BaseModel):
    job: JobDetailResponse

class JobListOut(BaseModel):
    jobs: List[JobResponse]
