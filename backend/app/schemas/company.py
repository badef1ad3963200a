# 회사 관련 스키마

from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class CompanyCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    handle: str = Field(..., min_length=1, max_length=25, description="회사 식별자")
    name: str = Field(..., min_length=1, description="회사명")
    description: str = Field(..., description="회사 소개")
    num_employees: Optional[int] = Field(None, ge=0, alias="numEmployees", description="직원 수")
    logo_url: Optional[str] = Field(None, alias="logoUrl", description="로고 이미지 URL")

class CompanyUpdate(BaseModel):
    """부분 수정용 스키마 (handle은 변경 불가)"""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1, description="회사명")
    description: Optional[str] = Field(None, description="회사 소개")
    num_employees: Optional[int] = Field(None, ge=0, alias="numEmployees", description="직원 수")
    logo_url: Optional[str] = Field(None, alias="logoUrl", description="로고 이미지 URL")

class CompanyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

class CompanyJob(BaseModel):
    """회사 상세 조회 시 포함되는 공고 요약"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None

class CompanyDetailResponse(CompanyResponse):
    """회사 상세 조회용 스키마 (소속 공고 포함)"""
    jobs: List[CompanyJob] = []

class CompanyOut(BaseModel):
    company: CompanyResponse

class CompanyDetailOut(BaseModel):
    company: CompanyDetailResponse

class CompanyListOut(BaseModel):
    companies: List[CompanyResponse]
