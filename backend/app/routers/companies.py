from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
from app.database import get_db
from app.schemas.company import CompanyCreate, CompanyUpdate, CompanyOut, CompanyDetailOut, CompanyListOut
from app.services import company_service
from app.utils.dependencies import ensure_admin
from app.utils.exceptions import BadRequestException, InternalServerException
from app.utils.logger import app_logger

router = APIRouter(prefix="/companies", tags=["companies"])

# 목록 조회용 검색 조건
def company_filters(
    min_employees: Optional[int] = Query(None, alias="minEmployees", description="최소 직원 수 (해당 값 초과)"),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", description="최대 직원 수 (해당 값 미만)"),
    name_like: Optional[str] = Query(None, alias="nameLike", description="회사명 부분 일치 (대소문자 무시)")
) -> Dict[str, Any]:
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestException("minEmployees는 maxEmployees보다 클 수 없습니다.")
    return {
        "minEmployees": min_employees,
        "maxEmployees": max_employees,
        "nameLike": name_like,
    }

@router.post(
    "/",
    response_model=CompanyOut,
    status_code=status.HTTP_201_CREATED,
    summary="회사 등록",
    description="새로운 회사를 등록합니다. 관리자 권한이 필요합니다."
)
def create_company(
    company: CompanyCreate,
    db: Session = Depends(get_db),
    admin: Dict[str, Any] = Depends(ensure_admin)
):
    try:
        created = company_service.create(db, company.model_dump(by_alias=True))
        return {"company": created}
    except HTTPException:
        raise
    except IntegrityError as e:
        db.rollback()
        app_logger.error(f"회사 등록 실패 (제약 조건 위반): {str(e)}")
        raise BadRequestException("회사 정보가 기존 데이터와 충돌합니다.", error_code="CONFLICT")
    except Exception as e:
        db.rollback()
        app_logger.error(f"회사 등록 실패: {str(e)}")
        raise InternalServerException(f"회사 등록 중 오류가 발생했습니다: {str(e)}")

@router.get(
    "/",
    response_model=CompanyListOut,
    summary="회사 목록 조회 (필터 지원)",
    description="""
    등록된 회사 목록을 이름순으로 조회합니다.\n
    - `minEmployees`: 직원 수가 해당 값보다 많은 회사\n
    - `maxEmployees`: 직원 수가 해당 값보다 적은 회사\n
    - `nameLike`: 회사명에 해당 문자열이 포함된 회사 (대소문자 무시)
    """
)
def list_companies(
    filters: Dict[str, Any] = Depends(company_filters),
    db: Session = Depends(get_db)
):
    try:
        companies = company_service.filter(db, filters)
        app_logger.info(f"회사 목록 조회 완료: {len(companies)}건")
        return {"companies": companies}
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"회사 목록 조회 실패: {str(e)}")
        raise InternalServerException(f"회사 목록 조회 중 오류가 발생했습니다: {str(e)}")

@router.get(
    "/{handle}",
    response_model=CompanyDetailOut,
    summary="회사 상세 조회",
    description="회사 정보와 해당 회사의 채용공고 목록을 함께 반환합니다."
)
def read_company(handle: str, db: Session = Depends(get_db)):
    try:
        return {"company": company_service.get(db, handle)}
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"회사 상세 조회 실패: {str(e)}")
        raise InternalServerException(f"회사 조회 중 오류가 발생했습니다: {str(e)}")

@router.patch(
    "/{handle}",
    response_model=CompanyOut,
    summary="회사 정보 수정",
    description="전달된 필드(name, description, numEmployees, logoUrl)만 수정합니다. 관리자 권한이 필요합니다."
)
def update_company(
    handle: str,
    data: CompanyUpdate,
    db: Session = Depends(get_db),
    admin: Dict[str, Any] = Depends(ensure_admin)
):
    try:
        updated = company_service.update(db, handle, data.model_dump(by_alias=True, exclude_unset=True))
        return {"company": updated}
    except HTTPException:
        raise
    except IntegrityError as e:
        db.rollback()
        app_logger.error(f"회사 수정 실패 (제약 조건 위반): {str(e)}")
        raise BadRequestException("회사 정보가 제약 조건을 위반합니다.", error_code="CONFLICT")
    except Exception as e:
        db.rollback()
        app_logger.error(f"회사 수정 실패: {str(e)}")
        raise InternalServerException(f"회사 수정 중 오류가 발생했습니다: {str(e)}")

@router.delete(
    "/{handle}",
    summary="회사 삭제",
    description="회사와 소속 채용공고를 삭제합니다. 관리자 권한이 필요합니다."
)
def delete_company(
    handle: str,
    db: Session = Depends(get_db),
    admin: Dict[str, Any] = Depends(ensure_admin)
):
    try:
        company_service.remove(db, handle)
        return {"deleted": handle}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        app_logger.error(f"회사 삭제 실패: {str(e)}")
        raise InternalServerException(f"회사 삭제 중 오류가 발생했습니다: {str(e)}")
