from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
from app.database import get_db
from app.schemas.job import JobCreate, JobUpdate, JobOut, JobDetailOut, JobListOut
from app.services import job_service
from app.utils.dependencies import ensure_admin
from app.utils.exceptions import BadRequestException, InternalServerException
from app.utils.logger import app_logger

router = APIRouter(prefix="/jobs", tags=["jobs"])

# 목록 조회용 검색 조건
def job_filters(
    min_salary: Optional[int] = Query(None, alias="minSalary", description="최소 연봉 (해당 값 초과)"),
    has_equity: Optional[bool] = Query(None, alias="hasEquity", description="true면 지분이 있는 공고만"),
    title: Optional[str] = Query(None, description="공고 제목 부분 일치 (대소문자 무시)")
) -> Dict[str, Any]:
    return {"minSalary": min_salary, "hasEquity": has_equity, "title": title}

@router.post(
    "/",
    response_model=JobOut,
    status_code=status.HTTP_201_CREATED,
    summary="채용공고 등록",
    description="새로운 채용공고를 등록합니다. 관리자 권한이 필요합니다."
)
def create_job(
    job: JobCreate,
    db: Session = Depends(get_db),
    admin: Dict[str, Any] = Depends(ensure_admin)
):
    try:
        return {"job": job_service.create(db, job.model_dump())}
    except HTTPException:
        raise
    except IntegrityError as e:
        db.rollback()
        app_logger.error(f"채용공고 등록 실패 (제약 조건 위반): {str(e)}")
        raise BadRequestException(f"존재하지 않는 회사입니다: {job.company_handle}", error_code="CONFLICT")
    except Exception as e:
        db.rollback()
        app_logger.error(f"채용공고 등록 실패: {str(e)}")
        raise InternalServerException(f"채용공고 등록 중 오류가 발생했습니다: {str(e)}")

@router.get(
    "/",
    response_model=JobListOut,
    summary="채용공고 목록 조회 (필터 지원)",
    description="""
    등록된 채용공고를 제목순으로 조회합니다.\n
    - `minSalary`: 연봉이 해당 값보다 높은 공고\n
    - `hasEquity`: true면 지분이 0보다 큰 공고만, false거나 생략하면 필터 없음\n
    - `title`: 제목에 해당 문자열이 포함된 공고 (대소문자 무시)
    """
)
def list_jobs(
    filters: Dict[str, Any] = Depends(job_filters),
    db: Session = Depends(get_db)
):
    try:
        jobs = job_service.filter(db, filters)
        app_logger.info(f"채용공고 목록 조회 완료: {len(jobs)}건")
        return {"jobs": jobs}
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"채용공고 목록 조회 실패: {str(e)}")
        raise InternalServerException(f"채용공고 목록 조회 중 오류가 발생했습니다: {str(e)}")

@router.get(
    "/{job_id}",
    response_model=JobDetailOut,
    summary="채용공고 상세 조회",
    description="채용공고와 해당 회사 정보를 함께 반환합니다."
)
def read_job(job_id: int, db: Session = Depends(get_db)):
    try:
        return {"job": job_service.get(db, job_id)}
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"채용공고 상세 조회 실패: {str(e)}")
        raise InternalServerException(f"채용공고 조회 중 오류가 발생했습니다: {str(e)}")

@router.patch(
    "/{job_id}",
    response_model=JobOut,
    summary="채용공고 수정",
    description="전달된 필드(title, salary, equity, company_handle)만 수정합니다. 관리자 권한이 필요합니다."
)
def update_job(
    job_id: int,
    data: JobUpdate,
    db: Session = Depends(get_db),
    admin: Dict[str, Any] = Depends(ensure_admin)
):
    try:
        return {"job": job_service.update(db, job_id, data.model_dump(exclude_unset=True))}
    except HTTPException:
        raise
    except IntegrityError as e:
        db.rollback()
        app_logger.error(f"채용공고 수정 실패 (제약 조건 위반): {str(e)}")
        raise BadRequestException("채용공고 정보가 제약 조건을 위반합니다.", error_code="CONFLICT")
    except Exception as e:
        db.rollback()
        app_logger.error(f"채용공고 수정 실패: {str(e)}")
        raise InternalServerException(f"채용공고 수정 중 오류가 발생했습니다: {str(e)}")

@router.delete(
    "/{job_id}",
    summary="채용공고 삭제",
    description="채용공고를 삭제합니다. 관리자 권한이 필요합니다."
)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin: Dict[str, Any] = Depends(ensure_admin)
):
    try:
        job_service.remove(db, job_id)
        return {"deleted": job_id}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        app_logger.error(f"채용공고 삭제 실패: {str(e)}")
        raise InternalServerException(f"채용공고 삭제 중 오류가 발생했습니다: {str(e)}")
