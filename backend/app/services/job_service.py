"""채용공고 데이터 접근 함수"""
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session
from app.database.executor import run_query
from app.utils.exceptions import BadRequestException, NotFoundException
from app.utils.logger import app_logger
from app.utils.sql import (
    JOB_COLUMNS,
    JOB_FILTERS,
    QueryBuildError,
    sql_for_filters,
    sql_for_partial_update,
    where_clause,
)

RETURN_COLUMNS = "id, title, salary, equity, company_handle"


def create(db: Session, data: Mapping[str, Any]) -> Dict[str, Any]:
    rows = run_query(
        db,
        f"""INSERT INTO jobs
            (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {RETURN_COLUMNS}""",
        [data["title"], data.get("salary"), data.get("equity"), data["company_handle"]],
    )
    db.commit()
    app_logger.info(f"채용공고 생성 완료: {rows[0]['id']} ({data['company_handle']})")
    return rows[0]


def filter(db: Session, criteria: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    검색 조건에 맞는 공고 목록 조회 (제목순)

    criteria: minSalary(초과), hasEquity(true면 지분 > 0), title(부분 일치, 대소문자 무시)
    """
    try:
        where, values = sql_for_filters(criteria or {}, JOB_FILTERS)
    except QueryBuildError as e:
        raise BadRequestException(str(e))

    return run_query(
        db,
        f"SELECT {RETURN_COLUMNS} FROM jobs{where_clause(where)} ORDER BY title",
        values,
    )


def find_all(db: Session) -> List[Dict[str, Any]]:
    return filter(db)


def get(db: Session, job_id: int) -> Dict[str, Any]:
    """공고 상세 조회 (회사 정보 포함)"""
    rows = run_query(db, f"SELECT {RETURN_COLUMNS} FROM jobs WHERE id = $1", [job_id])
    if not rows:
        raise NotFoundException("채용공고", f"No job: {job_id}")

    job = rows[0]
    companies = run_query(
        db,
        """SELECT handle, name, description, num_employees, logo_url
           FROM companies
           WHERE handle = $1""",
        [job.pop("company_handle")],
    )
    job["company"] = companies[0] if companies else None
    return job


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    공고 부분 수정. 전달된 필드만 변경한다.

    data: title, salary, equity, company_handle 중 일부
    """
    try:
        set_cols, values = sql_for_partial_update(data, JOB_COLUMNS)
    except QueryBuildError as e:
        raise BadRequestException(str(e))

    id_idx = f"${len(values) + 1}"
    rows = run_query(
        db,
        f"""UPDATE jobs
            SET {set_cols}
            WHERE id = {id_idx}
            RETURNING {RETURN_COLUMNS}""",
        [*values, job_id],
    )
    if not rows:
        raise NotFoundException("채용공고", f"No job: {job_id}")

    db.commit()
    app_logger.info(f"채용공고 수정 완료: {job_id} ({', '.join(data)})")
    return rows[0]


def remove(db: Session, job_id: int) -> None:
    rows = run_query(db, "DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
    if not rows:
        raise NotFoundException("채용공고", f"No job: {job_id}")

    db.commit()
    app_logger.info(f"채용공고 삭제 완료: {job_id}")
