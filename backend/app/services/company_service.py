"""회사 데이터 접근 함수

모든 함수는 API 필드명(camelCase) 기준의 dict를 받고,
DB 컬럼명(snake_case) 기준의 dict를 반환한다.
"""
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session
from app.database.executor import run_query
from app.utils.exceptions import BadRequestException, NotFoundException
from app.utils.logger import app_logger
from app.utils.sql import (
    COMPANY_COLUMNS,
    COMPANY_FILTERS,
    QueryBuildError,
    sql_for_filters,
    sql_for_partial_update,
    where_clause,
)

RETURN_COLUMNS = "handle, name, description, num_employees, logo_url"


def create(db: Session, data: Mapping[str, Any]) -> Dict[str, Any]:
    """회사 생성. 이미 존재하는 handle이면 BadRequestException"""
    handle = data["handle"]
    duplicate = run_query(db, "SELECT handle FROM companies WHERE handle = $1", [handle])
    if duplicate:
        raise BadRequestException(f"Duplicate company: {handle}", error_code="DUPLICATE")

    rows = run_query(
        db,
        f"""INSERT INTO companies
            (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {RETURN_COLUMNS}""",
        [
            handle,
            data["name"],
            data["description"],
            data.get("numEmployees"),
            data.get("logoUrl"),
        ],
    )
    db.commit()
    app_logger.info(f"회사 생성 완료: {handle}")
    return rows[0]


def filter(db: Session, criteria: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    검색 조건에 맞는 회사 목록 조회 (이름순)

    criteria: minEmployees(초과), maxEmployees(미만), nameLike(부분 일치, 대소문자 무시)
    """
    try:
        where, values = sql_for_filters(criteria or {}, COMPANY_FILTERS)
    except QueryBuildError as e:
        raise BadRequestException(str(e))

    return run_query(
        db,
        f"SELECT {RETURN_COLUMNS} FROM companies{where_clause(where)} ORDER BY name",
        values,
    )


def find_all(db: Session) -> List[Dict[str, Any]]:
    return filter(db)


def get(db: Session, handle: str) -> Dict[str, Any]:
    """회사 상세 조회 (소속 공고 포함)"""
    rows = run_query(
        db,
        f"SELECT {RETURN_COLUMNS} FROM companies WHERE handle = $1",
        [handle],
    )
    if not rows:
        raise NotFoundException("회사", f"No company: {handle}")

    company = rows[0]
    company["jobs"] = run_query(
        db,
        "SELECT id, title, salary, equity FROM jobs WHERE company_handle = $1 ORDER BY id",
        [handle],
    )
    return company


def update(db: Session, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    회사 정보 부분 수정. 전달된 필드만 변경한다.

    data: name, description, numEmployees, logoUrl 중 일부
    """
    try:
        set_cols, values = sql_for_partial_update(data, COMPANY_COLUMNS)
    except QueryBuildError as e:
        raise BadRequestException(str(e))

    handle_idx = f"${len(values) + 1}"
    rows = run_query(
        db,
        f"""UPDATE companies
            SET {set_cols}
            WHERE handle = {handle_idx}
            RETURNING {RETURN_COLUMNS}""",
        [*values, handle],
    )
    if not rows:
        raise NotFoundException("회사", f"No company: {handle}")

    db.commit()
    app_logger.info(f"회사 수정 완료: {handle} ({', '.join(data)})")
    return rows[0]


def remove(db: Session, handle: str) -> None:
    rows = run_query(db, "DELETE FROM companies WHERE handle = $1 RETURNING handle", [handle])
    if not rows:
        raise NotFoundException("회사", f"No company: {handle}")

    db.commit()
    app_logger.info(f"회사 삭제 완료: {handle}")
