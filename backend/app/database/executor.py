import re
from typing import Any, Dict, List, Sequence, Tuple
from sqlalchemy import text
from sqlalchemy.orm import Session
from app.utils.logger import db_logger

_PLACEHOLDER = re.compile(r"\$(\d+)")


def to_named_params(sql: str, values: Sequence[Any] = ()) -> Tuple[str, Dict[str, Any]]:
    """
    $1..$n 위치 기반 플레이스홀더를 SQLAlchemy 이름 기반 바인드(:p1..:pn)로 변환.

    값의 개수와 플레이스홀더 번호가 맞지 않으면 ValueError.
    """
    used = {int(n) for n in _PLACEHOLDER.findall(sql)}
    if used and (min(used) < 1 or max(used) > len(values)):
        raise ValueError(
            f"플레이스홀더 번호가 값 개수와 맞지 않습니다: {sorted(used)} / {len(values)}개"
        )

    named_sql = _PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", sql)
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    return named_sql, params


def run_query(db: Session, sql: str, values: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    """위치 기반 쿼리 실행 후 결과 행을 dict 리스트로 반환"""
    named_sql, params = to_named_params(sql, values)
    db_logger.debug(f"SQL 실행: {named_sql} / {params}")

    result = db.execute(text(named_sql), params)
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]
