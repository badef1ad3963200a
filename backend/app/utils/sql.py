from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple


class QueryBuildError(ValueError):
    """쿼리 조각 생성 시 잘못된 입력에 대한 예외"""


def sql_for_partial_update(
    fields: Mapping[str, Any],
    name_map: Mapping[str, str]
) -> Tuple[str, List[Any]]:
    """
    부분 수정용 SET 절 생성.

    Args:
        fields: 수정할 필드와 값 {"name": "Acme", "numEmployees": 5}
        name_map: API 필드명 -> DB 컬럼명 매핑 {"numEmployees": "num_employees"}
                  매핑에 없는 필드명은 그대로 컬럼명으로 사용

    Returns:
        (set_cols, values) 튜플
        - set_cols: '"name"=$1, "num_employees"=$2'
        - values: ["Acme", 5]

    Raises:
        QueryBuildError: 수정할 데이터가 없는 경우
    """
    if not fields:
        raise QueryBuildError("No data")

    cols = [
        f'"{name_map.get(key, key)}"=${idx}'
        for idx, key in enumerate(fields, start=1)
    ]
    return ", ".join(cols), list(fields.values())


def as_number(value: Any) -> Any:
    # bool은 int의 하위 타입이므로 별도로 거른다
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise QueryBuildError(f"숫자가 아닌 값은 사용할 수 없습니다: {value!r}")
    return value


def as_substring(value: Any) -> str:
    if not isinstance(value, str):
        raise QueryBuildError(f"문자열이 아닌 값은 사용할 수 없습니다: {value!r}")
    return f"%{value}%"


class FilterRule(NamedTuple):
    """
    검색 조건 하나에 대한 선언.

    constant가 지정되면 플래그 조건으로 취급한다. 값이 True일 때만
    "<column> <operator> <constant>"를 추가하고 바인드 값은 소비하지 않는다.
    """
    key: str
    column: str
    operator: str
    transform: Optional[Callable[[Any], Any]] = None
    constant: Optional[str] = None


def sql_for_filters(
    criteria: Mapping[str, Any],
    rules: Sequence[FilterRule]
) -> Tuple[str, List[Any]]:
    """
    동적 WHERE 절 생성.

    rules에 선언된 순서대로 조건을 검사하며, 이 순서가 $n 번호를 결정한다.
    값이 없거나(None) 빈 문자열인 조건은 건너뛰고, rules에 없는 키는 무시한다.

    Returns:
        (where, values) 튜플. 적용된 조건이 없으면 ("", [])
    """
    clauses: List[str] = []
    values: List[Any] = []

    for rule in rules:
        value = criteria.get(rule.key)
        if value is None or value == "":
            continue

        if rule.constant is not None:
            if not isinstance(value, bool):
                raise QueryBuildError(f"{rule.key} 값은 true/false 여야 합니다: {value!r}")
            if value:
                clauses.append(f"{rule.column} {rule.operator} {rule.constant}")
            continue

        values.append(rule.transform(value) if rule.transform else value)
        clauses.append(f"{rule.column} {rule.operator} ${len(values)}")

    return " AND ".join(clauses), values


def where_clause(fragment: str) -> str:
    """WHERE 조각이 있으면 ' WHERE ...' 형태로, 없으면 빈 문자열 반환"""
    return f" WHERE {fragment}" if fragment else ""


# 엔티티별 필드명 매핑 (API 필드명 -> DB 컬럼명)
COMPANY_COLUMNS: Dict[str, str] = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}
JOB_COLUMNS: Dict[str, str] = {}

# 엔티티별 검색 조건 (선언 순서 = 바인드 번호 순서)
COMPANY_FILTERS: Tuple[FilterRule, ...] = (
    FilterRule("minEmployees", "num_employees", ">", as_number),
    FilterRule("maxEmployees", "num_employees", "<", as_number),
    FilterRule("nameLike", "name", "ILIKE", as_substring),
)
JOB_FILTERS: Tuple[FilterRule, ...] = (
    FilterRule("minSalary", "salary", ">", as_number),
    FilterRule("hasEquity", "equity", ">", constant="0"),
    FilterRule("title", "title", "ILIKE", as_substring),
)
