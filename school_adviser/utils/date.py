"""NEIS 날짜 문자열(YYYYMMDD) 변환"""

import re
from datetime import date, datetime

_YMD_RE = re.compile(r"\d{8}", re.ASCII)


def get_date(value: str) -> date:
    """YYYYMMDD 문자열을 date로 변환한다.

    Args:
        value: 8자리 숫자 문자열 (예: "20230825")

    Returns:
        해당 일자의 date

    Raises:
        ValueError: 8자리 숫자가 아니거나 존재하지 않는 날짜인 경우
    """
    if not isinstance(value, str) or not _YMD_RE.fullmatch(value):
        raise ValueError(f"Expected an 8-digit YYYYMMDD string, got {value!r}")

    return datetime.strptime(value, "%Y%m%d").date()
