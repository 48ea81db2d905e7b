"""User-facing message templates for the winning statistics report."""

from __future__ import annotations

MATCH_FIVE_WITH_BONUS = "5개 일치, 보너스 볼 일치"


def match_result(match_count: str | int) -> str:
    return f"{match_count}개 일치"


def statistics_row(label: str, formatted_prize: str, count: int) -> str:
    return f"{label} ({formatted_prize}) - {count}개"


def rate_result(rate_of_return: str) -> str:
    return f"총 수익률은 {rate_of_return}%입니다."
