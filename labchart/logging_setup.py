"""
로깅 초기화 유틸리티

- setup_logging(): 설정(log_level)에 맞춰 루트 로거에 스트림 핸들러를 구성합니다.
- 원문/비식별화 텍스트는 로그에 남기지 않습니다. 길이와 항목명만 기록합니다.
"""
from __future__ import annotations

import logging
from typing import Optional

from labchart.settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, force: bool = False) -> None:
    """로깅 설정을 초기화합니다.

    Args:
        level: 로그 레벨 문자열 (None이면 settings.log_level 사용)
        force: 기존 핸들러가 있어도 다시 구성할지 여부
    """
    level_name = (level or settings.log_level or "INFO").upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=force)
    if settings.app_debug:
        logging.getLogger("labchart").setLevel(logging.DEBUG)
