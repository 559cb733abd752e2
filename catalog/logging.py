"""로깅 설정 모듈.

Logging configuration module.
Installs a single stdout handler on the root logger; service modules log
through logging.getLogger(__name__). Request/response events go to Axiom
separately (see catalog.middleware.axiom_logging).
"""

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """루트 로거에 stdout 핸들러를 설치합니다.

    Configure root logging with a plain structured format.
    Existing root handlers are replaced so repeated calls stay idempotent.

    Args:
        level: 로그 레벨 이름 또는 숫자 (Level name such as "INFO", or a number)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT))

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level)
