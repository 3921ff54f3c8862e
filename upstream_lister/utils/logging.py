"""
로깅 시스템 모듈

업스트림 리스터 전용 로거 네임스페이스와 한국어 로그 포맷을 제공합니다.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "upstream_lister"

LEVEL_NAMES = {
    'DEBUG': '디버그',
    'INFO': '정보',
    'WARNING': '경고',
    'ERROR': '오류',
    'CRITICAL': '치명적'
}


class KoreanFormatter(logging.Formatter):
    """로그 레벨명을 한국어로 출력하는 포맷터"""

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        record.levelname = LEVEL_NAMES.get(original_levelname, original_levelname)
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


def setup_logging(settings, stream=None) -> logging.Logger:
    """
    업스트림 리스터 로깅 설정

    Args:
        settings: 시스템 설정 객체 (log_level, log_format, log_file 사용)
        stream: 콘솔 핸들러 출력 스트림 (None이면 stderr)

    Returns:
        logging.Logger: 설정된 루트 로거
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level.upper()))

    # 기존 핸들러 제거 (중복 방지)
    logger.handlers.clear()

    formatter = KoreanFormatter(
        fmt=settings.log_format,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_file:
        log_file_path = Path(settings.log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        # 로테이팅 파일 핸들러 (10MB, 5개 백업)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    logger.debug("로깅 시스템이 초기화되었습니다")
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    리스터 네임스페이스 아래의 로거를 반환합니다

    Args:
        name: 로거 이름 (모듈의 __name__ 권장)

    Returns:
        logging.Logger: 로거 객체
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
