import logging
import json
import uuid
from datetime import datetime, timezone
from contextvars import ContextVar
from core.config import settings

# 호출(invocation)별 고유 ID — 같은 요청 안에서는 어디서든 동일한 값
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class JsonFormatter(logging.Formatter):
    """
    로그를 한 줄짜리 JSON 으로 출력하는 포매터
    (함수 플랫폼의 로그 뷰어에서 필드별 검색이 가능하도록)

    {"timestamp": "...", "level": "INFO", "message": "...", "request_id": "abc-123"}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "request_id": request_id_var.get("-"),
        }

        # 추가 필드 병합 (예: user_id, status, duration_ms)
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def get_logger(name: str) -> logging.Logger:
    """구조화된 JSON 로거 생성"""
    logger = logging.getLogger(name)

    # 중복 핸들러 방지
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.setLevel(settings.log_level.upper())

    return logger


def generate_request_id() -> str:
    return str(uuid.uuid4())[:8]


def mask_secret(value: str) -> str:
    """키 존재 여부만 남기고 마스킹 — 'Loaded (...abcd)' / 'MISSING'"""
    if not value:
        return "MISSING"
    return f"Loaded (...{value[-4:]})"
