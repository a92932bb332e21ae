import httpx
from core.config import settings
from core.logger import get_logger, mask_secret
from repository.airtable_repo import AirtableTable

logger = get_logger("dependencies")

# 전역 클라이언트 — lifespan 에서 초기화/정리
_openrouter_client: httpx.AsyncClient | None = None
_airtable_client: httpx.AsyncClient | None = None

# === FastAPI Depends()용 함수 ===

async def get_openrouter() -> httpx.AsyncClient:
    if _openrouter_client is None:
        raise RuntimeError("OpenRouter 클라이언트가 초기화되지 않았습니다. 함수 시작을 확인하세요.")
    return _openrouter_client


async def get_airtable_table() -> AirtableTable:
    if _airtable_client is None:
        raise RuntimeError("Airtable 클라이언트가 초기화되지 않았습니다. 함수 시작을 확인하세요.")
    return AirtableTable(
        _airtable_client,
        api_key=settings.airtable_api_key,
        base_id=settings.airtable_base_id,
        table_name=settings.airtable_table_name,
    )


def openrouter_headers() -> dict:
    """OpenRouter 호출 헤더 — 키는 프로세스 설정에서"""
    headers = {
        "Authorization": f"Bearer {settings.openrouter_api_key}",
        "Content-Type": "application/json",
    }
    if settings.openrouter_referer:
        headers["HTTP-Referer"] = settings.openrouter_referer
    if settings.openrouter_title:
        headers["X-Title"] = settings.openrouter_title
    return headers


# === 수명주기 관리 (main.py의 lifespan에서 호출) ===

async def init_connections():
    global _openrouter_client, _airtable_client

    _openrouter_client = httpx.AsyncClient(
        base_url=settings.openrouter_url,
        headers=openrouter_headers(),
        timeout=settings.http_timeout,
    )
    _airtable_client = httpx.AsyncClient(
        base_url=settings.airtable_url,
        timeout=settings.http_timeout,
    )

    # 키 값은 끝 4자리만 노출
    logger.info(
        "클라이언트 준비 완료",
        extra={"extra_data": {
            "openrouter_api_key": mask_secret(settings.openrouter_api_key),
            "airtable_api_key": mask_secret(settings.airtable_api_key),
            "airtable_base_id": settings.airtable_base_id or "MISSING",
            "airtable_table_name": settings.airtable_table_name or "MISSING",
        }}
    )


async def close_connections():
    global _openrouter_client, _airtable_client

    if _openrouter_client:
        await _openrouter_client.aclose()
        _openrouter_client = None
    if _airtable_client:
        await _airtable_client.aclose()
        _airtable_client = None

    logger.info("모든 연결 종료")
