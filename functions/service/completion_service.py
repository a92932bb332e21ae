import httpx
from core.config import settings
from core.logger import get_logger
from schemas.completion import CompletionRequest

logger = get_logger("completion")


def build_payload(request: CompletionRequest) -> dict:
    """
    OpenRouter chat/completions payload 구성

    options 는 마지막에 병합 — 같은 키면 호출자 값이 이김 (model, messages 포함)
    """
    payload = {
        "model": request.model or settings.default_model,
        "messages": [
            {"role": "system", "content": request.system_prompt},
            {"role": "user", "content": request.user_content()},
        ],
    }
    if request.options:
        payload.update(request.options)
    return payload


async def create_completion(client: httpx.AsyncClient, request: CompletionRequest) -> dict:
    """
    업스트림 1회 호출 후 JSON 을 해석 없이 그대로 반환
    (업스트림 상태코드와 무관 — 본문이 JSON 이 아니면 예외)
    """
    payload = build_payload(request)

    response = await client.post("/chat/completions", json=payload)

    logger.info(
        "OpenRouter 응답 수신",
        extra={"extra_data": {
            "model": payload.get("model"),
            "upstream_status": response.status_code,
            "has_context": bool(request.context),
        }}
    )
    return response.json()
