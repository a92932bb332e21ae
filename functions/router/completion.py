from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import httpx
from core.dependencies import get_openrouter
from core.errors import FunctionError
from core.logger import get_logger
from schemas.completion import CompletionRequest
from service.completion_service import create_completion

router = APIRouter()
logger = get_logger("call-open-router")


@router.post("/call-open-router")
async def call_open_router(request: Request, client: httpx.AsyncClient = Depends(get_openrouter)):
    """
    OpenRouter 프록시
    1. JSON 본문 파싱 (prompt, model, systemPrompt, options, context)
    2. chat/completions 1회 호출
    3. 업스트림 JSON 을 200 으로 그대로 전달
    """
    try:
        body = CompletionRequest.model_validate(await request.json())
        data = await create_completion(client, body)
    except Exception as e:
        logger.error(f"OpenRouter 호출 실패: {e}")
        raise FunctionError(500, str(e)) from e

    return JSONResponse(status_code=200, content=data)
