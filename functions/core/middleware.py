import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from core.logger import get_logger, generate_request_id, request_id_var

logger = get_logger("access")


class RequestLogMiddleware(BaseHTTPMiddleware):
    """
    모든 함수 호출을 기록하는 미들웨어

    1. 호출마다 고유 request_id 부여
    2. 응답 시간 측정
    3. JSON 접근 로그 출력
    4. 응답 헤더에 X-Request-ID 추가
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        req_id = generate_request_id()
        request_id_var.set(req_id)

        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {duration_ms:.0f}ms",
            extra={"extra_data": {
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 1),
            }}
        )

        # 디버깅용 — 프론트엔드 에러 리포트와 로그를 연결
        response.headers["X-Request-ID"] = req_id

        return response
