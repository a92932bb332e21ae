from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class FunctionError(Exception):
    """
    함수 응답으로 그대로 내려가는 에러
    본문 형식은 항상 {"error": message}
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


async def function_error_handler(request: Request, exc: FunctionError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 라우터가 내는 404 / 405 도 같은 {"error": ...} 형식으로 (Allow 헤더 유지)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FunctionError, function_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
