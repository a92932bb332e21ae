from fastapi import FastAPI
from contextlib import asynccontextmanager
from core.config import settings
from core.dependencies import init_connections, close_connections
from core.errors import register_error_handlers
from core.middleware import RequestLogMiddleware
from router import completion, tokens, users

@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        await init_connections()
        yield
    finally:
        await close_connections()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Arcanum Functions",
        description="OpenRouter / Airtable 프록시 서버리스 함수",
        version="0.1.0",
        lifespan=lifespan
    )

    # 모든 호출에 request_id 부여 + 접근 로그
    app.add_middleware(RequestLogMiddleware)
    register_error_handlers(app)

    # 함수별 경로: {prefix}/call-open-router, {prefix}/deduct-tokens, ...
    app.include_router(completion.router, prefix=settings.function_prefix, tags=["Completion"])
    app.include_router(tokens.router, prefix=settings.function_prefix, tags=["Tokens"])
    app.include_router(users.router, prefix=settings.function_prefix, tags=["Users"])

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
