from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

class Settings(BaseSettings):
    # OpenRouter
    openrouter_api_key: str = ""
    openrouter_url: str = "https://openrouter.ai/api/v1"
    default_model: str = "anthropic/claude-3.5-sonnet"

    # OpenRouter 랭킹용 선택 헤더 (비어 있으면 전송하지 않음)
    openrouter_referer: str = ""
    openrouter_title: str = ""

    # Airtable
    airtable_api_key: str = ""
    airtable_base_id: str = ""
    airtable_table_name: str = ""
    airtable_url: str = "https://api.airtable.com/v0"

    # get-client-vectors 에서 clientCode 를 비교할 필드명
    client_code_field: str = "Code"

    # 외부 호출 타임아웃 (초) — LLM 응답은 오래 걸릴 수 있음
    http_timeout: float = 120.0

    # 호스팅 플랫폼의 함수 라우트 prefix
    function_prefix: str = "/.netlify/functions"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        # config.py -> core -> functions -> 루트 아래의 .env 찾기
        env_file=Path(__file__).parent.parent.parent / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,     # 환경변수 대소문자 무시
        extra="ignore",           # 프론트엔드용 VITE_* 변수 등 무시
    )

    @property
    def airtable_configured(self) -> bool:
        return bool(self.airtable_api_key and self.airtable_base_id and self.airtable_table_name)


# 싱글톤 인스턴스 — 프로세스 시작 시 한 번만 읽음
settings = Settings()
