"""
Airtable REST API 게이트웨이

레코드 ID 기반 find / update 와 수식(filterByFormula) 기반 first 만 지원.
  GET   /{base_id}/{table}/{record_id}
  PATCH /{base_id}/{table}/{record_id}   body: {"fields": {...}}
  GET   /{base_id}/{table}?filterByFormula=...&maxRecords=1
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx


class AirtableError(Exception):
    """Airtable 호출 실패 — 메시지는 Airtable 이 돌려준 문구 그대로"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class AirtableRecord:
    id: str
    fields: Dict[str, Any] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    @classmethod
    def from_json(cls, data: dict) -> "AirtableRecord":
        return cls(id=data["id"], fields=data.get("fields") or {})


def escape_formula_string(value: str) -> str:
    """작은따옴표 문자열 리터럴 안에 넣을 값 이스케이프"""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def _error_message(response: httpx.Response) -> str:
    # {"error": {"type": "NOT_FOUND", "message": "..."}} 또는 {"error": "NOT_FOUND"}
    try:
        error = response.json().get("error")
    except ValueError:
        error = None

    if isinstance(error, dict):
        return error.get("message") or error.get("type") or f"Airtable HTTP {response.status_code}"
    if isinstance(error, str):
        return error
    return f"Airtable HTTP {response.status_code}"


class AirtableTable:
    """한 테이블에 대한 비동기 접근 객체 (클라이언트는 lifespan 에서 주입)"""

    def __init__(self, client: httpx.AsyncClient, api_key: str, base_id: str, table_name: str):
        self._client = client
        self._api_key = api_key
        self._base_id = base_id
        self._table_name = table_name

    @property
    def configured(self) -> bool:
        return bool(self._api_key and self._base_id and self._table_name)

    def _path(self, record_id: Optional[str] = None) -> str:
        path = f"/{quote(self._base_id, safe='')}/{quote(self._table_name, safe='')}"
        if record_id is not None:
            path += f"/{quote(record_id, safe='')}"
        return path

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        if not self.configured:
            raise AirtableError("Airtable environment variables are not configured.")

        response = await self._client.request(
            method,
            path,
            headers={"Authorization": f"Bearer {self._api_key}"},
            **kwargs,
        )
        if response.is_error:
            raise AirtableError(_error_message(response), status_code=response.status_code)
        return response.json()

    async def find(self, record_id: str) -> AirtableRecord:
        """레코드 ID 로 조회 — 없으면 AirtableError (NOT_FOUND)"""
        data = await self._request("GET", self._path(record_id))
        return AirtableRecord.from_json(data)

    async def update(self, record_id: str, fields: Dict[str, Any]) -> AirtableRecord:
        """지정한 필드만 부분 수정 (PATCH)"""
        data = await self._request("PATCH", self._path(record_id), json={"fields": fields})
        return AirtableRecord.from_json(data)

    async def first(self, formula: str) -> Optional[AirtableRecord]:
        """수식에 맞는 첫 레코드, 없으면 None"""
        data = await self._request(
            "GET",
            self._path(),
            params={"filterByFormula": formula, "maxRecords": 1},
        )
        records = data.get("records") or []
        if not records:
            return None
        return AirtableRecord.from_json(records[0])
