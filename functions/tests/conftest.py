"""
pytest 공통 설정
"""
import sys
import os
import json
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import httpx
import pytest
from starlette.testclient import TestClient

from core.dependencies import get_airtable_table, get_openrouter
from main import create_app
from repository.airtable_repo import AirtableError, AirtableRecord



class FakeTable:
    """인메모리 Airtable 테이블 — find / update / first 만 흉내"""

    def __init__(self, records: dict | None = None):
        self.records = {rid: dict(fields) for rid, fields in (records or {}).items()}
        self.updates = []
        self.formulas = []
        self.fail_with: Exception | None = None

    async def find(self, record_id):
        if self.fail_with:
            raise self.fail_with
        if record_id not in self.records:
            raise AirtableError("Could not find record", status_code=404)
        return AirtableRecord(id=record_id, fields=dict(self.records[record_id]))

    async def update(self, record_id, fields):
        if self.fail_with:
            raise self.fail_with
        self.updates.append((record_id, fields))
        self.records[record_id].update(fields)
        return AirtableRecord(id=record_id, fields=dict(self.records[record_id]))

    async def first(self, formula):
        if self.fail_with:
            raise self.fail_with
        self.formulas.append(formula)
        for rid, fields in self.records.items():
            code = fields.get("Code")
            if code is not None and formula == f"{{Code}} = '{code}'":
                return AirtableRecord(id=rid, fields=dict(fields))
        return None


class FakeOpenRouter:
    """MockTransport 기반 OpenRouter — 보낸 요청을 기록"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: object = {"id": "gen-1", "choices": [{"message": {"role": "assistant", "content": "안녕"}}]}
        self.raw: bytes | None = None
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def table():
    return FakeTable({
        "rec1": {"Name": "A", "Tokens": 5},
        "rec10": {"Name": "B", "Tokens": 10},
        "recEmpty": {"Name": "C"},
        "recClient": {"Code": "ABC123", "Vectors": [1, 2, 3]},
    })


@pytest.fixture
def openrouter():
    return FakeOpenRouter()


@pytest.fixture
def client(table, openrouter):
    """외부 호출을 전부 가짜로 바꾼 테스트 앱"""
    app = create_app()

    async def override_get_airtable_table():
        return table

    async def override_get_openrouter():
        return httpx.AsyncClient(
            transport=httpx.MockTransport(openrouter.handler),
            base_url="https://openrouter.test/api/v1",
        )

    app.dependency_overrides[get_airtable_table] = override_get_airtable_table
    app.dependency_overrides[get_openrouter] = override_get_openrouter

    with TestClient(app) as c:
        yield c
