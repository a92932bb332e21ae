"""
Airtable 게이트웨이 테스트 (실제 HTTP 대신 MockTransport)
"""
import asyncio
import json
import httpx
import pytest
from repository.airtable_repo import AirtableError, AirtableTable, escape_formula_string


def make_table(handler, api_key="keyXYZ", base_id="appBase", table_name="Users Table"):
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        base_url="https://api.airtable.test/v0",
    )
    return AirtableTable(client, api_key=api_key, base_id=base_id, table_name=table_name)


def test_find_요청_형식():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"id": "rec1", "fields": {"Name": "A", "Tokens": 5}})

    record = asyncio.run(make_table(handler).find("rec1"))

    assert record.id == "rec1"
    assert record.fields == {"Name": "A", "Tokens": 5}
    assert record.get("Tokens") == 5
    assert seen[0].method == "GET"
    assert seen[0].url.raw_path == b"/v0/appBase/Users%20Table/rec1"
    assert seen[0].headers["Authorization"] == "Bearer keyXYZ"


def test_update는_PATCH_fields():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"id": "rec1", "fields": {"Tokens": 6}})

    record = asyncio.run(make_table(handler).update("rec1", {"Tokens": 6}))

    assert record.get("Tokens") == 6
    assert seen[0].method == "PATCH"
    assert json.loads(seen[0].content) == {"fields": {"Tokens": 6}}


def test_first_수식_쿼리():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"records": [{"id": "rec9", "fields": {"Code": "X"}}]})

    record = asyncio.run(make_table(handler).first("{Code} = 'X'"))

    assert record.id == "rec9"
    assert seen[0].url.params["filterByFormula"] == "{Code} = 'X'"
    assert seen[0].url.params["maxRecords"] == "1"


def test_first_결과_없으면_None():
    table = make_table(lambda request: httpx.Response(200, json={"records": []}))
    assert asyncio.run(table.first("{Code} = 'X'")) is None


def test_NOT_FOUND_메시지_전달():
    def handler(request):
        return httpx.Response(404, json={"error": {"type": "NOT_FOUND", "message": "Could not find record rec1"}})

    with pytest.raises(AirtableError) as exc_info:
        asyncio.run(make_table(handler).find("rec1"))

    assert str(exc_info.value) == "Could not find record rec1"
    assert exc_info.value.status_code == 404


def test_문자열_에러_형식():
    table = make_table(lambda request: httpx.Response(404, json={"error": "NOT_FOUND"}))

    with pytest.raises(AirtableError, match="NOT_FOUND"):
        asyncio.run(table.find("rec1"))


def test_JSON_아닌_에러_응답():
    table = make_table(lambda request: httpx.Response(502, content=b"Bad Gateway"))

    with pytest.raises(AirtableError, match="Airtable HTTP 502"):
        asyncio.run(table.find("rec1"))


def test_설정_없으면_호출_전에_실패():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    table = make_table(handler, api_key="")

    with pytest.raises(AirtableError, match="not configured"):
        asyncio.run(table.find("rec1"))
    assert calls == []


def test_수식_문자열_이스케이프():
    assert escape_formula_string("O'Brien") == "O\\'Brien"
    assert escape_formula_string("a\\b") == "a\\\\b"
    assert escape_formula_string("ABC123") == "ABC123"
