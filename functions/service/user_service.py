from core.config import settings
from repository.airtable_repo import AirtableTable, escape_formula_string


async def get_user(table: AirtableTable, user_id: str) -> dict:
    """레코드 조회 후 {id, ...fields} 로 평탄화 — 없으면 Airtable 에러 그대로"""
    record = await table.find(user_id)
    return {"id": record.id, **record.fields}


async def find_client_fields(table: AirtableTable, client_code: str) -> dict | None:
    """코드 필드가 client_code 와 같은 첫 레코드의 fields, 없으면 None"""
    formula = f"{{{settings.client_code_field}}} = '{escape_formula_string(client_code)}'"
    record = await table.first(formula)
    if record is None:
        return None
    return record.fields
