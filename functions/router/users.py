from fastapi import APIRouter, Depends, Query
from core.dependencies import get_airtable_table
from core.errors import FunctionError
from core.logger import get_logger
from repository.airtable_repo import AirtableTable
from service.user_service import get_user, find_client_fields

router = APIRouter()
logger = get_logger("users")


@router.get("/get-user-by-id")
async def get_user_by_id(user_id: str | None = Query(default=None, alias="userId"), table: AirtableTable = Depends(get_airtable_table)):
    """레코드 ID 로 유저 조회 → {id, ...fields} (없는 ID 도 500)"""
    if not user_id:
        raise FunctionError(400, "userId is required")

    try:
        return await get_user(table, user_id)
    except Exception as e:
        logger.error(f"유저 조회 실패: {e}", extra={"extra_data": {"user_id": user_id}})
        raise FunctionError(500, str(e)) from e


@router.get("/get-client-vectors")
async def get_client_vectors(client_code: str | None = Query(default=None, alias="clientCode"), table: AirtableTable = Depends(get_airtable_table)):
    """클라이언트 코드로 첫 레코드 조회 → fields 만 반환, 없으면 404"""
    if not client_code:
        raise FunctionError(400, "clientCode is required")

    try:
        fields = await find_client_fields(table, client_code)
    except Exception as e:
        logger.error(f"클라이언트 조회 실패: {e}", extra={"extra_data": {"client_code": client_code}})
        raise FunctionError(500, str(e)) from e

    if fields is None:
        logger.warning("클라이언트 없음", extra={"extra_data": {"client_code": client_code}})
        raise FunctionError(404, "Client not found")
    return fields
