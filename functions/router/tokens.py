from fastapi import APIRouter, Depends, Request
from core.dependencies import get_airtable_table
from core.errors import FunctionError
from core.logger import get_logger
from repository.airtable_repo import AirtableTable
from schemas.tokens import DeductTokensRequest
from service.token_service import deduct_tokens

router = APIRouter()
logger = get_logger("deduct-tokens")


@router.post("/deduct-tokens")
async def deduct(request: Request, table: AirtableTable = Depends(get_airtable_table)):
    """
    유저 토큰 차감
    - userId / tokensToDeduct 누락(또는 0) → 400
    - 잔액 부족 → 200 {success: false, newBalance, message}
    - 성공 → 200 {success: true, newBalance}
    """
    try:
        body = DeductTokensRequest.model_validate(await request.json())

        if not body.user_id or not body.tokens_to_deduct:
            raise FunctionError(400, "userId and tokensToDeduct are required")

        result = await deduct_tokens(table, body.user_id, body.tokens_to_deduct)
    except FunctionError:
        raise
    except Exception as e:
        logger.error(f"토큰 차감 실패: {e}")
        raise FunctionError(500, str(e)) from e

    return result.to_body()
