"""
토큰(에너지) 차감 서비스

주의: 조회 → 비교 → 쓰기가 원자적이지 않음.
같은 유저에 대한 동시 차감 두 건이 같은 잔액을 읽으면 둘 다 통과하고
나중에 쓴 값이 앞선 차감을 덮어쓴다 (lost update).
Airtable 에 조건부 갱신이 없어 현재는 그대로 둔다.
"""
from core.logger import get_logger
from repository.airtable_repo import AirtableTable
from schemas.tokens import DeductTokensResponse

logger = get_logger("tokens")

TOKENS_FIELD = "Tokens"
INSUFFICIENT_TOKENS_MESSAGE = "insufficient tokens"


async def deduct_tokens(table: AirtableTable, user_id: str, tokens_to_deduct) -> DeductTokensResponse:
    record = await table.find(user_id)
    current_tokens = record.get(TOKENS_FIELD) or 0

    # 잔액 부족은 에러가 아님 — 200 + success=False, 쓰기 없음
    if current_tokens < tokens_to_deduct:
        logger.info(
            "잔액 부족",
            extra={"extra_data": {"user_id": user_id, "balance": current_tokens, "requested": tokens_to_deduct}}
        )
        return DeductTokensResponse(
            success=False,
            new_balance=current_tokens,
            message=INSUFFICIENT_TOKENS_MESSAGE,
        )

    new_balance = current_tokens - tokens_to_deduct
    await table.update(user_id, {TOKENS_FIELD: new_balance})

    logger.info(
        "토큰 차감 완료",
        extra={"extra_data": {"user_id": user_id, "deducted": tokens_to_deduct, "balance": new_balance}}
    )
    return DeductTokensResponse(success=True, new_balance=new_balance)
