from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union

Number = Union[int, float]


class DeductTokensRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId")
    tokens_to_deduct: Optional[Number] = Field(default=None, alias="tokensToDeduct")


class DeductTokensResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    new_balance: Number = Field(serialization_alias="newBalance")
    message: Optional[str] = None                                      # 잔액 부족일 때만

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
