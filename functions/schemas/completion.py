from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Any, Optional

# 컨텍스트(메타 분석 등)와 프롬프트 사이 구분자
CONTEXT_SEPARATOR = "\n\n---\n\n"


class CompletionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    prompt: Optional[str] = None
    model: Optional[str] = None                                        # 비어 있으면 기본 모델
    system_prompt: Optional[str] = Field(default=None, alias="systemPrompt")
    options: Optional[Dict[str, Any]] = None                           # payload 최상위에 그대로 병합
    context: Optional[str] = None                                      # 있으면 prompt 앞에 붙임

    def user_content(self) -> Optional[str]:
        if self.context:
            return f"{self.context}{CONTEXT_SEPARATOR}{self.prompt}"
        return self.prompt
