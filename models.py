from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field, field_validator


def is_missing(value: Any) -> bool:
    """
    A field counts as missing when it is absent, null, an empty string,
    False or numeric zero. Empty objects and lists are present.
    """
    if value is None or value == "":
        return True
    return isinstance(value, (int, float)) and not value


# 🧾 Request schemas
class GenerateRequest(BaseModel):
    category: Optional[str] = None
    experience: Optional[Union[str, int, float]] = None
    mode: Optional[str] = None
    goals: Optional[str] = None

    @field_validator("experience")
    @classmethod
    def whole_years_as_int(cls, value):
        # 3.0 is rendered as "3 years" in the prompt
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    def missing_fields(self) -> List[str]:
        return [name for name in ("category", "experience", "mode", "goals") if is_missing(getattr(self, name))]


class DetailRequest(BaseModel):
    business_title: Optional[str] = None
    user_data: Any = None

    def missing_fields(self) -> List[str]:
        return [name for name in ("business_title", "user_data") if is_missing(getattr(self, name))]


# 📄 Response schemas
class ProblemStatement(BaseModel):
    s_no: int = Field(description="Serial number from 1 to 15")
    business_title: str = Field(description="A real-world problem statement, not a business idea")
    detail: str = Field(description="One-line explanation of why this problem matters and who is affected")


class DetailResult(BaseModel):
    detailed_analysis: str


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
