"""Schemas shared by the batch write endpoints."""

from pydantic import BaseModel, Field

from cms.application.dtos.content import OperationResult


class FieldError(BaseModel):
    field: str
    message: str


class OperationResultResponse(BaseModel):
    """{success, message} result of a settings or environment write."""

    success: bool
    message: str
    errors: list[FieldError] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: OperationResult) -> "OperationResultResponse":
        return cls(
            success=result.success,
            message=result.message,
            errors=[FieldError(**e) for e in result.errors],
        )
