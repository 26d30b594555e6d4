"""Turn batch-write results into HTTP responses."""

from fastapi.responses import JSONResponse

from cms.application.dtos.content import OperationResult
from cms.domain.exceptions import ValidationException
from cms.schemas.common import OperationResultResponse


def operation_result_response(
    result: OperationResult,
) -> OperationResultResponse | JSONResponse:
    """200 on success, 400 for rejected input, 502 when the store write failed."""
    if result.success:
        return OperationResultResponse.from_result(result)
    if result.errors:
        raise ValidationException(result.message, errors=result.errors)
    return JSONResponse(
        status_code=502,
        content=OperationResultResponse.from_result(result).model_dump(),
    )
