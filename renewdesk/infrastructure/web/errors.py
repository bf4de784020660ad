"""
Mapping of use case results to HTTP responses.
"""

from http import HTTPStatus
from typing import Any, Dict, TypeVar

from fastapi import HTTPException, status

from renewdesk.application.dto.base_dto import ErrorResponseDTO
from renewdesk.application.use_cases.base_use_case import UseCaseResult


T = TypeVar('T')

STATUS_BY_ERROR_CODE: Dict[str, int] = {
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_DATE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "BUSINESS_RULE_VIOLATION": status.HTTP_409_CONFLICT,
}


def status_for(error_code: str) -> int:
    return STATUS_BY_ERROR_CODE.get(error_code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def unwrap(result: UseCaseResult[T]) -> T:
    """
    Return the data of a successful result.
    Error results are raised as ``HTTPException`` with an ``ErrorResponseDTO``
    payload as ``detail``.
    """
    if result.success:
        return result.data

    status_code = status_for(result.error_code)
    details: Dict[str, Any] = {}
    if result.metadata and result.metadata.get("field"):
        details["field"] = result.metadata["field"]

    payload = ErrorResponseDTO(
        error=HTTPStatus(status_code).phrase,
        message=result.error or "Request failed",
        error_code=result.error_code,
        details=details or None,
    )
    raise HTTPException(status_code=status_code, detail=payload.model_dump())
