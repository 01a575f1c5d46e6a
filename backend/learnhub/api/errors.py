from __future__ import annotations

from fastapi import HTTPException, status

from learnhub.domain.common.result import Result


def raise_for_result(result: Result) -> None:
    """Turn a failed Result into the matching HTTP error (404 or 400)."""
    if result.is_success:
        return
    if result.is_not_found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
