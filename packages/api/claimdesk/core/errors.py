# This project was developed with assistance from AI tools.
"""HTTP errors that carry item-level detail into the Problem Details body."""

from collections.abc import Iterable

from fastapi import HTTPException


class ProblemDetailsError(HTTPException):
    """HTTPException whose ``errors`` land in the response's ``errors`` member."""

    def __init__(self, status_code: int, detail: str, errors: Iterable[str]) -> None:
        super().__init__(status_code=status_code, detail=detail)
        self.errors = list(errors)
