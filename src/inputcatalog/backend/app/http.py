"""JSON error payloads shared by the translation endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from flask import jsonify


@dataclass(frozen=True)
class ProblemResponse:
    """Error body of the form ``{"error": code, "message": ..., **details}``."""

    error: str
    status: int
    message: str | None = None
    details: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error, **self.details}
        if self.message:
            payload["message"] = self.message
        return payload

    def to_response(self) -> tuple[Any, int]:
        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **details: Any,
) -> ProblemResponse:
    """Build a problem payload; keyword arguments become extra JSON fields."""

    return ProblemResponse(error=error, status=status, message=message, details=details)


def missing_parameters(*names: str) -> ProblemResponse:
    """400 response listing the query parameters a request left out."""

    return problem_response(
        "missing_parameters",
        status=400,
        message="Missing required query parameter(s): " + ", ".join(names),
        parameters=list(names),
    )


__all__ = ["ProblemResponse", "missing_parameters", "problem_response"]
