"""Base domain exceptions."""

from __future__ import annotations


class DomainError(Exception):
    """도메인 계층 기본 예외."""

    def __init__(self, message: str = "Domain error occurred") -> None:
        self.message = message
        super().__init__(message)
