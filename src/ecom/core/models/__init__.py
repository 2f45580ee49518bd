"""Shared service models."""

from .result import ResultKind, ServiceResult

__all__ = ["ResultKind", "ServiceResult"]
