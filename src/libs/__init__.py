"""Shared helpers used across layers"""
from .result import Result, Return, Error

__all__ = ["Result", "Return", "Error"]
