#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for diary operations.

Provides type-safe conversion and validation used by both storage
backends, the configuration layer and the command line interface.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, List, Optional

from .exceptions import ValidationError

DATE_FORMAT = "%Y-%m-%d"
"""Format of the dates used in the diary files and on the command line."""


class DataValidator:
    """Centralized data validation for diary operations."""

    @staticmethod
    def parse_date(value: str) -> date:
        """
        Parse a date string in the fixed diary format.

        Args:
            value: Date string, e.g. "2023-02-04"

        Returns:
            Parsed date object

        Raises:
            ValidationError: If the string does not match YYYY-MM-DD
        """
        try:
            return datetime.strptime(value.strip(), DATE_FORMAT).date()
        except (AttributeError, ValueError) as e:
            raise ValidationError(
                f"Invalid date '{value}': expected YYYY-MM-DD"
            ) from e

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Normalize a string value by stripping surrounding whitespace.

        Returns:
            Stripped string, or None for empty/blank input
        """
        if value is None:
            return None
        normalized = str(value).strip()
        return normalized or None

    @staticmethod
    def normalize_category_name(value: Any) -> str:
        """
        Normalize a category name.

        Raises:
            ValidationError: If the name is empty after normalization
        """
        normalized = DataValidator.normalize_string(value)
        if not normalized:
            raise ValidationError("Category name cannot be empty")
        return normalized

    @staticmethod
    def normalize_category_names(values: Iterable[Any]) -> List[str]:
        """Normalize a list of category names, rejecting empty lists."""
        names = [DataValidator.normalize_category_name(v) for v in values]
        if not names:
            raise ValidationError("At least one category is required")
        return names

    @staticmethod
    def validate_positive_int(value: Any, field: str) -> int:
        """
        Validate that a value is a strictly positive integer.

        Args:
            value: Value to check
            field: Field name used in the error message

        Raises:
            ValidationError: If the value is not an int or is below 1
        """
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValidationError(
                f"Invalid value for '{field}': expected a positive integer, got {value!r}"
            )
        return value
