"""
Base validation components.

This module provides ``ValidationResult``, the container every validator
in the package reports through.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationResult:
    """
    Container for validation results providing comprehensive validation outcome details.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None

    @classmethod
    def from_errors(
        cls,
        errors: List[str],
        warnings: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> "ValidationResult":
        """Build a result that is valid exactly when ``errors`` is empty."""
        return cls(
            is_valid=not errors,
            errors=errors,
            warnings=warnings or [],
            context=context,
        )
