"""
High-level Python API for toolprobe.

This module provides the main user-facing API for validating tool responses.
"""

from toolprobe.suite import load_suite, run_suite
from toolprobe.validation import (
    ResponseValidator,
    ValidationResult,
    default_registry,
    register_predicate,
    validate_response,
)

# Re-export for convenience
__all__ = [
    "validate_response",
    "ResponseValidator",
    "ValidationResult",
    "default_registry",
    "register_predicate",
    "load_suite",
    "run_suite",
]
