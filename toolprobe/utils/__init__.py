"""
Utility functions and helpers.

This module contains shared utilities used across toolprobe components.

Components:
    - logging: Logging configuration with a Rich console handler

Example:
    ```python
    from toolprobe.utils import setup_logging

    setup_logging(level="INFO", log_file="toolprobe.log")
    ```
"""

from toolprobe.utils.logging import setup_logging

__all__ = ["setup_logging"]
