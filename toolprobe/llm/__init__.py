"""
LLM helpers.

Components:
    - query_generator: Phrase a tool call as a natural-language user request (Anthropic SDK)
"""

from toolprobe.llm.query_generator import QueryGenerator, build_prompt

__all__ = ["QueryGenerator", "build_prompt"]
