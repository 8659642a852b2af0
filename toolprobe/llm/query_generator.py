"""
Natural-language query generation for tool test cases.

Asks Claude to phrase a tool call the way a user would, e.g. for a
get_forecast tool: "What's the weather going to be in Oslo tomorrow?".
The text is only used as a human-readable prompt for the test case; it has
no bearing on validation, so every failure degrades to an empty string.

Usage:
    ```python
    from toolprobe.llm import QueryGenerator
    from toolprobe.validation import ToolDefinition

    generator = QueryGenerator(api_key="sk-ant-...")
    tool = ToolDefinition(
        name="get_forecast",
        description="Get the weather forecast for a city",
        input_schema={"type": "object", "properties": {"city": {"type": "string"}}}
    )
    print(generator.generate_natural_language_query(tool))
    ```
"""

import json
import logging
from typing import Any, Optional

from toolprobe.config import Settings
from toolprobe.validation.types import ToolDefinition

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "You are a user who wants to call the following tool. "
    "Provide a single sentence describing the request in natural language.\n\n"
    "Name: {name}\n"
    "Description: {description}\n"
    "Parameters: {parameters}"
)


def build_prompt(tool: ToolDefinition) -> str:
    """Build the query-generation prompt for a tool."""
    properties = tool.input_schema.get("properties") or {}
    return PROMPT_TEMPLATE.format(
        name=tool.name,
        description=tool.description,
        parameters=json.dumps(properties, indent=2)
    )


class QueryGenerator:
    """
    Wrapper around the Anthropic SDK for generating natural-language queries.

    Attributes:
        model: Model name passed to the Messages API
        max_tokens: Token limit for the generated sentence
        temperature: Sampling temperature
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[Any] = None,
        max_tokens: int = 100,
        temperature: float = 0.7
    ):
        """
        Initialize query generator.

        Args:
            api_key: Anthropic API key (None lets the SDK read ANTHROPIC_API_KEY)
            model: Model name (default: CLAUDE_MODEL or claude-3-7-sonnet-20250219)
            client: Pre-built client exposing messages.create(); skips SDK setup
            max_tokens: Token limit for the response
            temperature: Sampling temperature
        """
        self.model = model or Settings.from_env().claude_model
        self.max_tokens = max_tokens
        self.temperature = temperature

        if client is None:
            try:
                from anthropic import Anthropic
            except ImportError:
                raise ImportError(
                    "anthropic is required. Install with: pip install anthropic"
                )
            client = Anthropic(api_key=api_key)

        self.client = client

    def generate_natural_language_query(self, tool: ToolDefinition) -> str:
        """
        Generate a one-sentence request describing a call to tool.

        Args:
            tool: Tool definition

        Returns:
            str: The generated sentence, or "" if generation failed
        """
        prompt = build_prompt(tool)

        try:
            response = self.client.messages.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
                temperature=self.temperature
            )
        except Exception as e:
            logger.error(f"Failed to generate natural language query for {tool.name}: {e}")
            return ""

        if not response.content:
            return ""

        block = response.content[0]
        if getattr(block, "type", None) == "text":
            return block.text.strip()

        logger.debug(f"First content block for {tool.name} is not text: {getattr(block, 'type', None)}")
        return ""
