"""
Validation rules and the rule engine.

A rule is a single typed assertion about a value inside a tool result.
Rules are plain data in test suites and are parsed into a closed family
of dataclasses:

Rule Hierarchy:
    ValidationRule (abstract)
    ├── ContainsRule: substring of a string, or member of an array
    ├── MatchesRule: exact string, /regex/, or structural equality
    ├── HasPropertyRule: path exists (a null value still counts)
    ├── EqualsRule: structural equality
    ├── ArrayLengthRule: array with an exact length
    ├── CustomRule: named predicate looked up in a PredicateRegistry
    └── UnknownRule: unrecognized type, always reported

Custom predicates are registered by name so that rule sets stay serializable:

    ```python
    from toolprobe.validation.rules import register_predicate

    @register_predicate("has_results")
    def has_results(data):
        return bool(data.get("results"))

    # In a suite file:
    # {"type": "custom", "predicate": "has_results", "message": "No results"}
    ```

Usage:
    ```python
    from toolprobe.validation.rules import evaluate_rules

    data = {"tags": ["a", "b"], "name": "hello123"}
    errors = evaluate_rules(data, [
        {"type": "contains", "target": "tags", "value": "b", "message": "missing tag b"},
        {"type": "matches", "target": "name", "value": "/^[a-z]+\\d+$/", "message": "bad name"},
    ])
    assert errors == []
    ```
"""

import importlib
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable, ClassVar, Dict, Iterable, List, Mapping, Optional, Union

from toolprobe.validation.comparison import deep_equal
from toolprobe.validation.paths import has_path, resolve_path

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], Any]


class PredicateRegistry:
    """
    Name → function mapping for custom rules.

    Attributes:
        _predicates: Registered predicates keyed by name
    """

    def __init__(self):
        self._predicates: Dict[str, Predicate] = {}

    def register(self, name: str, func: Optional[Predicate] = None):
        """
        Register a predicate under name.

        Can be used directly (registry.register("x", fn)) or as a decorator
        (@registry.register("x")).

        Raises:
            ValueError: If name is already registered
        """
        def decorator(f: Predicate) -> Predicate:
            if name in self._predicates:
                raise ValueError(f"Predicate already registered: {name}")
            self._predicates[name] = f
            logger.debug(f"Registered custom predicate '{name}'")
            return f

        if func is not None:
            return decorator(func)
        return decorator

    def unregister(self, name: str) -> None:
        self._predicates.pop(name, None)

    def get(self, name: str) -> Optional[Predicate]:
        return self._predicates.get(name)

    def names(self) -> List[str]:
        return sorted(self._predicates)

    def __contains__(self, name: object) -> bool:
        return name in self._predicates


default_registry = PredicateRegistry()


def register_predicate(name: str, func: Optional[Predicate] = None):
    """Register a predicate on the default registry."""
    return default_registry.register(name, func)


def load_predicates(module_path: str) -> ModuleType:
    """
    Import a module whose import registers predicates on the default registry.

    Args:
        module_path: Dotted module path (e.g., "my_project.predicates")

    Returns:
        The imported module
    """
    before = set(default_registry.names())
    module = importlib.import_module(module_path)
    added = sorted(set(default_registry.names()) - before)
    logger.info(f"Loaded predicates from {module_path}: {', '.join(added) or 'none'}")
    return module


@dataclass
class ValidationRule(ABC):
    """
    Base class for all rule kinds.

    Attributes:
        target: Path expression to check (None = root data)
        message: Failure text reported when the rule does not hold
    """

    target: Optional[str] = None
    message: Optional[str] = None

    type: ClassVar[str] = ""

    @abstractmethod
    def check(self, data: Any) -> bool:
        """Return True if the rule holds for data."""
        pass

    def failure_message(self) -> str:
        if self.message:
            return self.message
        return f"{self.type} check failed at {self.target or 'root'}"

    def evaluate(self, data: Any, registry: PredicateRegistry) -> Optional[str]:
        """
        Evaluate the rule.

        Returns:
            None if the rule holds, otherwise the error message to report
        """
        return None if self.check(data) else self.failure_message()


@dataclass
class ContainsRule(ValidationRule):
    value: Any = None

    type: ClassVar[str] = "contains"

    def check(self, data: Any) -> bool:
        actual = resolve_path(data, self.target)

        if isinstance(actual, str):
            return isinstance(self.value, str) and self.value in actual

        if isinstance(actual, (list, tuple)):
            return any(deep_equal(item, self.value) for item in actual)

        return False


@dataclass
class MatchesRule(ValidationRule):
    """
    Literal or pattern match.

    A value wrapped in slashes ("/^\\d+$/") is a regular expression searched
    for in the target string; any other string must match exactly.
    Non-string values fall back to structural equality.
    """

    value: Any = None

    type: ClassVar[str] = "matches"

    def check(self, data: Any) -> bool:
        actual = resolve_path(data, self.target)

        if isinstance(actual, str) and isinstance(self.value, str):
            if self.value.startswith("/") and self.value.endswith("/"):
                pattern = self.value[1:-1]
                try:
                    return re.search(pattern, actual) is not None
                except re.error as e:
                    logger.warning(f"Invalid pattern {self.value!r} in matches rule: {e}")
                    return False
            return actual == self.value

        return deep_equal(actual, self.value)


@dataclass
class HasPropertyRule(ValidationRule):
    type: ClassVar[str] = "hasProperty"

    def check(self, data: Any) -> bool:
        return has_path(data, self.target)


@dataclass
class EqualsRule(ValidationRule):
    value: Any = None

    type: ClassVar[str] = "equals"

    def check(self, data: Any) -> bool:
        return deep_equal(resolve_path(data, self.target), self.value)


@dataclass
class ArrayLengthRule(ValidationRule):
    value: Any = None

    type: ClassVar[str] = "arrayLength"

    def check(self, data: Any) -> bool:
        actual = resolve_path(data, self.target)
        if not isinstance(actual, (list, tuple)):
            return False
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            return False
        return len(actual) == self.value


@dataclass
class CustomRule(ValidationRule):
    """
    Rule backed by a registered predicate.

    The predicate receives the whole root data, not the target.
    A rule without a predicate name is a no-op and always passes; a
    predicate that is not a name (e.g., an inline function) is reported.
    """

    predicate: Optional[str] = None

    type: ClassVar[str] = "custom"

    def check(self, data: Any) -> bool:
        return self.evaluate(data, default_registry) is None

    def evaluate(self, data: Any, registry: PredicateRegistry) -> Optional[str]:
        if self.predicate is None:
            return None

        if not isinstance(self.predicate, str):
            kind = "function" if callable(self.predicate) else type(self.predicate).__name__
            return f"Custom predicate must be a registered name, got {kind}"

        func = registry.get(self.predicate)
        if func is None:
            return f"Unknown custom predicate: {self.predicate}"

        try:
            passed = func(data)
        except Exception as e:
            logger.warning(f"Custom predicate '{self.predicate}' raised: {e}")
            return f"Custom predicate '{self.predicate}' raised: {e}"

        return None if passed else self.failure_message()


@dataclass
class UnknownRule(ValidationRule):
    """Placeholder for a rule whose type is not recognized."""

    raw_type: Any = None

    type: ClassVar[str] = "unknown"

    def check(self, data: Any) -> bool:
        return False

    def evaluate(self, data: Any, registry: PredicateRegistry) -> Optional[str]:
        return f"Unknown rule type: {self.raw_type}"


RULE_TYPES: Dict[str, type] = {
    rule_cls.type: rule_cls
    for rule_cls in (
        ContainsRule,
        MatchesRule,
        HasPropertyRule,
        EqualsRule,
        ArrayLengthRule,
        CustomRule,
    )
}


def parse_rule(raw: Union[ValidationRule, Mapping[str, Any]]) -> ValidationRule:
    """
    Build a rule from its plain-data form.

    Args:
        raw: Mapping with "type", "target", "value", "message" and, for custom
            rules, "predicate"; or an already-built rule

    Returns:
        ValidationRule: The parsed rule (UnknownRule if the type is not recognized
            or raw is not a mapping)

    Example:
        ```python
        rule = parse_rule({"type": "arrayLength", "target": "items", "value": 3})
        assert isinstance(rule, ArrayLengthRule)
        ```
    """
    if isinstance(raw, ValidationRule):
        return raw

    if not isinstance(raw, Mapping):
        return UnknownRule(raw_type=raw)

    rule_type = raw.get("type")
    target = raw.get("target")
    message = raw.get("message")

    rule_cls = RULE_TYPES.get(rule_type) if isinstance(rule_type, str) else None
    if rule_cls is None:
        return UnknownRule(target=target, message=message, raw_type=rule_type)

    if rule_cls is HasPropertyRule:
        return HasPropertyRule(target=target, message=message)

    if rule_cls is CustomRule:
        predicate = raw.get("predicate")
        if predicate is None:
            predicate = raw.get("custom")
        return CustomRule(target=target, message=message, predicate=predicate)

    return rule_cls(target=target, message=message, value=raw.get("value"))


def evaluate_rules(
    data: Any,
    rules: Iterable[Union[ValidationRule, Mapping[str, Any]]],
    registry: Optional[PredicateRegistry] = None
) -> List[str]:
    """
    Evaluate every rule against data.

    Rules are evaluated independently and in order; a failing rule never
    stops the rest from running, so all violations are reported at once.

    Args:
        data: Root data the rules address
        rules: Rules (built or plain data)
        registry: Predicate registry for custom rules (default: default_registry)

    Returns:
        List[str]: One message per failed rule, in rule order
    """
    registry = registry if registry is not None else default_registry
    errors: List[str] = []

    for raw in rules:
        rule = parse_rule(raw)
        error = rule.evaluate(data, registry)
        if error is not None:
            logger.debug(f"Rule {rule.type} at {rule.target or 'root'} failed: {error}")
            errors.append(error)

    return errors
