"""
Declarative field validation.

A rule set is an ordered sequence of FieldRule, one check per rule.
evaluate() runs every rule against a mapping of request values and
collects one ValidationFailure per violated rule, in declaration order.
User input never raises; a malformed rule set does.
No framework imports allowed.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Sequence

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


class Check(Enum):
    """Kind of constraint applied by a FieldRule."""

    REQUIRED = "required"
    STRING = "string"
    INTEGER = "integer"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    MIN_VALUE = "min_value"
    MAX_VALUE = "max_value"
    PATTERN = "pattern"
    ONE_OF = "one_of"


_INT_ARGUMENT_CHECKS = frozenset(
    {Check.MIN_LENGTH, Check.MAX_LENGTH, Check.MIN_VALUE, Check.MAX_VALUE}
)


class RuleConfigurationError(Exception):
    """Raised when a rule set is malformed. This is an operator error."""

    def __init__(self, rule: "FieldRule", reason: str) -> None:
        self.rule = rule
        self.reason = reason
        check = getattr(rule.check, "value", rule.check)
        super().__init__(f"Invalid rule {check!r} for field {rule.field!r}: {reason}")


@dataclass(frozen=True)
class ValidationFailure:
    """A single violated rule.

    Attributes:
        field: Name of the offending field.
        message: Human-readable description of the violation.
        rejected_value: The value that failed, when one was supplied.
    """

    field: str
    message: str
    rejected_value: Any = None


@dataclass(frozen=True)
class FieldRule:
    """One check against one field.

    Attributes:
        field: Key looked up in the value mapping.
        check: The constraint to apply.
        argument: Bound, pattern or choices, depending on the check.
        message: Overrides the default failure message.
    """

    field: str
    check: Check
    argument: Any = None
    message: Optional[str] = None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_PATTERN.match(value.strip()):
        try:
            return int(value.strip())
        except ValueError:
            # Past the interpreter's int string conversion limit
            return None
    return None


def _check_configuration(rule: FieldRule) -> None:
    if not isinstance(rule.field, str) or not rule.field:
        raise RuleConfigurationError(rule, "field name must be a non-empty string")
    if not isinstance(rule.check, Check):
        raise RuleConfigurationError(rule, "check must be a Check member")

    if rule.check in _INT_ARGUMENT_CHECKS:
        if isinstance(rule.argument, bool) or not isinstance(rule.argument, int):
            raise RuleConfigurationError(rule, "argument must be an integer")
        if rule.check in (Check.MIN_LENGTH, Check.MAX_LENGTH) and rule.argument < 0:
            raise RuleConfigurationError(rule, "length bound must not be negative")
    elif rule.check is Check.PATTERN:
        if not isinstance(rule.argument, str):
            raise RuleConfigurationError(rule, "argument must be a regex string")
        try:
            re.compile(rule.argument)
        except re.error as exc:
            raise RuleConfigurationError(rule, f"bad pattern: {exc}") from exc
    elif rule.check is Check.ONE_OF:
        if not isinstance(rule.argument, (list, tuple, set, frozenset)) or not rule.argument:
            raise RuleConfigurationError(rule, "argument must be a non-empty collection")


def _default_message(rule: FieldRule) -> str:
    field, arg = rule.field, rule.argument
    messages = {
        Check.REQUIRED: f"{field} is required",
        Check.STRING: f"{field} must be a string",
        Check.INTEGER: f"{field} must be an integer",
        Check.MIN_LENGTH: f"{field} must be at least {arg} characters",
        Check.MAX_LENGTH: f"{field} must be at most {arg} characters",
        Check.MIN_VALUE: f"{field} must be greater than or equal to {arg}",
        Check.MAX_VALUE: f"{field} must be less than or equal to {arg}",
        Check.PATTERN: f"{field} has an invalid format",
    }
    if rule.check is Check.ONE_OF:
        return f"{field} must be one of: {', '.join(str(c) for c in arg)}"
    return messages[rule.check]


def _passes(rule: FieldRule, value: Any) -> bool:
    """Apply a single check to a present value."""
    check = rule.check
    if check is Check.STRING:
        return isinstance(value, str)
    if check is Check.INTEGER:
        return _as_int(value) is not None
    if check is Check.MIN_LENGTH:
        return not isinstance(value, str) or len(value) >= rule.argument
    if check is Check.MAX_LENGTH:
        return not isinstance(value, str) or len(value) <= rule.argument
    if check is Check.MIN_VALUE:
        number = _as_int(value)
        return number is None or number >= rule.argument
    if check is Check.MAX_VALUE:
        number = _as_int(value)
        return number is None or number <= rule.argument
    if check is Check.PATTERN:
        return not isinstance(value, str) or re.fullmatch(rule.argument, value) is not None
    if check is Check.ONE_OF:
        try:
            return value in rule.argument
        except TypeError:
            return False
    return True


def evaluate(
    rules: Sequence[FieldRule], values: Mapping[str, Any]
) -> list[ValidationFailure]:
    """Run every rule and collect all violations.

    Args:
        rules: Ordered rule set.
        values: Request values keyed by field name.

    Returns:
        One ValidationFailure per violated rule, in rule order.
        An empty list means the values are valid.

    Raises:
        RuleConfigurationError: If any rule is malformed.
    """
    for rule in rules:
        _check_configuration(rule)

    failures: list[ValidationFailure] = []
    for rule in rules:
        value = values.get(rule.field)

        if rule.check is Check.REQUIRED:
            blank = isinstance(value, str) and not value.strip()
            if value is None or blank:
                failures.append(
                    ValidationFailure(
                        field=rule.field,
                        message=rule.message or _default_message(rule),
                        rejected_value=value,
                    )
                )
            continue

        if value is None:
            continue

        if not _passes(rule, value):
            failures.append(
                ValidationFailure(
                    field=rule.field,
                    message=rule.message or _default_message(rule),
                    rejected_value=value,
                )
            )
    return failures
