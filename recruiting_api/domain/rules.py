"""
Tiny declarative validation: a rule set is an ordered list of
(predicate, message) pairs evaluated against one entity.

Each predicate gets the whole entity and returns True when the entity
is fine. Every failing rule contributes its message; evaluation never
stops early, so a blank required field yields both its "blank" and its
"length" message.
"""

from typing import Any, Callable, NamedTuple, Sequence

from recruiting_api.domain import messages


class Rule(NamedTuple):
    predicate: Callable[[Any], bool]
    message: str


def validate(rules: Sequence[Rule], entity: Any) -> list[str]:
    """Return the messages of every rule the entity breaks (empty list = valid)."""
    return [rule.message for rule in rules if not rule.predicate(entity)]


# ─── Rule builders ───────────────────────────────────────────────────

def not_empty(field: str) -> Rule:
    def check(entity):
        value = getattr(entity, field)
        if isinstance(value, str):
            return bool(value.strip())
        return value is not None
    return Rule(check, messages.BLANK_FIELD.format(field))


def not_null(field: str) -> Rule:
    return Rule(lambda entity: getattr(entity, field) is not None, messages.NULL_FIELD.format(field))


def length(field: str, minimum: int, maximum: int) -> Rule:
    """Length bounds, inclusive. A missing value is left to not_null."""
    def check(entity):
        value = getattr(entity, field)
        return value is None or minimum <= len(value) <= maximum
    return Rule(check, messages.LENGTH_RANGE.format(field, minimum, maximum))


def exact_length(field: str, size: int) -> Rule:
    def check(entity):
        value = getattr(entity, field)
        return value is None or len(value) == size
    return Rule(check, messages.EXACT_LENGTH.format(field, size))


def linked(field: str, owner: str) -> Rule:
    """Foreign key must point somewhere (0 / None mean unset)."""
    return Rule(lambda entity: bool(getattr(entity, field)), messages.FIELD_NOT_LINKED.format(field, owner))


def must(field: str, predicate: Callable[[Any], bool], message: str) -> Rule:
    """Apply `predicate` to a single field value."""
    return Rule(lambda entity: predicate(getattr(entity, field)), message)


def required_text(field: str, minimum: int, maximum: int) -> list[Rule]:
    return [not_empty(field), not_null(field), length(field, minimum, maximum)]
