"""
Requirement rules.

A requirement list may mix explicit rule objects with the shorthand
shapes below; ``requirement_from_entry`` normalizes either form:

    "name"                      -> Required("name")
    ["a", "b"]                  -> RequiredOneOf(["a", "b"])
    {"x": lambda v: v > 30}     -> Custom("x", <predicate>)

Anything else (empty strings, empty lists, empty mappings, numbers,
None, ...) normalizes to None and is skipped by the validator.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from .predicates import Predicate


@dataclass
class Required:
    """Parameter ``name`` must pass the validator's default predicate."""

    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Required parameter name is required")


@dataclass
class RequiredOneOf:
    """
    At least one of ``names`` must pass the default predicate.

    Every name that passes is extracted, not just the first.
    """

    names: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.names = list(self.names)
        if not self.names:
            raise ValueError("RequiredOneOf needs at least one parameter name")


@dataclass
class Custom:
    """
    Parameter ``name`` must satisfy ``predicate``.

    Only a return value of exactly ``True`` counts as valid; truthy
    values such as ``1`` or ``"yes"`` do not.
    """

    name: str
    predicate: Predicate

    def __post_init__(self):
        if not callable(self.predicate):
            raise TypeError(
                f"A paramRequirement value provided for the parameter {self.name} is not a function."
            )


Requirement = Union[Required, RequiredOneOf, Custom]


def requirement_from_entry(entry: Any) -> Optional[Requirement]:
    """
    Normalize one entry of a requirement list.

    Args:
        entry: A rule object or one of the shorthand shapes

    Returns:
        The rule, or None if the entry has no recognized shape

    Raises:
        TypeError: If a mapping entry's predicate is not callable
    """
    if isinstance(entry, (Required, RequiredOneOf, Custom)):
        return entry

    if isinstance(entry, (list, tuple)) and entry:
        return RequiredOneOf(list(entry))

    if isinstance(entry, Mapping) and entry:
        # Only the first key is read; a rule names exactly one parameter.
        name, predicate = next(iter(entry.items()))
        return Custom(name, predicate)

    if isinstance(entry, str) and entry:
        return Required(entry)

    return None
