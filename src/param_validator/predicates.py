"""
Validity predicates.

A predicate maps a parameter value to a boolean. Parameters missing from
the provided values are read as the ``UNDEFINED`` sentinel, which keeps
"not supplied" apart from falsy values such as ``None``, ``0`` or ``""``.

Named predicates are registered in ``PREDICATES`` so that requirement
files (see ``param_validator.config``) can refer to them by name.
"""

from typing import Any, Callable, Dict

Predicate = Callable[[Any], bool]


class _Undefined:
    """Marker for a parameter that was not supplied at all."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

    __str__ = __repr__

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def is_defined(value: Any) -> bool:
    """Return True unless value is the UNDEFINED sentinel."""
    return value is not UNDEFINED


def not_none(value: Any) -> bool:
    return is_defined(value) and value is not None


def truthy(value: Any) -> bool:
    return bool(value)


def non_empty(value: Any) -> bool:
    """Defined, not None, and with a non-zero length where one exists."""
    if not not_none(value):
        return False
    try:
        return len(value) > 0
    except TypeError:
        return True


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_int(value: Any) -> bool:
    # bool is a subclass of int but never a meaningful integer parameter
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_dict(value: Any) -> bool:
    return isinstance(value, dict)


PREDICATES: Dict[str, Predicate] = {
    "defined": is_defined,
    "not_none": not_none,
    "truthy": truthy,
    "non_empty": non_empty,
    "is_string": is_string,
    "is_int": is_int,
    "is_number": is_number,
    "is_bool": is_bool,
    "is_list": is_list,
    "is_dict": is_dict,
}


def get_predicate(name: str) -> Predicate:
    """
    Look up a registered predicate by name.

    Args:
        name: Registered predicate name (e.g., 'non_empty')

    Returns:
        The predicate function

    Raises:
        ValueError: If no predicate is registered under that name
    """
    if not isinstance(name, str):
        raise ValueError(f"Predicate name must be a string, got {name!r}")
    try:
        return PREDICATES[name]
    except KeyError:
        raise ValueError(
            f"Unknown predicate: {name}. Must be one of: {', '.join(sorted(PREDICATES))}."
        ) from None
