"""
Parameter validator - core validation engine.

Checks a set of provided values against an ordered list of requirement
rules, extracts the values that pass, and reports every failure at once.

Example usage:
    from param_validator import ParameterValidator

    validator = ParameterValidator()
    params = validator.validate(
        provided,
        [
            "required_param0",
            "required_param1",
            ["either_need_this", "or_that"],
            {"param3": lambda value: value > 30},
        ],
    )
"""

import asyncio
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .errors import ParameterValidationError
from .predicates import UNDEFINED, Predicate, is_defined
from .requirements import Custom, Required, RequiredOneOf, requirement_from_entry

logger = logging.getLogger(__name__)


def _read_value(provided_values: Any, name: str) -> Any:
    """Read one provided value, UNDEFINED when it was not supplied."""
    if isinstance(provided_values, Mapping):
        return provided_values.get(name, UNDEFINED)
    return getattr(provided_values, str(name), UNDEFINED)


def _merge(target: Any, params: Dict[str, Any]) -> None:
    """Merge extracted params into a mapping (items) or any other object (attributes)."""
    if isinstance(target, MutableMapping):
        target.update(params)
    else:
        for name, value in params.items():
            setattr(target, name, value)


class ParameterValidator:
    """
    Validates parameters contained in a mapping or object.

    Args:
        options: Optional mapping or config object carrying
            ``default_validation``
        default_validation: Predicate used instead of ``is_defined`` for
            required and one-of rules. Takes precedence over ``options``.

    Raises:
        TypeError: If the replacement default predicate is not callable
    """

    def __init__(self, options: Any = None, *, default_validation: Optional[Predicate] = None):
        if default_validation is None and options is not None:
            if isinstance(options, Mapping):
                default_validation = options.get("default_validation")
            else:
                default_validation = getattr(options, "default_validation", None)

        if default_validation is not None and not callable(default_validation):
            raise TypeError("The optional defaultValidation parameter provided is not a function.")

        self._default_validation = default_validation

    @property
    def default_validation(self) -> Predicate:
        """The configured default predicate, or is_defined when none was given."""
        return self._default_validation or is_defined

    def is_defined(self, value: Any) -> bool:
        return is_defined(value)

    def validate(
        self,
        provided_values: Any = UNDEFINED,
        requirements: Optional[Sequence[Any]] = None,
        extracted_values: Any = None,
    ) -> Any:
        """
        Validate provided values against an ordered list of requirements.

        Each requirement is a rule object or a shorthand shape:
        - str: name of a parameter that must pass the default predicate
        - list/tuple: parameter names, at least one of which must pass
        - mapping: {name: predicate}, the predicate must return True

        All requirements are evaluated before any error is raised.

        Args:
            provided_values: Names and values of the provided parameters
            requirements: Validation rules, interpreted in order
            extracted_values: Optional mapping or object to merge the
                extracted params into (e.g., the instance calling this);
                a new dict is created when omitted

        Returns:
            The extracted names and values (``extracted_values`` itself
            when one was supplied)

        Raises:
            ParameterValidationError: If provided_values is missing or any
                rule failed
            TypeError: If requirements is not a list or tuple, or a
                custom predicate is not callable
        """
        if provided_values is None or provided_values is UNDEFINED:
            raise ParameterValidationError("A paramsProvided object is required.")

        if not isinstance(requirements, (list, tuple)):
            raise TypeError("paramRequirements must be an array.")

        if extracted_values is None:
            extracted_values = {}

        errors: List[str] = []

        for entry in requirements:
            requirement = requirement_from_entry(entry)

            if isinstance(requirement, RequiredOneOf):
                params, rule_errors = self._validate_one_of(provided_values, requirement.names)
            elif isinstance(requirement, Custom):
                params, rule_errors = self._run_predicate(
                    provided_values, requirement.name, requirement.predicate
                )
            elif isinstance(requirement, Required):
                params, rule_errors = self._run_predicate(
                    provided_values, requirement.name, self.default_validation
                )
            else:
                logger.debug("Ignoring requirement with unrecognized shape: %r", entry)
                continue

            _merge(extracted_values, params)
            errors.extend(rule_errors)

        if errors:
            raise ParameterValidationError.from_messages(errors)

        return extracted_values

    async def validate_async(self, *args: Any, **kwargs: Any) -> Any:
        """
        Same as ``validate()``, but as a coroutine.

        Nothing runs until the coroutine is awaited, so every error
        (including misuse errors) is raised at the await rather than at
        the call site.

        Example:
            params = await validator.validate_async(provided, ["user_id"])
        """
        await asyncio.sleep(0)
        return self.validate(*args, **kwargs)

    def _validate_one_of(
        self, provided_values: Any, names: List[str]
    ) -> Tuple[Dict[str, Any], List[str]]:
        is_valid = self.default_validation
        params: Dict[str, Any] = {}

        for name in names:
            value = _read_value(provided_values, name)
            if is_valid(value):
                params[name] = value

        errors = []
        if not params:
            quoted = ", ".join(f"'{name}'" for name in names)
            errors.append(f"One of the following parameters must be included: {quoted}.")
            logger.debug("No parameter of %s passed validation", names)

        return params, errors

    def _run_predicate(
        self, provided_values: Any, name: str, predicate: Predicate
    ) -> Tuple[Dict[str, Any], List[str]]:
        if not callable(predicate):
            raise TypeError(
                f"A paramRequirement value provided for the parameter {name} is not a function."
            )

        value = _read_value(provided_values, name)
        if predicate(value) is True:
            return {name: value}, []

        logger.debug("Parameter %s failed validation with value %r", name, value)
        return {}, [f"Invalid value of '{value}' was provided for parameter '{name}'."]


# Module-level validate()/validate_async() bound to one shared default instance.
_default_validator = ParameterValidator()

validate = _default_validator.validate

validate_async = _default_validator.validate_async
