"""
param-validator: declarative validation of provided parameters.

Given the provided values and an ordered list of requirements, the
validator extracts every parameter that passes and raises one aggregate
error describing every rule that failed.

Requirement shapes:
- "name": the parameter must be defined (or pass the configured default)
- ["a", "b"]: at least one of the parameters must be defined
- {"x": predicate}: the predicate must return True for the value

Quick Start:
    from param_validator import ParameterValidationError, validate

    try:
        params = validate(request_args, ["user_id", ["email", "phone"], {"age": lambda v: v >= 18}])
    except ParameterValidationError as e:
        return {"error": e.message}

Async callers:
    params = await validate_async(request_args, ["user_id"])

Configuration from YAML:
    from param_validator import load_config

    config = load_config("requirements.yaml")
    params = config.build_validator().validate(request_args, config.requirements)
"""

__version__ = "0.1.0"

# Error exports
from .errors import ParameterValidationError

# Predicate exports
from .predicates import (
    PREDICATES,
    UNDEFINED,
    get_predicate,
    is_defined,
)

# Requirement exports
from .requirements import (
    Custom,
    Required,
    RequiredOneOf,
    requirement_from_entry,
)

# Validator exports
from .validator import (
    ParameterValidator,
    validate,
    validate_async,
)

# Configuration exports
from .config import (
    ValidatorConfig,
    load_config,
    load_requirements_from_list,
    load_requirements_from_yaml,
    requirement_from_data,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "ParameterValidationError",
    # Predicates
    "UNDEFINED",
    "PREDICATES",
    "is_defined",
    "get_predicate",
    # Requirements
    "Required",
    "RequiredOneOf",
    "Custom",
    "requirement_from_entry",
    # Validator
    "ParameterValidator",
    "validate",
    "validate_async",
    # Config
    "ValidatorConfig",
    "load_config",
    "load_requirements_from_yaml",
    "load_requirements_from_list",
    "requirement_from_data",
]
