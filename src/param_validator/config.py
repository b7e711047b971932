"""
Configuration handling for parameter validation.

Requirement lists can be kept in YAML next to the code that uses them.
Custom rules refer to predicates registered in
``param_validator.predicates.PREDICATES`` by name.

Example YAML configuration:
    default_validation: not_none
    requirements:
      - user_id
      - [email, phone]
      - age: is_int

Example usage:
    from param_validator.config import load_config

    config = load_config("requirements.yaml")
    validator = config.build_validator()
    params = validator.validate(provided, config.requirements)
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .predicates import Predicate, get_predicate
from .requirements import Custom, Required, RequiredOneOf, Requirement
from .validator import ParameterValidator

logger = logging.getLogger(__name__)


def requirement_from_data(data: Any) -> Requirement:
    """
    Create a Requirement from one YAML/JSON entry.

    Args:
        data: A parameter name, a list of names, or a one-key mapping of
            parameter name to predicate name

    Returns:
        Requirement object

    Raises:
        ValueError: If the entry has no recognized shape or names an
            unknown predicate
    """
    if isinstance(data, str):
        if not data:
            raise ValueError("Parameter name must not be empty")
        return Required(data)

    if isinstance(data, list):
        if not data or not all(isinstance(name, str) and name for name in data):
            raise ValueError("One-of requirement must be a non-empty list of parameter names")
        return RequiredOneOf(data)

    if isinstance(data, dict):
        if len(data) != 1:
            raise ValueError(
                f"Custom requirement must have exactly one key, got {len(data)}"
            )
        name, predicate_name = next(iter(data.items()))
        if not isinstance(predicate_name, str):
            raise ValueError(f"Predicate for parameter '{name}' must be a predicate name")
        return Custom(str(name), get_predicate(predicate_name))

    raise ValueError(f"Unsupported requirement entry: {data!r}")


def load_requirements_from_list(requirements_data: List[Any]) -> List[Requirement]:
    """
    Load requirements from a list of entries.

    Args:
        requirements_data: List of requirement entries

    Returns:
        List of Requirement objects

    Raises:
        ValueError: If any entry is invalid (message names its index)
    """
    if not isinstance(requirements_data, list):
        raise ValueError("'requirements' must be a list")

    requirements = []
    for i, entry in enumerate(requirements_data):
        try:
            requirements.append(requirement_from_data(entry))
        except ValueError as e:
            raise ValueError(f"Invalid requirement at index {i}: {e}") from e
    return requirements


def _load_yaml_file(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        raise ValueError(f"Empty or invalid YAML file: {path}")
    if not isinstance(data, dict):
        raise ValueError(f"YAML file must contain a mapping: {path}")
    return data


def load_requirements_from_yaml(path: Union[str, Path]) -> List[Requirement]:
    """
    Load requirement definitions from a YAML file.

    The YAML file should have a top-level 'requirements' key containing
    a list of requirement entries.

    Args:
        path: Path to the YAML file

    Returns:
        List of Requirement objects

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML is invalid or missing required fields
    """
    data = _load_yaml_file(path)
    if "requirements" not in data:
        raise ValueError(f"YAML file must have a 'requirements' key: {path}")

    requirements = load_requirements_from_list(data["requirements"])
    logger.debug("Loaded %d requirements from %s", len(requirements), path)
    return requirements


class ValidatorConfig:
    """
    Configuration container for a validator and its requirement list.

    Attributes:
        requirements: Requirement objects, in evaluation order
        default_validation: Optional replacement for is_defined
    """

    def __init__(
        self,
        requirements: Optional[List[Requirement]] = None,
        default_validation: Optional[Predicate] = None,
    ):
        self.requirements = requirements or []
        self.default_validation = default_validation

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidatorConfig":
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            ValidatorConfig instance
        """
        requirements = load_requirements_from_list(data.get("requirements", []))

        default_validation = None
        if data.get("default_validation") is not None:
            default_validation = get_predicate(data["default_validation"])

        return cls(requirements=requirements, default_validation=default_validation)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ValidatorConfig":
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ValidatorConfig instance
        """
        config = cls.from_dict(_load_yaml_file(path))
        logger.debug("Loaded validator config from %s", path)
        return config

    def build_validator(self) -> ParameterValidator:
        """Create a ParameterValidator using this configuration."""
        return ParameterValidator(self)


def load_config(source: Union[str, Path, Dict[str, Any]]) -> ValidatorConfig:
    """
    Load configuration from a YAML file path or a dictionary.

    Args:
        source: Configuration source

    Returns:
        ValidatorConfig instance
    """
    if isinstance(source, dict):
        return ValidatorConfig.from_dict(source)
    else:
        return ValidatorConfig.from_yaml(source)
