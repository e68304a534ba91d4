"""Completeness checks for a property set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .registry import PropertySet, Registry


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


def missing_required(registry: Registry, properties: PropertySet) -> List[str]:
    """Required keys not satisfied directly or through an alternative."""
    return [
        key
        for key in registry.required_keys
        if not registry.is_satisfied(properties, key)
    ]


def validate_properties(
    registry: Registry, properties: PropertySet
) -> List[ValidationError]:
    """Return one error per unsatisfied required property; unknown keys are ignored."""
    errors: List[ValidationError] = []
    for key in missing_required(registry, properties):
        alternatives = registry.alternatives_for(key)
        message = "Required property is not set."
        if alternatives:
            message = f"Required property is not set (or use {' or '.join(alternatives)})."
        errors.append(ValidationError(key, message))
    return errors
