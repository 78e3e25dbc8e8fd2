from .base import BaseRule, CorrectableRule
from .non_overridable_class_declaration import (
    FinalClassModifier,
    NonOverridableClassDeclarationConfiguration,
    NonOverridableClassDeclarationRule,
)

__all__ = [
    "BaseRule",
    "CorrectableRule",
    "FinalClassModifier",
    "NonOverridableClassDeclarationConfiguration",
    "NonOverridableClassDeclarationRule",
]
