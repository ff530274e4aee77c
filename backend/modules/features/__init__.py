"""
Feature gate module.

Public API:
- Feature: gated capability keys
- can_use_feature: the gate predicate
- get_plan_for_user / effective_plan: plan resolution
"""

from .models import Feature
from .gate import (
    can_use_feature,
    effective_plan,
    get_plan_for_user,
)

__all__ = [
    "Feature",
    "can_use_feature",
    "effective_plan",
    "get_plan_for_user",
]
