# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Rule contract, built-in rules and the rule registry."""

from __future__ import annotations

from .base import BaseRule, Rule, RuleExecutionError, RuleOptions
from .registry import (
    RuleConfigurationError,
    RuleDescriptor,
    RuleSpec,
    describe_rules,
    register_rule,
    resolve_rules,
)

__all__ = [
    "BaseRule",
    "Rule",
    "RuleConfigurationError",
    "RuleDescriptor",
    "RuleExecutionError",
    "RuleOptions",
    "RuleSpec",
    "describe_rules",
    "register_rule",
    "resolve_rules",
]
