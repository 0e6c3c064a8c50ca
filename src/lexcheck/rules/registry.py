# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Explicit rule registry.

Rules are registered by name at import time (the built-in set) or by
``register_rule`` during application start-up. Nothing is discovered by
scanning directories, so the active rule set is always the content of this
registry. Every problem found while building rules is a
``RuleConfigurationError`` and is raised before any file is analysed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Final, cast

from pydantic import ValidationError

from lexcheck._internal.exceptions import ConfigurationError, LexcheckTypeError
from lexcheck._internal.logging_utils import structured_extra
from lexcheck._internal.utils import dedupe_preserve
from lexcheck.core.model_types import LogComponent, SeverityLevel
from lexcheck.core.type_aliases import RuleName

from .base import BaseRule, Rule, RuleOptions
from .builtin import BlankLinesRule, LineLengthRule, TabIndentationRule, TrailingWhitespaceRule

logger: logging.Logger = logging.getLogger("lexcheck.rules.registry")

type RuleFactory = Callable[..., object]

SEVERITY_OPTION: Final[str] = "severity"


class RuleConfigurationError(ConfigurationError):
    """Raised when the rule set cannot be built."""


class UnknownRuleError(RuleConfigurationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown rule '{name}'")


class DuplicateRuleError(RuleConfigurationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Rule '{name}' is already registered")


class InvalidRuleOptionsError(RuleConfigurationError):
    def __init__(self, name: str, error: Exception) -> None:
        self.name = name
        self.error = error
        super().__init__(f"Invalid options for rule '{name}': {error}")


@dataclass(slots=True, frozen=True)
class RuleSpec:
    """How to build one registered rule.

    Attributes:
        name: Unique rule identifier.
        factory: Callable invoked as ``factory(options, severity=...)``.
        options_model: Pydantic model validating the rule's option table.
        summary: One-line description shown by ``--list-rules``.
        origin: ``"builtin"`` or ``"registered"``.
    """

    name: RuleName
    factory: RuleFactory
    options_model: type[RuleOptions] = RuleOptions
    summary: str = ""
    origin: str = "registered"


@dataclass(slots=True, frozen=True)
class RuleDescriptor:
    name: RuleName
    module: str
    qualified_name: str
    severity: SeverityLevel
    summary: str
    origin: str


_REGISTRY: dict[RuleName, RuleSpec] = {}


def _is_rule_like(value: object) -> bool:
    if value is None:
        return False
    name = getattr(value, "name", None)
    check = getattr(value, "check", None)
    severity = getattr(value, "severity", None)
    return isinstance(name, str) and bool(name) and callable(check) and isinstance(severity, SeverityLevel)


def register_rule(
    factory: RuleFactory,
    *,
    name: str | None = None,
    options_model: type[RuleOptions] | None = None,
    summary: str | None = None,
    replace: bool = False,
    origin: str = "registered",
) -> RuleSpec:
    """Add a rule to the registry.

    ``BaseRule`` subclasses supply ``name``, ``options_model`` and ``summary``
    themselves; any other factory must pass ``name`` explicitly.

    Raises:
        LexcheckTypeError: If ``factory`` is not callable.
        RuleConfigurationError: If no name can be determined.
        DuplicateRuleError: If the name is taken and ``replace`` is false.
    """
    if not callable(factory):
        message = f"Rule factory must be callable, got {type(factory).__name__}"
        raise LexcheckTypeError(message)
    resolved_name = name or getattr(factory, "name", None)
    if not isinstance(resolved_name, str) or not resolved_name.strip():
        message = f"Rule factory {factory!r} does not declare a name"
        raise RuleConfigurationError(message)
    rule_name = RuleName(resolved_name.strip())
    if rule_name in _REGISTRY and not replace:
        raise DuplicateRuleError(rule_name)
    model = options_model or cast("type[RuleOptions]", getattr(factory, "options_model", RuleOptions))
    spec = RuleSpec(
        name=rule_name,
        factory=factory,
        options_model=model,
        summary=summary if summary is not None else str(getattr(factory, "summary", "")),
        origin=origin,
    )
    _REGISTRY[rule_name] = spec
    logger.debug(
        "Registered rule '%s'",
        rule_name,
        extra=structured_extra(LogComponent.RULES, rule=rule_name),
    )
    return spec


def unregister_rule(name: str) -> None:
    _REGISTRY.pop(RuleName(name), None)


def rule_specs() -> dict[RuleName, RuleSpec]:
    """Return a name-sorted snapshot of the registry."""
    return dict(sorted(_REGISTRY.items()))


def _coerce_severity(name: RuleName, raw: object) -> SeverityLevel | None:
    if raw is None:
        return None
    try:
        return SeverityLevel.from_str(str(raw))
    except ValueError as exc:
        raise InvalidRuleOptionsError(name, exc) from exc


def build_rule(name: str, options: Mapping[str, object] | None = None) -> Rule:
    """Construct the rule registered as ``name`` with validated options.

    A ``severity`` key in ``options`` overrides the rule's default severity;
    every other key is validated by the rule's options model.
    """
    rule_name = RuleName(name)
    spec = _REGISTRY.get(rule_name)
    if spec is None:
        raise UnknownRuleError(name)
    raw = dict(options or {})
    severity = _coerce_severity(rule_name, raw.pop(SEVERITY_OPTION, None))
    try:
        validated = spec.options_model.model_validate(raw)
    except ValidationError as exc:
        raise InvalidRuleOptionsError(rule_name, exc) from exc
    candidate = spec.factory(validated, severity=severity)
    if not _is_rule_like(candidate):
        message = f"Rule '{rule_name}' did not provide a valid rule instance"
        raise RuleConfigurationError(message)
    return cast("Rule", candidate)


def resolve_rules(
    names: Iterable[str] | None = None,
    options: Mapping[str, Mapping[str, object]] | None = None,
) -> list[Rule]:
    """Build the rules to run, in order.

    Args:
        names: Rule names in the order they should run. ``None`` or empty
            selects every registered rule, sorted by name.
        options: Per-rule option tables keyed by rule name.

    Returns:
        Constructed rule instances in the requested order, duplicates dropped.

    Raises:
        UnknownRuleError: If a name (or an options key) is not registered.
        InvalidRuleOptionsError: If a rule rejects its options.
    """
    option_tables = dict(options or {})
    for key in option_tables:
        if RuleName(key) not in _REGISTRY:
            raise UnknownRuleError(key)
    selected = dedupe_preserve(str(name).strip() for name in names or ())
    if not selected:
        selected = list(rule_specs())
    return [build_rule(name, option_tables.get(name)) for name in selected]


def _default_severity(spec: RuleSpec) -> SeverityLevel:
    declared = getattr(spec.factory, "severity", None)
    if isinstance(declared, SeverityLevel):
        return declared
    return build_rule(spec.name).severity


def describe_rules() -> list[RuleDescriptor]:
    """Describe every registered rule.

    Rule classes report their declared severity without being constructed;
    only plain factories are built with default options.

    Raises:
        InvalidRuleOptionsError: If a plain factory rejects default options.
    """
    descriptors: list[RuleDescriptor] = []
    for name, spec in rule_specs().items():
        factory = spec.factory
        descriptors.append(
            RuleDescriptor(
                name=name,
                module=str(getattr(factory, "__module__", "")),
                qualified_name=str(getattr(factory, "__qualname__", name)),
                severity=_default_severity(spec),
                summary=spec.summary,
                origin=spec.origin,
            ),
        )
    return descriptors


BUILTIN_RULES: Final[tuple[type[BaseRule], ...]] = (
    BlankLinesRule,
    LineLengthRule,
    TabIndentationRule,
    TrailingWhitespaceRule,
)

for _rule_cls in BUILTIN_RULES:
    register_rule(_rule_cls, origin="builtin")

__all__ = [
    "BUILTIN_RULES",
    "DuplicateRuleError",
    "InvalidRuleOptionsError",
    "RuleConfigurationError",
    "RuleDescriptor",
    "RuleFactory",
    "RuleSpec",
    "UnknownRuleError",
    "build_rule",
    "describe_rules",
    "register_rule",
    "resolve_rules",
    "rule_specs",
    "unregister_rule",
]
