# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for the rule registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

import pytest
from pydantic import Field

from lexcheck._internal.exceptions import ConfigurationError, LexcheckTypeError
from lexcheck.core.model_types import SeverityLevel
from lexcheck.rules import BaseRule, RuleOptions
from lexcheck.rules.builtin import LineLengthRule
from lexcheck.rules.registry import (
    BUILTIN_RULES,
    DuplicateRuleError,
    InvalidRuleOptionsError,
    RuleConfigurationError,
    UnknownRuleError,
    build_rule,
    describe_rules,
    register_rule,
    resolve_rules,
    rule_specs,
    unregister_rule,
)

if TYPE_CHECKING:
    from collections.abc import Generator

    from lexcheck.result import DiagnosticSink
    from lexcheck.rules.registry import RuleFactory
    from lexcheck.tokens import TokenStream

pytestmark = [pytest.mark.unit, pytest.mark.rules]

BUILTIN_NAMES = ["blank-lines", "line-length", "tab-indentation", "trailing-whitespace"]


class ShoutOptions(RuleOptions):
    threshold: int = Field(default=3, ge=1)


class ShoutRule(BaseRule):
    name = "shout"
    summary = "Example registered rule."
    options_model = ShoutOptions

    def check(self, stream: TokenStream, sink: DiagnosticSink) -> None:
        _ = stream, sink


class NeedsLimitOptions(RuleOptions):
    limit: int


class NeedsLimitRule(BaseRule):
    name = "needs-limit"
    severity = SeverityLevel.WARNING
    options_model = NeedsLimitOptions

    def check(self, stream: TokenStream, sink: DiagnosticSink) -> None:
        _ = stream, sink


class NotARule:
    name = "not-a-rule"

    def __init__(self, options: RuleOptions, *, severity: SeverityLevel | None = None) -> None:
        _ = options, severity


@pytest.fixture(autouse=True)
def restore_registry() -> Generator[None, None, None]:
    yield
    for name in ("shout", "not-a-rule", "anonymous", "needs-limit", "needs-limit-factory"):
        unregister_rule(name)
    for rule_cls in BUILTIN_RULES:
        _ = register_rule(rule_cls, replace=True, origin="builtin")


def test_builtin_rules_are_registered_by_name() -> None:
    assert list(rule_specs()) == BUILTIN_NAMES
    assert all(spec.origin == "builtin" for spec in rule_specs().values())


def test_resolve_without_names_returns_every_rule_sorted() -> None:
    rules = resolve_rules()

    assert [rule.name for rule in rules] == BUILTIN_NAMES


def test_resolve_keeps_requested_order_and_drops_duplicates() -> None:
    rules = resolve_rules(["tab-indentation", "line-length", "tab-indentation"])

    assert [rule.name for rule in rules] == ["tab-indentation", "line-length"]


def test_unknown_rule_is_a_configuration_error() -> None:
    with pytest.raises(UnknownRuleError) as excinfo:
        _ = resolve_rules(["no-such-rule"])

    assert isinstance(excinfo.value, ConfigurationError)
    assert "no-such-rule" in str(excinfo.value)


def test_options_for_unknown_rule_are_rejected() -> None:
    with pytest.raises(UnknownRuleError):
        _ = resolve_rules([], {"line-lenght": {"max_length": 80}})


def test_options_are_validated_by_rule_model() -> None:
    rule = build_rule("line-length", {"max_length": 120})

    assert isinstance(rule, LineLengthRule)
    assert rule.max_length == 120


@pytest.mark.parametrize(
    "options",
    [
        {"max_length": 0},
        {"max_length": "wide"},
        {"unexpected": True},
        {"severity": "fatal"},
    ],
)
def test_invalid_options_raise(options: dict[str, object]) -> None:
    with pytest.raises(InvalidRuleOptionsError) as excinfo:
        _ = build_rule("line-length", options)

    assert excinfo.value.name == "line-length"


def test_severity_option_overrides_default() -> None:
    rule = build_rule("line-length", {"severity": "error"})

    assert rule.severity is SeverityLevel.ERROR
    assert build_rule("line-length").severity is SeverityLevel.WARNING


def test_register_rule_adds_custom_rule() -> None:
    spec = register_rule(ShoutRule)

    assert spec.name == "shout"
    assert spec.options_model is ShoutOptions
    assert [rule.name for rule in resolve_rules(["shout"], {"shout": {"threshold": 5}})] == ["shout"]
    assert "shout" in [descriptor.name for descriptor in describe_rules()]


def test_register_rule_rejects_duplicates_unless_replacing() -> None:
    with pytest.raises(DuplicateRuleError):
        _ = register_rule(LineLengthRule)

    spec = register_rule(LineLengthRule, replace=True)
    assert spec.origin == "registered"


def test_register_rule_requires_a_name() -> None:
    def factory(options: RuleOptions, *, severity: SeverityLevel | None = None) -> ShoutRule:
        return ShoutRule(options, severity=severity)

    with pytest.raises(RuleConfigurationError):
        _ = register_rule(factory)

    spec = register_rule(factory, name="anonymous", options_model=ShoutOptions)
    assert spec.name == "anonymous"


def test_register_rule_requires_a_callable() -> None:
    with pytest.raises(LexcheckTypeError, match="must be callable"):
        _ = register_rule(cast("RuleFactory", "shout"), name="shout-text")


def test_non_conforming_factory_fails_when_built() -> None:
    _ = register_rule(NotARule)

    with pytest.raises(RuleConfigurationError, match="valid rule instance"):
        _ = build_rule("not-a-rule")


def test_describe_rules_reports_metadata() -> None:
    descriptors = {descriptor.name: descriptor for descriptor in describe_rules()}
    tab = descriptors["tab-indentation"]

    assert tab.severity is SeverityLevel.ERROR
    assert tab.qualified_name == "TabIndentationRule"
    assert tab.module == "lexcheck.rules.builtin.whitespace"
    assert tab.summary


def test_describe_rules_does_not_build_rule_classes() -> None:
    _ = register_rule(NeedsLimitRule)

    descriptors = {descriptor.name: descriptor for descriptor in describe_rules()}

    assert descriptors["needs-limit"].severity is SeverityLevel.WARNING
    assert descriptors["needs-limit"].qualified_name == "NeedsLimitRule"
    with pytest.raises(InvalidRuleOptionsError):
        _ = build_rule("needs-limit")
    assert build_rule("needs-limit", {"limit": 2}).severity is SeverityLevel.WARNING


def test_describe_rules_builds_plain_factories() -> None:
    def make_shout(options: RuleOptions, *, severity: SeverityLevel | None = None) -> ShoutRule:
        return ShoutRule(options, severity=severity)

    def make_needs_limit(options: RuleOptions, *, severity: SeverityLevel | None = None) -> NeedsLimitRule:
        return NeedsLimitRule(options, severity=severity)

    _ = register_rule(make_shout, name="shout", options_model=ShoutOptions)
    descriptors = {descriptor.name: descriptor for descriptor in describe_rules()}
    assert descriptors["shout"].severity is SeverityLevel.ERROR
    assert descriptors["shout"].qualified_name.endswith("make_shout")

    _ = register_rule(make_needs_limit, name="needs-limit-factory", options_model=NeedsLimitOptions)
    with pytest.raises(InvalidRuleOptionsError, match="needs-limit-factory"):
        _ = describe_rules()
