# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""lexcheck - token-based static analysis for Python source files.

Files are optionally compiled by an external interpreter, tokenized once,
and handed to an ordered set of rules. Findings are collected per file into
a ``Result`` that the CLI renders as a summary or as JSON.
"""

from __future__ import annotations

from lexcheck._internal.exceptions import (
    ConfigurationError,
    LexcheckError,
    LexcheckTypeError,
    LexcheckValidationError,
)

from .config import Config, load_config
from .core.model_types import DiagnosticSource, FileStatus, SeverityLevel
from .core.types import Diagnostic
from .discovery import discover_files
from .engine import FileReport, analyze
from .result import DiagnosticSink, Result
from .rules import BaseRule, Rule, RuleOptions, describe_rules, register_rule, resolve_rules
from .syntax import PythonSyntaxChecker, SyntaxChecker
from .tokens import Token, TokenStream, tokenize_source

__all__ = [
    "__version__",
    "BaseRule",
    "Config",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticSink",
    "DiagnosticSource",
    "FileReport",
    "FileStatus",
    "LexcheckError",
    "LexcheckTypeError",
    "LexcheckValidationError",
    "PythonSyntaxChecker",
    "Result",
    "Rule",
    "RuleOptions",
    "SeverityLevel",
    "SyntaxChecker",
    "Token",
    "TokenStream",
    "analyze",
    "describe_rules",
    "discover_files",
    "load_config",
    "register_rule",
    "resolve_rules",
    "tokenize_source",
]

__version__ = "0.1.0"
