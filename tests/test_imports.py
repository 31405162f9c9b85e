"""Tests for Chronoline package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations

import logging


def test_import_chronoline() -> None:
    """Import chronoline package succeeds."""
    import chronoline

    assert hasattr(chronoline, "__version__")
    assert chronoline.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import chronoline.core submodule succeeds."""
    from chronoline import core

    assert hasattr(core, "__all__")


def test_import_format_module() -> None:
    """Import chronoline.format submodule succeeds."""
    from chronoline import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_arithmetic_module() -> None:
    """Import chronoline.arithmetic submodule succeeds."""
    from chronoline import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_collections_module() -> None:
    """Import chronoline.collections submodule succeeds."""
    from chronoline import collections

    assert collections.__all__ == ["Timeline"]


def test_import_comparison_module() -> None:
    """Import chronoline.comparison exports exactly the equality helpers."""
    from chronoline import comparison

    assert comparison.__all__ == ["Equality", "default_equals", "unique"]
    for name in comparison.__all__:
        assert hasattr(comparison, name)


def test_public_names_are_exported() -> None:
    """Every name listed in __all__ exists on the package."""
    import chronoline

    for name in chronoline.__all__:
        assert hasattr(chronoline, name), name


def test_errors_share_a_base_class() -> None:
    """All library errors derive from ChronolineError."""
    from chronoline import (
        ChronolineError,
        ImportConflictError,
        InvariantError,
        ParseError,
        RangeConflictError,
        ValidationError,
    )

    for error in (ValidationError, ParseError, InvariantError, RangeConflictError):
        assert issubclass(error, ChronolineError)
    assert issubclass(ImportConflictError, RangeConflictError)


def test_library_logger_has_null_handler() -> None:
    """The package logger never prints on its own."""
    import chronoline  # noqa: F401

    handlers = logging.getLogger("chronoline").handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
