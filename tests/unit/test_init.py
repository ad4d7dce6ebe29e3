r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import retryify


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(retryify.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in retryify.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in retryify.__all__:
        assert hasattr(retryify, name), f"{name} is in __all__ but not defined in module"


def test_retryify_is_factory_function() -> None:
    """Test that the package exports the factory function, not the module."""
    assert callable(retryify.retryify)
    assert isinstance(retryify.retryify(), retryify.Retryify)
