r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import httptemplate


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(httptemplate.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in httptemplate.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in httptemplate.__all__:
        assert hasattr(httptemplate, name), f"{name} is in __all__ but not defined in module"


def test_exceptions_share_a_root() -> None:
    """Test that every exported exception derives from HttpTemplateError."""
    for name in (
        "ConfigurationError",
        "HttpRequestError",
        "HttpRequestFailedError",
        "RetryExhaustedError",
        "RetryableHttpError",
        "TransportError",
    ):
        assert issubclass(getattr(httptemplate, name), httptemplate.HttpTemplateError)
