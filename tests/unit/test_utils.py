#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_utils.py
"""Unit tests for dependency checking, timing and exceptions."""

import logging

import pytest

from mdxview.exceptions import DependencyError, MdxViewError, ParsingError, RenderingError
from mdxview.utils.decorators import debug_timer, requires_dependencies
from mdxview.utils.packages import check_version_requirement, get_package_version
from mdxview.view import Empty, Fragment, Text, into_view


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the requires_dependencies decorator."""

    def test_available_dependency(self):
        """Test that the wrapped function runs when packages are present."""

        @requires_dependencies("test", [("packaging", "packaging", "")])
        def run():
            return "ran"

        assert run() == "ran"

    def test_missing_dependency(self):
        """Test that a missing package raises DependencyError."""

        @requires_dependencies("test", [("not-a-real-package", "not_a_real_module_xyz", ">=1.0")])
        def run():
            return "ran"

        with pytest.raises(DependencyError) as exc_info:
            run()

        err = exc_info.value
        assert err.missing_packages == [("not-a-real-package", ">=1.0")]
        assert err.stage_name == "test"
        assert str(err).startswith("test requires the following packages")
        assert "not-a-real-package" in str(err)
        assert isinstance(err, MdxViewError)

    def test_version_mismatch(self):
        """Test that an unsatisfied version requirement raises DependencyError."""

        @requires_dependencies("test", [("packaging", "packaging", ">=9999.0")])
        def run():
            return "ran"

        with pytest.raises(DependencyError) as exc_info:
            run()

        assert exc_info.value.version_mismatches[0][0] == "packaging"


@pytest.mark.unit
class TestPackages:
    """Tests for package version helpers."""

    def test_installed_version(self):
        """Test reading the version of an installed package."""
        assert get_package_version("packaging")

    def test_missing_package(self):
        """Test that missing packages report no version."""
        assert get_package_version("not-a-real-package") is None

    def test_requirement_met(self):
        """Test a satisfied requirement."""
        ok, version = check_version_requirement("packaging", ">=1.0")

        assert ok is True
        assert version


@pytest.mark.unit
class TestDebugTimer:
    """Tests for debug_timer."""

    def test_logs_at_debug(self, caplog):
        """Test that elapsed time is logged when DEBUG is enabled."""
        logger = logging.getLogger("mdxview.tests")

        with caplog.at_level(logging.DEBUG, logger="mdxview.tests"):
            with debug_timer(logger, "Sample"):
                pass

        assert "Sample completed in" in caplog.text

    def test_silent_above_debug(self, caplog):
        """Test that nothing is logged when DEBUG is disabled."""
        logger = logging.getLogger("mdxview.tests.quiet")

        with caplog.at_level(logging.INFO, logger="mdxview.tests.quiet"):
            with debug_timer(logger, "Sample"):
                pass

        assert "Sample" not in caplog.text


@pytest.mark.unit
class TestExceptions:
    """Tests for exception attributes."""

    def test_parsing_error(self):
        """Test ParsingError fields."""
        cause = ValueError("bad")
        err = ParsingError("failed", parsing_stage="html", original_error=cause)

        assert err.message == "failed"
        assert err.parsing_stage == "html"
        assert err.original_error is cause
        assert str(err) == "failed"


@pytest.mark.unit
class TestIntoView:
    """Tests for into_view."""

    def test_nested_sequences(self):
        """Test that nested lists become nested fragments."""
        assert into_view(["a", ["b"]]) == Fragment([Text("a"), Fragment([Text("b")])])

    def test_none(self):
        """Test that None renders nothing."""
        assert into_view(None) == Empty()

    def test_unsupported(self):
        """Test that other values are rejected."""
        with pytest.raises(RenderingError) as exc_info:
            into_view(3.5)

        assert exc_info.value.rendering_stage == "component"
        assert "float" in str(exc_info.value)
