"""Tests for pagination exception classes."""

from pagebreak.exceptions import (
    ConfigurationError,
    InvariantError,
    OutOfBoundsError,
    PagebreakError,
    SourceNotFoundError,
)


class TestPagebreakError:
    """Tests for the base PagebreakError exception."""

    def test_instantiation_with_message(self):
        """PagebreakError stores the error message."""
        error = PagebreakError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_inheritance(self):
        """PagebreakError is an Exception."""
        assert isinstance(PagebreakError("test"), Exception)


class TestConfigurationError:
    """Tests for ConfigurationError exception."""

    def test_stores_validation_errors(self):
        """ConfigurationError keeps the underlying validation errors."""
        errors = [{"loc": ("data-pagebreak",), "msg": "Input should be greater than 0"}]
        error = ConfigurationError("Invalid pagination settings", errors=errors)

        assert error.message == "Invalid pagination settings"
        assert error.errors == errors

    def test_errors_default_to_empty(self):
        """ConfigurationError without details has no errors."""
        error = ConfigurationError("Invalid")

        assert error.errors == []
        assert isinstance(error, PagebreakError)


class TestOutOfBoundsError:
    """Tests for OutOfBoundsError exception."""

    def test_message(self):
        """OutOfBoundsError names the document and the resolved path."""
        error = OutOfBoundsError("blog/index.html", "../page/2/index.html")

        assert error.relative_path == "blog/index.html"
        assert error.resolved_path == "../page/2/index.html"
        assert error.message == (
            "Error on page blog/index.html: Pagination URL resolves outside "
            "of output directory: ../page/2/index.html"
        )
        assert isinstance(error, PagebreakError)


class TestInvariantError:
    """Tests for InvariantError exception."""

    def test_inheritance(self):
        """InvariantError inherits from PagebreakError."""
        error = InvariantError("Control has no parent")

        assert error.message == "Control has no parent"
        assert isinstance(error, PagebreakError)


class TestSourceNotFoundError:
    """Tests for SourceNotFoundError exception."""

    def test_message(self):
        """SourceNotFoundError names the missing directory."""
        error = SourceNotFoundError("/srv/site")

        assert error.path == "/srv/site"
        assert str(error) == "Couldn't find source directory: /srv/site"
