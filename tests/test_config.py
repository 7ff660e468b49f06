"""Tests for the pagination configuration schema."""

import pytest
from pydantic import ValidationError

from schemas import PaginationConfig


class TestPaginationConfig:
    """Tests for PaginationConfig."""

    def test_defaults(self):
        """Missing attributes fall back to the defaults."""
        config = PaginationConfig.model_validate({})

        assert config.per_page == 2
        assert config.url_format == "./page/:num/"
        assert config.meta_format == ":content | Page :num"

    def test_from_attributes(self):
        """Attribute values are read by their attribute names."""
        config = PaginationConfig.model_validate({
            "data-pagebreak": "3",
            "data-pagebreak-url": "./archive/:num/",
            "data-pagebreak-meta": ":content (page :num)",
        })

        assert config.per_page == 3
        assert config.url_format == "./archive/:num/"
        assert config.meta_format == ":content (page :num)"

    def test_by_field_name(self):
        """Fields can also be populated by name."""
        config = PaginationConfig(per_page=5)

        assert config.per_page == 5

    @pytest.mark.parametrize("value", ["0", "-1", "two", "", "1.5"])
    def test_invalid_per_page(self, value):
        """Zero, negative and non-numeric page sizes are rejected."""
        with pytest.raises(ValidationError):
            PaginationConfig.model_validate({"data-pagebreak": value})

    def test_url_format_requires_page_number(self):
        """A URL format without :num would put every page in one place."""
        with pytest.raises(ValidationError) as exc_info:
            PaginationConfig.model_validate({"data-pagebreak-url": "./page/"})

        assert ":num" in str(exc_info.value)

    def test_frozen(self):
        """Configuration is immutable once read."""
        config = PaginationConfig()

        with pytest.raises(ValidationError):
            config.per_page = 4
