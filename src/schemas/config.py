"""Pagination container configuration.

A pagination container declares its settings as attributes:

    <div data-pagebreak="3"
         data-pagebreak-url="./page/:num/"
         data-pagebreak-meta=":content | Page :num">
"""

from pydantic import BaseModel, Field, field_validator

from pagebreak.formats import DEFAULT_META_FORMAT, DEFAULT_URL_FORMAT, Placeholder

PER_PAGE_ATTRIBUTE = "data-pagebreak"
URL_FORMAT_ATTRIBUTE = "data-pagebreak-url"
META_FORMAT_ATTRIBUTE = "data-pagebreak-meta"


class PaginationConfig(BaseModel):
    """Settings read from a pagination container's attributes.

    Validates from a mapping of attribute names (``data-pagebreak`` and
    friends); missing attributes fall back to the defaults.

    Attributes:
        per_page: Number of items on each page
        url_format: Location of later pages relative to the document,
            containing ``:num``
        meta_format: Template applied to titles and social tags on later pages
    """

    per_page: int = Field(default=2, gt=0, alias=PER_PAGE_ATTRIBUTE)
    url_format: str = Field(default=DEFAULT_URL_FORMAT, alias=URL_FORMAT_ATTRIBUTE)
    meta_format: str = Field(default=DEFAULT_META_FORMAT, alias=META_FORMAT_ATTRIBUTE)

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("url_format")
    @classmethod
    def url_format_has_page_number(cls, value: str) -> str:
        if Placeholder.NUM.value not in value:
            raise ValueError(f"URL format must contain {Placeholder.NUM.value}")
        return value
