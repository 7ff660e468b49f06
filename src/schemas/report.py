"""Reports describing the outcome of a pagination run."""

from typing import Literal

from pydantic import BaseModel


class PaginationReport(BaseModel):
    """Outcome of paginating a single document.

    Attributes:
        source_path: Path of the document relative to the source directory
        status: "paginated" when every page was written, "partial" when
            pagination stopped early, "skipped" for documents without a
            pagination container, "failed" when nothing could be written
        item_count: Number of items found in the container
        per_page: Number of items on each page
        page_count: Number of pages the items were split into
        pages: Written page paths, relative to the output directory
        errors: Messages for any errors encountered
    """

    source_path: str
    status: Literal["paginated", "partial", "skipped", "failed"] = "skipped"
    item_count: int = 0
    per_page: int | None = None
    page_count: int = 0
    pages: list[str] = []
    errors: list[str] = []

    @property
    def wrote_pages(self) -> bool:
        return bool(self.pages)


class BatchReport(BaseModel):
    """Outcome of paginating a directory of documents.

    Attributes:
        source: Absolute path of the source directory
        output: Absolute path of the output directory
        files: Reports for every document that opted into pagination
        copied: Number of files copied through unchanged
    """

    source: str
    output: str
    files: list[PaginationReport] = []
    copied: int = 0

    @property
    def failed(self) -> list[PaginationReport]:
        return [f for f in self.files if f.status == "failed"]

    @property
    def page_count(self) -> int:
        return sum(len(f.pages) for f in self.files)
