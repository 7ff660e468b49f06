"""Paginate a single source document."""

import logging
from dataclasses import dataclass
from pathlib import Path

from lxml import html

from pagebreak.exceptions import ConfigurationError
from pagebreak.state import PaginationState
from schemas.config import PER_PAGE_ATTRIBUTE
from schemas.report import PaginationReport

logger = logging.getLogger(__name__)


@dataclass
class SourcePage:
    """An HTML file in the source directory.

    Attributes:
        path: Absolute path of the file
        content: Raw bytes of the file, once read
        source: Contents decoded as UTF-8, once read
    """

    path: Path
    content: bytes | None = None
    source: str | None = None

    def read(self) -> "SourcePage":
        self.content = self.path.read_bytes()
        self.source = self.content.decode("utf-8")
        return self

    def contains_pagination(self) -> bool:
        """Cheap check for the pagination marker before parsing."""
        return self.source is not None and PER_PAGE_ATTRIBUTE in self.source

    def parse(self) -> html.HtmlElement:
        # lxml rejects str input that carries an XML encoding declaration
        parser = html.HTMLParser(encoding="utf-8")
        return html.document_fromstring(self.content, parser=parser)


class PageRunner:
    """Parses, hydrates and paginates one document at a time.

    Each call to ``run`` builds its own ``PaginationState``, so a runner can
    be shared between worker threads.

    Attributes:
        source_root: Directory the source documents live in
        output_root: Directory pages are written into
    """

    def __init__(self, source_root: Path, output_root: Path):
        self.source_root = source_root
        self.output_root = output_root

    def run(self, page: SourcePage) -> PaginationReport:
        """Paginate a source document into the output directory.

        Args:
            page: The source document, already read

        Returns:
            PaginationReport describing the pages written
        """
        relative_path = page.path.relative_to(self.source_root)
        report = PaginationReport(source_path=relative_path.as_posix())

        state = PaginationState(page.parse(), relative_path, self.output_root)
        try:
            state.hydrate()
        except ConfigurationError as e:
            logger.error(f"Pagebreak: {e.message}")
            report.status = "failed"
            report.errors.append(e.message)
            return report

        if not state.has_container:
            logger.debug(f"No pagination container in {relative_path}")
            return report

        state.log_hydrated()
        report.item_count = state.item_count
        report.per_page = state.config.per_page
        report.page_count = state.page_count

        written = state.paginate()
        report.pages = [path.as_posix() for path in written]

        if state.error is not None:
            report.errors.append(state.error.message)
            report.status = "partial" if written else "failed"
        elif state.page_count == 0:
            report.status = "skipped"
        else:
            report.status = "paginated"

        return report
