"""Pagination state for a single document.

``PaginationState`` splits the children of a document's pagination container
across a series of pages. The same parsed tree is reused for every page: each
page is populated, rewritten, serialized and then restored through a
``ChangeLedger`` before the next one is rendered.
"""

import logging
import re
from collections import deque
from pathlib import Path, PurePath, PurePosixPath

from lxml import etree, html
from lxml.cssselect import CSSSelector
from pydantic import ValidationError

from pagebreak.controls import CONTROL_ATTRIBUTE, LABEL_ATTRIBUTE, ControlElement, ControlKind
from pagebreak.exceptions import ConfigurationError, OutOfBoundsError
from pagebreak.formats import Placeholder, resolve_format
from pagebreak.ledger import ChangeLedger
from pagebreak.paths import ceil_division, relative_link, resolve_output_path
from schemas.config import (
    META_FORMAT_ATTRIBUTE,
    PER_PAGE_ATTRIBUTE,
    URL_FORMAT_ATTRIBUTE,
    PaginationConfig,
)

logger = logging.getLogger(__name__)

CONTAINER_SELECTOR = CSSSelector(f"[{PER_PAGE_ATTRIBUTE}]", translator="html")
CONTROL_SELECTOR = CSSSelector(
    f"[{CONTROL_ATTRIBUTE}], [{LABEL_ATTRIBUTE}]", translator="html"
)

TITLE_SELECTOR = CSSSelector("title", translator="html")
SOCIAL_TITLE_SELECTOR = CSSSelector(
    '[property="og:title"], [property="twitter:title"], [name="twitter:title"]',
    translator="html",
)
LINK_SELECTOR = CSSSelector("[href]", translator="html")
CANONICAL_SELECTOR = CSSSelector('[rel="canonical"]', translator="html")
SOCIAL_URL_SELECTOR = CSSSelector(
    '[property="og:url"], [property="twitter:url"], [name="twitter:url"]',
    translator="html",
)

RELATIVE_LINK_FORMAT = f"{Placeholder.REL_FROM.value}{Placeholder.CONTENT.value}"
PAGE_URL_FORMAT = f"{Placeholder.CONTENT.value}{Placeholder.REL_TO.value}"

DEFAULT_INDENTATION = "\n"

SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


def is_relative_url(url: str) -> bool:
    """Whether a URL is relative to the document it appears in.

    Examples:
        >>> is_relative_url("style.css")
        True
        >>> is_relative_url("/style.css")
        False
        >>> is_relative_url("mailto:someone@example.com")
        False
    """
    if not url or url.startswith(("/", "#")):
        return False
    return not SCHEME_PATTERN.match(url)


class PaginationState:
    """Splits one document's pagination container into pages.

    Call ``hydrate`` once to read the container's configuration and index its
    items and the document's controls, then ``paginate`` to write every page.

    Example:
        document = html.document_fromstring(source)
        state = PaginationState(document, Path("blog/index.html"), Path("./_site"))
        state.hydrate()
        written = state.paginate()

    Attributes:
        document: Root element of the parsed document
        file_path: Path of the document relative to the site root
        output_path: Directory pages are written into
        config: Pagination settings read from the container
        container: The pagination container, or None if the document has none
        items: Items not yet placed on a page
        item_count: Number of items found at hydration
        page_count: Number of pages the items are split into
        dom_indentation: Text placed between items, copied from the container
        controls: Controls and labels found in the document
        ledger: Changes made for the page being rendered
        error: The error that stopped pagination early, if any
    """

    def __init__(self, document: html.HtmlElement, file_path: PurePath, output_path: Path):
        self.document = document
        self.file_path = PurePosixPath(PurePath(file_path).as_posix())
        self.output_path = output_path
        self.config = PaginationConfig()
        self.container: html.HtmlElement | None = None
        self.items: deque[html.HtmlElement] = deque()
        self.item_count = 0
        self.page_count = 0
        self.dom_indentation = DEFAULT_INDENTATION
        self.controls: list[ControlElement] = []
        self.ledger = ChangeLedger()
        self.error: OutOfBoundsError | None = None

    @property
    def has_container(self) -> bool:
        return self.container is not None

    def hydrate(self) -> None:
        """Find the pagination container and index everything pagination touches.

        Raises:
            ConfigurationError: If the container's attributes are invalid
        """
        self.container = self._find_container()
        if self.container is None:
            return

        self.config = self._read_config()
        self._find_items()
        self._find_controls()
        self.page_count = ceil_division(self.item_count, self.config.per_page)

    def log_hydrated(self) -> None:
        logger.info(
            f"Found {self.item_count} items on {self.file_path}; "
            f"Building {self.page_count} pages of size {self.config.per_page}"
        )

    def paginate(self) -> list[PurePosixPath]:
        """Render and write every page of the document.

        Stops at the first page whose path falls outside of the output
        directory; pages written before that point are kept.

        Returns:
            Paths of the written pages, relative to the output directory
        """
        written: list[PurePosixPath] = []
        if self.container is None:
            return written

        for page_index in range(self.page_count):
            try:
                page_path = self.resolve_output_path(page_index)
                content = self.render_page(page_index)
            except OutOfBoundsError as e:
                logger.warning(f"{e}; Skipping remaining pages of {self.file_path}")
                self.error = e
                break

            self._write_page(page_path, content)
            written.append(page_path)

        return written

    def render_page(self, page_index: int) -> str:
        """Render one page and return its serialized HTML.

        Places the next ``per_page`` items into the container, rewrites
        metadata and controls for the page, serializes the document, and
        restores the controls and every ledgered change. Items placed on the
        page are consumed.
        """
        self._detach_children()
        self._populate()
        try:
            if page_index > 0:
                self._rewrite_metadata(page_index)
            self._update_controls(page_index)
            return self.serialize()
        finally:
            self.ledger.revert()
            self._reattach_controls()

    def serialize(self) -> str:
        """Serialize the document in its current state, doctype included."""
        return etree.tostring(
            self.document.getroottree(), method="html", encoding="unicode"
        )

    def resolve_output_path(self, page_index: int) -> PurePosixPath:
        return resolve_output_path(self.file_path, self.config.url_format, page_index)

    def relative_link(self, from_index: int, to_index: int) -> str:
        return relative_link(self.file_path, self.config.url_format, from_index, to_index)

    def _find_container(self) -> html.HtmlElement | None:
        containers = CONTAINER_SELECTOR(self.document)
        return containers[0] if containers else None

    def _read_config(self) -> PaginationConfig:
        attributes = {}
        for name in (META_FORMAT_ATTRIBUTE, PER_PAGE_ATTRIBUTE, URL_FORMAT_ATTRIBUTE):
            value = self.container.attrib.pop(name, None)
            if value is not None:
                attributes[name] = value

        try:
            return PaginationConfig.model_validate(attributes)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid pagination settings on {self.file_path}: {attributes}",
                errors=e.errors(),
            ) from e

    def _find_items(self) -> None:
        if self.container.text is not None:
            self.dom_indentation = self.container.text
        # Comments and processing instructions have non-string tags
        self.items = deque(child for child in self.container if isinstance(child.tag, str))
        self.item_count = len(self.items)

    def _find_controls(self) -> None:
        self.controls = [
            ControlElement.from_element(element) for element in CONTROL_SELECTOR(self.document)
        ]

    def _detach_children(self) -> None:
        self.container.text = None
        for child in list(self.container):
            self.container.remove(child)

    def _populate(self) -> None:
        self.container.text = self.dom_indentation
        for _ in range(min(self.config.per_page, len(self.items))):
            item = self.items.popleft()
            self.container.append(item)
            item.tail = self.dom_indentation

    def _rewrite_metadata(self, page_index: int) -> None:
        meta_format = self.config.meta_format

        for element in TITLE_SELECTOR(self.document):
            content = self._format(meta_format, page_index, element.text_content())
            self.ledger.set_text(element, content)

        self._rewrite_attribute(SOCIAL_TITLE_SELECTOR, "content", meta_format, page_index)
        self._rewrite_attribute(
            LINK_SELECTOR, "href", RELATIVE_LINK_FORMAT, page_index, only_relative=True
        )
        self._rewrite_attribute(CANONICAL_SELECTOR, "href", PAGE_URL_FORMAT, page_index)
        self._rewrite_attribute(SOCIAL_URL_SELECTOR, "content", PAGE_URL_FORMAT, page_index)

    def _rewrite_attribute(
        self,
        selector: CSSSelector,
        attribute: str,
        template: str,
        page_index: int,
        only_relative: bool = False,
    ) -> None:
        for element in selector(self.document):
            value = element.get(attribute)
            if value is None:
                continue
            if only_relative and not is_relative_url(value):
                continue
            self.ledger.set_attribute(
                element, attribute, self._format(template, page_index, value)
            )

    def _format(self, template: str, page_index: int, content: str) -> str:
        values = {
            Placeholder.NUM: str(page_index + 1),
            Placeholder.CONTENT: content,
        }
        if Placeholder.REL_FROM.value in template:
            values[Placeholder.REL_FROM] = self.relative_link(page_index, 0)
        if Placeholder.REL_TO.value in template:
            values[Placeholder.REL_TO] = self.relative_link(0, page_index)
        return resolve_format(template, values)

    def _update_controls(self, page_index: int) -> None:
        # Detach before relabelling; a label may contain controls
        if page_index == 0:
            self._detach_controls(ControlKind.PREVIOUS)
        else:
            self._set_control_href(
                ControlKind.PREVIOUS, self.relative_link(page_index, page_index - 1)
            )
            self._detach_controls(ControlKind.NO_PREVIOUS)

        if page_index == self.page_count - 1:
            self._detach_controls(ControlKind.NEXT)
        else:
            self._set_control_href(
                ControlKind.NEXT, self.relative_link(page_index, page_index + 1)
            )
            self._detach_controls(ControlKind.NO_NEXT)

        self._set_control_text(ControlKind.CURRENT, str(page_index + 1))
        self._set_control_text(ControlKind.TOTAL, str(self.page_count))

    def _controls_of(self, kind: ControlKind) -> list[ControlElement]:
        return [control for control in self.controls if control.kind is kind]

    def _set_control_text(self, kind: ControlKind, text: str) -> None:
        for control in self._controls_of(kind):
            self.ledger.set_text(control.element, text)

    def _set_control_href(self, kind: ControlKind, href: str) -> None:
        for control in self._controls_of(kind):
            self.ledger.set_attribute(control.element, "href", href)

    def _detach_controls(self, kind: ControlKind) -> None:
        for control in self._controls_of(kind):
            control.detach()

    def _reattach_controls(self) -> None:
        # Document order, so a control's previous sibling is back before it
        for control in self.controls:
            control.reattach()

    def _write_page(self, page_path: PurePosixPath, content: str) -> None:
        output_file = self.output_path / page_path
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote page {output_file}")
