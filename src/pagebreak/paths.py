"""Output path resolution for paginated documents.

All functions here are pure: paths are treated lexically and the filesystem
is never consulted.
"""

import posixpath
from pathlib import PurePath, PurePosixPath

from pagebreak.exceptions import OutOfBoundsError
from pagebreak.formats import Placeholder, resolve_format

INDEX_STEM = "index"
INDEX_FILENAME = "index.html"


def ceil_division(count: int, per_page: int) -> int:
    """Number of pages needed to hold ``count`` items, ``per_page`` at a time."""
    if per_page <= 0:
        raise ValueError(f"per_page must be a positive integer, got {per_page}")
    return (count + per_page - 1) // per_page


def resolve_output_path(
    original: PurePath | str,
    url_format: str,
    page_index: int,
) -> PurePosixPath:
    """Resolve where a page of a document is written.

    The first page keeps the document's own path. Later pages are placed by
    ``url_format`` relative to the document's directory; documents that are
    not index documents get their own directory first, so ``about.html``
    paginates to ``about/page/2/index.html``.

    Args:
        original: Path of the source document, relative to the site root
        url_format: URL template containing ``:num``
        page_index: 0-based index of the page

    Returns:
        Normalized path of the page, relative to the output root

    Raises:
        OutOfBoundsError: If the resolved path escapes the output root
    """
    original = PurePosixPath(PurePath(original).as_posix())
    if page_index == 0:
        return original

    page_url = resolve_format(url_format, {Placeholder.NUM: str(page_index + 1)})

    if page_url.startswith("/"):
        # Rooted formats are relative to the output root
        page_path = PurePosixPath(page_url.lstrip("/")) / INDEX_FILENAME
    elif original.stem == INDEX_STEM:
        page_path = original.parent / page_url / original.name
    else:
        page_path = original.parent / original.stem / page_url / INDEX_FILENAME

    cleaned = PurePosixPath(posixpath.normpath(str(page_path)))
    if cleaned.parts[0] == "..":
        raise OutOfBoundsError(str(original), str(cleaned))
    return cleaned


def relative_link(
    original: PurePath | str,
    url_format: str,
    from_index: int,
    to_index: int,
) -> str:
    """Relative URL from one page of a document to another.

    The link always ends in a slash so it can be prefixed onto other
    relative URLs, e.g. ``page/2/`` or ``../../``. Two pages in the same
    directory link with ``./``.

    Raises:
        OutOfBoundsError: If either page resolves outside of the output root
    """
    from_dir = resolve_output_path(original, url_format, from_index).parent
    to_dir = resolve_output_path(original, url_format, to_index).parent

    from_parts = from_dir.parts
    to_parts = to_dir.parts
    common = 0
    while (
        common < len(from_parts)
        and common < len(to_parts)
        and from_parts[common] == to_parts[common]
    ):
        common += 1

    parts = [".."] * (len(from_parts) - common) + list(to_parts[common:])
    if not parts:
        return "./"
    return "/".join(parts) + "/"
