"""Placeholder substitution for URL and metadata templates.

Templates recognise a fixed set of placeholders:

- ``:num``: the 1-based page number
- ``:content``: the value being rewritten (a title, a URL, ...)
- ``:rel-from``: relative link from the current page back to the first page
- ``:rel-to``: relative link from the first page to the current page

All placeholders are substituted in one pass, so text inserted for one
placeholder is never scanned for another.
"""

import re
from enum import Enum

DEFAULT_URL_FORMAT = "./page/:num/"
DEFAULT_META_FORMAT = ":content | Page :num"


class Placeholder(str, Enum):
    """Placeholder tokens understood by ``resolve_format``."""

    NUM = ":num"
    CONTENT = ":content"
    REL_FROM = ":rel-from"
    REL_TO = ":rel-to"


PLACEHOLDER_PATTERN = re.compile("|".join(re.escape(p.value) for p in Placeholder))


def resolve_format(template: str, values: dict[Placeholder, str]) -> str:
    """Substitute placeholders in a template.

    Placeholders without a value in ``values`` are left as written.

    Args:
        template: Template string, e.g. ":content | Page :num"
        values: Replacement text keyed by placeholder

    Returns:
        The template with every known placeholder replaced

    Examples:
        >>> resolve_format(":content | Page :num", {Placeholder.NUM: "2", Placeholder.CONTENT: "Blog"})
        'Blog | Page 2'
    """

    def substitute(match: re.Match) -> str:
        return values.get(Placeholder(match.group(0)), match.group(0))

    return PLACEHOLDER_PATTERN.sub(substitute, template)
