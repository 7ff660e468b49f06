"""Document builders shared by the test modules."""

from lxml import html


def template_page(body: str, head: str = "") -> str:
    """Wrap body content in a minimal HTML document."""
    return f"""<!DOCTYPE html>
<html>
    <head>
        {head}
    </head>
    <body>
        {body}
    </body>
</html>
"""


def numbered_items(count: int) -> str:
    """Container children ``<p>1</p>`` to ``<p>count</p>``, one per line."""
    return "".join(f"\n    <p>{n}</p>" for n in range(1, count + 1)) + "\n"


def page_items(content: str, container_id: str = "list") -> list[str]:
    """Text of the pagination container's children in a written page."""
    document = html.document_fromstring(content)
    container = document.get_element_by_id(container_id)
    return [child.text_content() for child in container]


def find(content: str, element_id: str):
    """Element with the given id in a written page, or None."""
    document = html.document_fromstring(content)
    matches = document.xpath(f"//*[@id='{element_id}']")
    return matches[0] if matches else None
