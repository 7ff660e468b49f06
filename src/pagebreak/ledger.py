"""Undo log for mutations applied to a shared document tree.

A single parsed document is rendered once per output page. Every change made
for a page goes through a ``ChangeLedger``, which records the prior state of
the node before mutating it, so the tree can be returned to its hydrated
state before the next page is rendered.
"""

from dataclasses import dataclass, field

from lxml import html


@dataclass
class ContentChange:
    """Prior content of an element: its leading text and child elements.

    Attributes:
        node: The element whose content was replaced
        text: The element's original leading text
        children: The element's original children, detached while replaced
    """

    node: html.HtmlElement
    text: str | None
    children: list = field(default_factory=list)

    def revert(self) -> None:
        for child in list(self.node):
            self.node.remove(child)
        self.node.text = self.text
        # Children keep their tail text while detached
        self.node.extend(self.children)


@dataclass
class AttributeChange:
    """Prior value of a single attribute, or ``None`` if it was absent."""

    node: html.HtmlElement
    attribute: str
    value: str | None

    def revert(self) -> None:
        if self.value is None:
            self.node.attrib.pop(self.attribute, None)
        else:
            self.node.set(self.attribute, self.value)


Change = ContentChange | AttributeChange


class ChangeLedger:
    """Records reversible changes to a document tree.

    Example:
        ledger = ChangeLedger()
        ledger.set_text(title, "Blog | Page 2")
        ...  # serialize the page
        ledger.revert()  # title is "Blog" again
    """

    def __init__(self):
        self._changes: list[Change] = []

    def __len__(self) -> int:
        return len(self._changes)

    def set_text(self, node: html.HtmlElement, text: str) -> None:
        """Replace the whole content of an element with plain text."""
        children = list(node)
        self._changes.append(ContentChange(node, node.text, children))
        for child in children:
            node.remove(child)
        node.text = text

    def set_attribute(self, node: html.HtmlElement, attribute: str, value: str) -> None:
        """Set an attribute, recording its previous value (or absence)."""
        self._changes.append(AttributeChange(node, attribute, node.get(attribute)))
        node.set(attribute, value)

    def revert(self) -> None:
        """Undo every recorded change, newest first, and clear the ledger.

        Reverting newest first means a node changed twice in one page ends
        up with the value it had before the first change.
        """
        for change in reversed(self._changes):
            change.revert()
        self._changes.clear()
