"""Navigation controls and page-number labels.

Controls are elements marked with ``data-pagebreak-control`` (``next``,
``prev``, ``!next``, ``!prev``) or ``data-pagebreak-label`` (``current``,
``total``). They are classified once when the document is hydrated; the
marker attribute is removed so it never reaches the output.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from lxml import html

from pagebreak.exceptions import InvariantError

logger = logging.getLogger(__name__)

CONTROL_ATTRIBUTE = "data-pagebreak-control"
LABEL_ATTRIBUTE = "data-pagebreak-label"


class ControlKind(Enum):
    """What a control element does on each page."""

    NEXT = "next"
    PREVIOUS = "prev"
    NO_NEXT = "!next"
    NO_PREVIOUS = "!prev"
    CURRENT = "current"
    TOTAL = "total"
    NONE = "none"


CLASSIFICATIONS = {
    (CONTROL_ATTRIBUTE, "next"): ControlKind.NEXT,
    (CONTROL_ATTRIBUTE, "prev"): ControlKind.PREVIOUS,
    (CONTROL_ATTRIBUTE, "!next"): ControlKind.NO_NEXT,
    (CONTROL_ATTRIBUTE, "!prev"): ControlKind.NO_PREVIOUS,
    (LABEL_ATTRIBUTE, "current"): ControlKind.CURRENT,
    (LABEL_ATTRIBUTE, "total"): ControlKind.TOTAL,
}


def classify(element: html.HtmlElement) -> ControlKind:
    """Classify a control element and strip its marker attribute.

    Controls take precedence over labels when an element carries both.
    Unrecognised values classify as ``ControlKind.NONE``.
    """
    if element.get(CONTROL_ATTRIBUTE) is not None:
        attribute = CONTROL_ATTRIBUTE
    else:
        attribute = LABEL_ATTRIBUTE

    value = element.attrib.pop(attribute)
    kind = CLASSIFICATIONS.get((attribute, value), ControlKind.NONE)
    if kind is ControlKind.NONE:
        logger.debug(f"Unrecognised {attribute} value {value!r}; leaving element in place")
    return kind


@dataclass
class ControlElement:
    """A classified control, with the position it was found at.

    Attributes:
        element: The control element itself
        kind: Classification of the control
        parent: Parent element at hydration time
        previous_sibling: Preceding sibling at hydration time, if any
        detached: Whether the element is currently out of the tree
    """

    element: html.HtmlElement
    kind: ControlKind
    parent: html.HtmlElement | None
    previous_sibling: html.HtmlElement | None
    detached: bool = False

    @classmethod
    def from_element(cls, element: html.HtmlElement) -> "ControlElement":
        """Classify an element and remember where it sits in the tree."""
        kind = classify(element)
        return cls(
            element=element,
            kind=kind,
            parent=element.getparent(),
            previous_sibling=element.getprevious(),
        )

    def detach(self) -> None:
        """Take the element (and its tail text) out of the tree."""
        if self.detached:
            return
        parent = self.element.getparent()
        if parent is None:
            raise InvariantError(
                f"Control <{self.element.tag}> has no parent to detach from"
            )
        parent.remove(self.element)
        self.detached = True

    def reattach(self) -> None:
        """Put a detached element back at its original position."""
        if not self.detached:
            return
        if self.previous_sibling is not None:
            self.previous_sibling.addnext(self.element)
        elif self.parent is not None:
            self.parent.insert(0, self.element)
        else:
            raise InvariantError(
                f"Control <{self.element.tag}> has no position to return to"
            )
        self.detached = False
