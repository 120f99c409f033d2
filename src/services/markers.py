"""Structural markers of the dictionary markup.

The upstream HTML carries CSS classes that are the only reliable structural
signal. MARKERS maps every marker name to a node predicate; the extractor and
the reference classifier never match class names directly, so a markup change
is an edit to this table only.
"""

from typing import Callable, Iterator

from bs4 import BeautifulSoup, Tag

NodePredicate = Callable[[Tag], bool]


def _has_class(css_class: str, tag_name: str | None = None) -> NodePredicate:
    """Predicate matching elements carrying ``css_class`` (and tag name, if given)."""

    def predicate(node: Tag) -> bool:
        if tag_name is not None and node.name != tag_name:
            return False
        return css_class in (node.get("class") or ())

    return predicate


def _is_tag(tag_name: str) -> NodePredicate:
    """Predicate matching any element named ``tag_name``."""
    return lambda node: node.name == tag_name


MARKERS: dict[str, NodePredicate] = {
    "primary-entry-block": _has_class("Subentry"),
    "entry-headword": _has_class("Entry__Word_form", "h2"),
    "part-of-speech": _has_class("Subentry__Part_of_speech"),
    "sense": _has_class("Sense"),
    "sense-number": _has_class("Sense__SenseNumber"),
    "definition-block": _has_class("Definition"),
    "definition-text": _has_class("Definition__Definition"),
    "example-block": _has_class("Example"),
    "example-text": _has_class("Example__Example"),
    "expression-block": _has_class("Fraseoloxia"),
    "expression-text": _has_class("Fraseoloxia__Texto"),
    "sub-entry-container": _has_class("Subentry"),
    "references-block": _has_class("References"),
    "reference-type": _has_class("Reference__Reference_type"),
    "reference-word-link": _has_class("Reference", "a"),
    "link": _is_tag("a"),
}


def is_marker(node, marker: str) -> bool:
    """True if ``node`` is an element tagged with ``marker``."""
    return isinstance(node, Tag) and MARKERS[marker](node)


# ── Tree walking ─────────────────────────────────────────────


def descendants(node: Tag | BeautifulSoup | None, marker: str) -> Iterator[Tag]:
    """Every descendant element tagged with ``marker``, in document order."""
    if node is None:
        return
    for child in node.descendants:
        if is_marker(child, marker):
            yield child


def children(node: Tag | None, marker: str) -> Iterator[Tag]:
    """Direct child elements tagged with ``marker``, in document order."""
    if node is None:
        return
    for child in node.children:
        if is_marker(child, marker):
            yield child


def siblings(node: Tag, marker: str) -> Iterator[Tag]:
    """Sibling elements (before and after ``node``) tagged with ``marker``."""
    parent = node.parent
    if parent is None:
        return
    for sibling in parent.children:
        if sibling is not node and is_marker(sibling, marker):
            yield sibling


def first(node: Tag | BeautifulSoup | None, marker: str) -> Tag | None:
    """First descendant tagged with ``marker``, or None."""
    return next(descendants(node, marker), None)


def text_of(node: Tag | None) -> str:
    """Trimmed text content of ``node``; empty string when absent."""
    if node is None:
        return ""
    return node.get_text().strip()
