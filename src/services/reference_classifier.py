"""Cross-reference classification.

A references block reads like ``SINÓNIMOS: <a>edificio</a>, <a>construción</a>``.
The label text in front of the links decides the reference kind; the links
are the referenced words.
"""

import unicodedata

from bs4 import Comment, NavigableString, Tag

from domain.model.entry import Reference, ReferenceType
from services.markers import descendants, first, is_marker, text_of

# Checked in order; the first matching label wins.
REFERENCE_LABELS: tuple[tuple[tuple[str, ...], ReferenceType], ...] = (
    (("SINÓNIMO", "SINÓNIMOS"), ReferenceType.SYNONYM),
    (("VÉXASE",), ReferenceType.SEE),
    (("CONFRÓNTESE",), ReferenceType.COMPARE),
)


def _normalize(text: str) -> str:
    return unicodedata.normalize("NFC", text).strip()


def label_text(block: Tag) -> str:
    """Text of ``block`` excluding anything inside nested links."""
    parts = [
        str(string)
        for string in block.find_all(string=True)
        if not isinstance(string, Comment) and not _inside_link(string, block)
    ]
    return _normalize("".join(parts))


def _inside_link(string: NavigableString, block: Tag) -> bool:
    for parent in string.parents:
        if parent is block:
            return False
        if is_marker(parent, "link"):
            return True
    return False


def classify_label(label: str) -> ReferenceType | None:
    """Reference kind from a label's prefix (SINÓNIMOS:, VÉXASE, ...)."""
    for prefixes, ref_type in REFERENCE_LABELS:
        if label.startswith(prefixes):
            return ref_type
    return None


def classify_type_marker(text: str) -> ReferenceType | None:
    """Reference kind from the dedicated type marker (substring match)."""
    text = _normalize(text)
    for prefixes, ref_type in REFERENCE_LABELS:
        if any(prefix in text for prefix in prefixes):
            return ref_type
    return None


def classify_references(node: Tag | None) -> list[Reference]:
    """Classified references found in ``node``'s subtree, in document order.

    Blocks whose kind cannot be determined, or that link no words, are
    dropped.
    """
    references: list[Reference] = []
    for block in descendants(node, "references-block"):
        ref_type = classify_label(label_text(block))
        if ref_type is None:
            ref_type = classify_type_marker(text_of(first(block, "reference-type")))
        if ref_type is None:
            continue

        words = [text_of(link) for link in descendants(block, "reference-word-link")]
        words = [w for w in words if w]
        if words:
            references.append(Reference(type=ref_type, words=tuple(words)))
    return references


def first_reference(node: Tag | None) -> Reference | None:
    """First classified reference in ``node``'s subtree, or None."""
    references = classify_references(node)
    return references[0] if references else None
