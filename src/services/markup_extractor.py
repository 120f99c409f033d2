"""Markup extractor — builds a DictionaryEntry from one HTML fragment.

Walk:
    primary entry block → headword, part of speech, direct-child senses
    whole fragment      → expression blocks, each with its own senses

Every step degrades to "absent" or "empty" instead of raising; a malformed
sense, expression or reference block is dropped on its own.
"""

import logging
from typing import Callable

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from domain.model.entry import (
    Definition,
    Diagnostic,
    DiagnosticKind,
    DictionaryEntry,
    ExtractionResult,
    Expression,
)
from domain.model.errors import MarkupParseError
from services.markers import children, descendants, first, is_marker, siblings, text_of
from services.reference_classifier import first_reference

logger = logging.getLogger(__name__)

# Expression text used by the "related words" footer, which shares the
# expression marker but is not an idiom.
RELATED_WORDS_LABEL = "Palabras relacionadas:"

# Fragments shorter than this may legitimately hold nothing to extract.
SHAPE_DRIFT_MIN_MARKUP_LENGTH = 50

DefinitionStrategy = Callable[[Tag], list[Definition]]


def extract(fragment: str, fallback_title: str) -> ExtractionResult:
    """Extract a dictionary entry from an HTML fragment.

    Args:
        fragment: HTML fragment of a single dictionary entry.
        fallback_title: Headword to use when the markup has no heading.

    Returns:
        ExtractionResult with the entry and any shape-drift diagnostics.

    Raises:
        MarkupParseError: If the fragment cannot be parsed as markup.
    """
    soup = _parse(fragment)
    diagnostics: list[Diagnostic] = []

    primary = first(soup, "primary-entry-block")
    if primary is None:
        diagnostics.append(Diagnostic(
            kind=DiagnosticKind.MISSING_PRIMARY_BLOCK,
            message="No primary entry block found",
            markup_length=len(fragment),
        ))

    entry = DictionaryEntry(
        word=_headword(primary, fallback_title),
        part_of_speech=text_of(first(primary, "part-of-speech")) or None,
        definitions=tuple(_primary_definitions(primary)),
        expressions=tuple(_expressions(soup)),
    )

    if entry.is_empty and len(fragment) > SHAPE_DRIFT_MIN_MARKUP_LENGTH:
        diagnostics.append(Diagnostic(
            kind=DiagnosticKind.EMPTY_ENTRY,
            message="Entry is empty despite non-trivial markup; markers may have changed",
            markup_length=len(fragment),
        ))

    return ExtractionResult(entry=entry, diagnostics=tuple(diagnostics))


def _parse(fragment: str) -> BeautifulSoup:
    if not isinstance(fragment, str):
        raise MarkupParseError(f"Expected markup text, got {type(fragment).__name__}")
    try:
        return BeautifulSoup(fragment, "html.parser")
    except ParserRejectedMarkup as e:
        raise MarkupParseError(str(e)) from e


def _headword(primary: Tag | None, fallback_title: str) -> str:
    """Heading inside the primary block wins over the response title."""
    heading = text_of(first(primary, "entry-headword"))
    return heading or fallback_title.strip()


def _primary_definitions(primary: Tag | None) -> list[Definition]:
    # Direct children only: nested expression senses are handled separately
    definitions = []
    for sense in children(primary, "sense"):
        definition = extract_sense(sense)
        if definition is not None:
            definitions.append(definition)
    return definitions


# ── Sense extraction ─────────────────────────────────────────


def extract_sense(sense: Tag) -> Definition | None:
    """Build a Definition from a sense node; None when it has no definition text."""
    definition_text = text_of(first(sense, "definition-text"))
    if not definition_text:
        return None

    return Definition(
        definition=definition_text,
        sense=_sense_label(sense),
        examples=tuple(text_of(example) for example in descendants(sense, "example-text")),
        references=first_reference(sense),
    )


def _sense_label(sense: Tag) -> str | None:
    label = text_of(first(sense, "sense-number"))
    if label.endswith("."):
        label = label[:-1].strip()
    return label or None


# ── Expressions ──────────────────────────────────────────────


def _definitions_from_senses(expression: Tag) -> list[Definition]:
    """Every sense nested anywhere in the expression block."""
    definitions = []
    for sense in descendants(expression, "sense"):
        definition = extract_sense(sense)
        if definition is not None:
            definitions.append(definition)
    return definitions


def _definitions_from_subentry(expression: Tag) -> list[Definition]:
    """Bare definition blocks directly under a nested sub-entry.

    These carry no sense number; their examples sit in sibling example
    containers and references on the enclosing sub-entry.
    """
    definitions = []
    # One pass in document order, so nested sub-entries interleave correctly
    for block in descendants(expression, "definition-block"):
        container = block.parent
        if not is_marker(container, "sub-entry-container"):
            continue
        definition_text = text_of(first(block, "definition-text"))
        if not definition_text:
            continue
        examples = [
            text_of(example)
            for example_block in siblings(block, "example-block")
            for example in descendants(example_block, "example-text")
        ]
        definitions.append(Definition(
            definition=definition_text,
            examples=tuple(examples),
            references=first_reference(container),
        ))
    return definitions


# Tried in order; the first strategy returning a non-empty list wins.
EXPRESSION_DEFINITION_STRATEGIES: tuple[DefinitionStrategy, ...] = (
    _definitions_from_senses,
    _definitions_from_subentry,
)


def first_non_empty(strategies: tuple[DefinitionStrategy, ...], node: Tag) -> list[Definition]:
    for strategy in strategies:
        definitions = strategy(node)
        if definitions:
            return definitions
    return []


def extract_expression(block: Tag) -> Expression | None:
    """Build an Expression from an expression block, or None if unusable."""
    text = text_of(first(block, "expression-text"))
    if not text or text.startswith(RELATED_WORDS_LABEL):
        return None

    definitions = first_non_empty(EXPRESSION_DEFINITION_STRATEGIES, block)
    if not definitions:
        logger.debug("Expression without definitions skipped", extra={"expression": text})
        return None
    return Expression(expression=text, definitions=tuple(definitions))


def _expressions(soup: BeautifulSoup) -> list[Expression]:
    # Not scoped to the primary block: expressions may sit outside it
    expressions = []
    for block in descendants(soup, "expression-block"):
        expression = extract_expression(block)
        if expression is not None:
            expressions.append(expression)
    return expressions
