"""Dictionary lookup service — orchestrates a single fetch-then-parse lookup.

Pipeline: DictionaryPort.fetch → locate (pick result item) → extract (HTML to
DictionaryEntry). No caching and no retries; each call is independent.
"""

import logging

from domain.model.entry import DiagnosticKind, LookupOutcome
from domain.model.errors import ValidationError
from port.dictionary import DictionaryPort
from services.entry_formatter import format_entry
from services.entry_locator import locate
from services.markup_extractor import extract

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = 'Non se atoparon resultados para a palabra "{word}" no dicionario da RAG.'


async def lookup(dictionary: DictionaryPort, word: str) -> LookupOutcome:
    """Look up a word and extract its dictionary entry.

    Args:
        dictionary: Port used to fetch the raw payload.
        word: The word to look up.

    Returns:
        LookupOutcome; ``entry`` is None when the word was not found.

    Raises:
        ValidationError: If the word is blank.
        DictionaryFetchError: If the dictionary source cannot be reached.
        MarkupParseError: If the located fragment is not parseable markup.
    """
    word = word.strip()
    if not word:
        raise ValidationError("Word cannot be empty")

    payload = await dictionary.fetch(word)
    located = locate(payload)
    if located is None:
        logger.info("No entry found", extra={"word": word})
        return LookupOutcome(word=word)

    result = extract(located.fragment, located.title or word)

    for diagnostic in result.diagnostics:
        if diagnostic.kind == DiagnosticKind.EMPTY_ENTRY:
            logger.warning("Parsed entry is empty despite receiving HTML", extra={
                "word": word,
                "title": located.title,
                "markup_length": diagnostic.markup_length,
                "diagnostic": diagnostic.kind.value,
            })
        else:
            logger.debug(diagnostic.message, extra={"word": word, "diagnostic": diagnostic.kind.value})

    logger.info("Entry extracted", extra={
        "word": word,
        "headword": result.entry.word,
        "pos": result.entry.part_of_speech,
        "definition_count": len(result.entry.definitions),
        "expression_count": len(result.entry.expressions),
    })
    return LookupOutcome(word=word, entry=result.entry, diagnostics=result.diagnostics)


def render_outcome(outcome: LookupOutcome) -> str:
    """Text shown to the caller: formatted entry or a not-found message."""
    if outcome.entry is None:
        return NOT_FOUND_MESSAGE.format(word=outcome.word)
    return format_entry(outcome.entry)


async def describe_word(dictionary: DictionaryPort, word: str) -> str:
    """Look up a word and render the result as text."""
    return render_outcome(await lookup(dictionary, word))
