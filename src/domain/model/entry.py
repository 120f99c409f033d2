"""Dictionary entry domain models.

Value objects produced by a single lookup: the entry itself, its senses,
idiomatic expressions and cross-references. All of them are immutable and
compare structurally.
"""

from dataclasses import dataclass, field
from enum import Enum


class ReferenceType(str, Enum):
    """Kind of cross-reference attached to a sense."""
    SYNONYM = "SYNONYM"
    SEE = "SEE"
    COMPARE = "COMPARE"


@dataclass(frozen=True)
class Reference:
    """Cross-reference annotation (synonyms, see-also, compare)."""
    type: ReferenceType
    words: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.words:
            raise ValueError("Reference requires at least one word")
        # Accept lists at construction time
        object.__setattr__(self, "words", tuple(self.words))


@dataclass(frozen=True)
class Definition:
    """One numbered or unnumbered sense."""
    definition: str
    sense: str | None = None
    examples: tuple[str, ...] = ()
    references: Reference | None = None

    def __post_init__(self) -> None:
        if not self.definition:
            raise ValueError("Definition text cannot be empty")
        object.__setattr__(self, "examples", tuple(self.examples))


@dataclass(frozen=True)
class Expression:
    """Idiomatic phrase with its own senses."""
    expression: str
    definitions: tuple[Definition, ...]

    def __post_init__(self) -> None:
        if not self.expression:
            raise ValueError("Expression text cannot be empty")
        if not self.definitions:
            raise ValueError("Expression requires at least one definition")
        object.__setattr__(self, "definitions", tuple(self.definitions))


@dataclass(frozen=True)
class DictionaryEntry:
    """Root result of a lookup (Value Object).

    An entry with no definitions and no expressions is still a valid result:
    the word exists but nothing could be extracted from its markup.
    """
    word: str
    part_of_speech: str | None = None
    definitions: tuple[Definition, ...] = ()
    expressions: tuple[Expression, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "definitions", tuple(self.definitions))
        object.__setattr__(self, "expressions", tuple(self.expressions))

    @property
    def is_empty(self) -> bool:
        return not self.definitions and not self.expressions


@dataclass(frozen=True)
class LocatedFragment:
    """Markup fragment selected from a raw payload, plus its optional title."""
    fragment: str
    title: str | None = None


class DiagnosticKind(str, Enum):
    """Shape-drift signals raised while extracting an entry."""
    MISSING_PRIMARY_BLOCK = "missing_primary_block"
    EMPTY_ENTRY = "empty_entry"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic event attached to an extraction result."""
    kind: DiagnosticKind
    message: str
    markup_length: int = 0


@dataclass(frozen=True)
class ExtractionResult:
    """Entry extracted from one fragment, with the diagnostics it produced."""
    entry: DictionaryEntry
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def has_shape_drift(self) -> bool:
        return any(d.kind == DiagnosticKind.EMPTY_ENTRY for d in self.diagnostics)


@dataclass(frozen=True)
class LookupOutcome:
    """Result of a full fetch-then-parse lookup.

    ``entry`` is None when the dictionary has no result for the word.
    """
    word: str
    entry: DictionaryEntry | None = None
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return self.entry is not None
