"""Render a DictionaryEntry as Galician prose for tool-call results."""

from domain.model.entry import Definition, DictionaryEntry, ReferenceType

REFERENCE_TYPE_LABELS = {
    ReferenceType.SYNONYM: "Sinónimos",
    ReferenceType.SEE: "Véxase tamén",
    ReferenceType.COMPARE: "Confróntese con",
}

EMPTY_ENTRY_NOTICE = (
    "Non se atoparon definicións ou expresións específicas para esta entrada "
    "(aínda que a palabra existe)."
)


def _format_definition(definition: Definition, indent: str) -> list[str]:
    if definition.sense:
        lines = [f"{indent}{definition.sense}. {definition.definition}"]
    else:
        lines = [f"{indent}- {definition.definition}"]

    for example in definition.examples:
        lines.append(f"{indent}  Exemplo: {example}")

    if definition.references:
        label = REFERENCE_TYPE_LABELS[definition.references.type]
        lines.append(f"{indent}  {label}: {', '.join(definition.references.words)}")

    lines.append("")
    return lines


def format_entry(entry: DictionaryEntry) -> str:
    """Serialize an entry in document order. Deterministic; no parsing."""
    lines = [f"Palabra: {entry.word}"]
    if entry.part_of_speech:
        lines.append(f"Categoría gramatical: {entry.part_of_speech}")
    lines.append("")

    if entry.definitions:
        lines.append("Definicións:")
        for definition in entry.definitions:
            lines.extend(_format_definition(definition, indent=""))

    if entry.expressions:
        lines.append("Expresións e frases feitas:")
        for expression in entry.expressions:
            lines.append("")
            lines.append(f"* {expression.expression} *")
            for definition in expression.definitions:
                lines.extend(_format_definition(definition, indent="  "))

    if entry.is_empty:
        lines.append(EMPTY_ENTRY_NOTICE)

    return "\n".join(lines).strip()
