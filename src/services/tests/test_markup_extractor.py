"""Tests for the markup extractor.

Tests cover:
1. Primary block: headword override, part of speech, direct-child senses
2. Sense extraction rule: labels, first definition text, examples, references
3. Expression scan: related-words filter, strategy order, fallback path
4. Shape-drift diagnostics and parse failures
"""

import unittest

from domain.model.entry import (
    Definition,
    DiagnosticKind,
    Expression,
    Reference,
    ReferenceType,
)
from domain.model.errors import MarkupParseError
from services.markup_extractor import (
    EXPRESSION_DEFINITION_STRATEGIES,
    extract,
    first_non_empty,
)


def _sense(number: str | None, definition: str, examples: tuple[str, ...] = (), extra: str = "") -> str:
    number_html = f'<span class="Sense__SenseNumber">{number}</span>' if number is not None else ""
    examples_html = "".join(
        f'<div class="Example"><span class="Example__Example">{e}</span></div>' for e in examples
    )
    return (
        f'<div class="Sense">{number_html}'
        f'<div class="Definition"><span class="Definition__Definition">{definition}</span></div>'
        f'{examples_html}{extra}</div>'
    )


def _primary(body: str, headword: str = "casa", pos: str | None = "substantivo feminino") -> str:
    pos_html = f'<span class="Subentry__Part_of_speech">{pos}</span>' if pos is not None else ""
    return (
        '<div class="Subentry">'
        f'<h2 class="Entry__Word_form">{headword}</h2>{pos_html}{body}'
        '</div>'
    )


def _expression(text: str, body: str) -> str:
    return (
        '<div class="Fraseoloxia">'
        f'<span class="Fraseoloxia__Texto">{text}</span>'
        f'<div class="Subentry">{body}</div>'
        '</div>'
    )


SCENARIO_A = _primary(_sense("1.", "Edificio para vivir", ("A casa é grande",)))


class TestPrimaryBlock(unittest.TestCase):
    """Headword, part of speech and top-level senses."""

    def test_single_sense_entry(self):
        """Numbered sense with one example and no references."""
        entry = extract(SCENARIO_A, "casa").entry

        self.assertEqual(entry.word, "casa")
        self.assertEqual(entry.part_of_speech, "substantivo feminino")
        self.assertEqual(entry.definitions, (
            Definition(
                sense="1",
                definition="Edificio para vivir",
                examples=("A casa é grande",),
                references=None,
            ),
        ))
        self.assertEqual(entry.expressions, ())

    def test_heading_overrides_title(self):
        entry = extract(_primary(_sense("1.", "Edificio"), headword="casa"), "CASA (1)").entry
        self.assertEqual(entry.word, "casa")

    def test_fallback_title_used_without_heading(self):
        """Missing heading keeps the trimmed fallback title."""
        html = '<div class="Subentry">' + _sense("1.", "Edificio") + '</div>'
        entry = extract(html, "  casa \n").entry
        self.assertEqual(entry.word, "casa")

    def test_blank_heading_keeps_title(self):
        entry = extract(_primary(_sense("1.", "Edificio"), headword="   "), "casa").entry
        self.assertEqual(entry.word, "casa")

    def test_missing_part_of_speech_is_none(self):
        entry = extract(_primary(_sense("1.", "Edificio"), pos=None), "casa").entry
        self.assertIsNone(entry.part_of_speech)

    def test_first_part_of_speech_wins(self):
        html = _primary(
            '<span class="Subentry__Part_of_speech">verbo</span>' + _sense("1.", "Edificio"),
            pos="substantivo",
        )
        self.assertEqual(extract(html, "casa").entry.part_of_speech, "substantivo")

    def test_senses_keep_document_order(self):
        html = _primary(_sense("1.", "Primeiro") + _sense("2.", "Segundo") + _sense("3.", "Terceiro"))
        entry = extract(html, "casa").entry
        self.assertEqual([d.definition for d in entry.definitions], ["Primeiro", "Segundo", "Terceiro"])
        self.assertEqual([d.sense for d in entry.definitions], ["1", "2", "3"])

    def test_sense_without_definition_text_is_skipped(self):
        html = _primary(_sense("1.", "   ") + _sense("2.", "Segundo"))
        entry = extract(html, "casa").entry
        self.assertEqual(len(entry.definitions), 1)
        self.assertEqual(entry.definitions[0].sense, "2")

    def test_sense_without_definition_marker_is_skipped(self):
        html = _primary('<div class="Sense"><span class="Sense__SenseNumber">1.</span>sen texto</div>')
        self.assertEqual(extract(html, "casa").entry.definitions, ())

    def test_only_direct_child_senses_are_top_level(self):
        """Senses nested in an expression inside the primary block are not top-level."""
        html = _primary(
            _sense("1.", "Edificio")
            + _expression("casa de campo", _sense(None, "Casa fóra da cidade"))
        )
        entry = extract(html, "casa").entry

        self.assertEqual([d.definition for d in entry.definitions], ["Edificio"])
        self.assertEqual(len(entry.expressions), 1)
        self.assertEqual(entry.expressions[0].definitions[0].definition, "Casa fóra da cidade")


class TestSenseExtraction(unittest.TestCase):
    """Sense extraction rule shared by top-level and expression senses."""

    def _definition(self, sense_html: str) -> Definition:
        return extract(_primary(sense_html), "casa").entry.definitions[0]

    def test_unnumbered_sense_has_no_label(self):
        self.assertIsNone(self._definition(_sense(None, "Edificio")).sense)

    def test_blank_sense_number_has_no_label(self):
        self.assertIsNone(self._definition(_sense(" . ", "Edificio")).sense)

    def test_label_without_period_is_kept(self):
        self.assertEqual(self._definition(_sense("4", "Edificio")).sense, "4")

    def test_only_trailing_period_removed(self):
        self.assertEqual(self._definition(_sense(" 2.1. ", "Edificio")).sense, "2.1")

    def test_first_definition_text_wins(self):
        html = (
            '<div class="Sense"><span class="Sense__SenseNumber">1.</span>'
            '<div class="Definition"><span class="Definition__Definition">Primeira</span>'
            '<span class="Definition__Definition">Duplicada</span></div></div>'
        )
        self.assertEqual(self._definition(html).definition, "Primeira")

    def test_examples_are_trimmed_in_order(self):
        definition = self._definition(_sense("1.", "Edificio", ("  Unha  ", "Dúas", "Tres ")))
        self.assertEqual(definition.examples, ("Unha", "Dúas", "Tres"))

    def test_reference_attached(self):
        """Synonym block with two linked words."""
        refs = (
            '<div class="References">SINÓNIMOS: '
            '<a class="Reference" href="#">edificio</a>, '
            '<a class="Reference" href="#">construción</a></div>'
        )
        definition = self._definition(_sense("1.", "Vivenda", extra=refs))
        self.assertEqual(
            definition.references,
            Reference(type=ReferenceType.SYNONYM, words=("edificio", "construción")),
        )

    def test_only_first_reference_kept(self):
        refs = (
            '<div class="References">VÉXASE <a class="Reference">fogar</a></div>'
            '<div class="References">SINÓNIMO <a class="Reference">vivenda</a></div>'
        )
        definition = self._definition(_sense("1.", "Vivenda", extra=refs))
        self.assertEqual(definition.references, Reference(type=ReferenceType.SEE, words=("fogar",)))

    def test_unclassified_reference_is_absent(self):
        refs = '<div class="References">OUTROS <a class="Reference">fogar</a></div>'
        self.assertIsNone(self._definition(_sense("1.", "Vivenda", extra=refs)).references)


class TestExpressions(unittest.TestCase):
    """Document-wide expression scan."""

    def test_related_words_block_is_skipped(self):
        """'Palabras relacionadas:' footer contributes nothing even with senses inside."""
        html = SCENARIO_A + _expression(
            "Palabras relacionadas: fogar, vivenda", _sense("1.", "Algo"),
        )
        self.assertEqual(extract(html, "casa").entry.expressions, ())

    def test_expression_outside_primary_block(self):
        html = SCENARIO_A + _expression("botar a casa pola ventá", _sense("1.", "Gastar sen medida"))
        entry = extract(html, "casa").entry

        self.assertEqual(entry.expressions, (
            Expression(
                expression="botar a casa pola ventá",
                definitions=(Definition(sense="1", definition="Gastar sen medida"),),
            ),
        ))

    def test_expressions_keep_document_order(self):
        html = (
            SCENARIO_A
            + _expression("primeira", _sense(None, "a"))
            + _expression("segunda", _sense(None, "b"))
        )
        entry = extract(html, "casa").entry
        self.assertEqual([e.expression for e in entry.expressions], ["primeira", "segunda"])

    def test_blank_expression_text_is_skipped(self):
        html = SCENARIO_A + _expression("  ", _sense("1.", "Algo"))
        self.assertEqual(extract(html, "casa").entry.expressions, ())

    def test_missing_expression_text_is_skipped(self):
        html = SCENARIO_A + '<div class="Fraseoloxia"><div class="Subentry">' + _sense("1.", "Algo") + '</div></div>'
        self.assertEqual(extract(html, "casa").entry.expressions, ())

    def test_expression_without_definitions_is_skipped(self):
        html = SCENARIO_A + _expression("de casa", _sense("1.", ""))
        self.assertEqual(extract(html, "casa").entry.expressions, ())

    def test_fallback_to_subentry_definitions(self):
        """No senses: bare definitions under the sub-entry, examples from siblings."""
        body = (
            '<div class="Definition"><span class="Definition__Definition">Propio do fogar</span></div>'
            '<div class="Example"><span class="Example__Example">Roupa de casa</span></div>'
            '<div class="References">SINÓNIMO <a class="Reference">caseiro</a></div>'
        )
        html = SCENARIO_A + _expression("de casa", body)
        expression = extract(html, "casa").entry.expressions[0]

        self.assertEqual(expression.definitions, (
            Definition(
                definition="Propio do fogar",
                sense=None,
                examples=("Roupa de casa",),
                references=Reference(type=ReferenceType.SYNONYM, words=("caseiro",)),
            ),
        ))

    def test_fallback_definitions_follow_document_order(self):
        """A nested sub-entry's definitions sit between its parent's."""
        body = (
            '<div class="Definition"><span class="Definition__Definition">A</span></div>'
            '<div class="Subentry">'
            '<div class="Definition"><span class="Definition__Definition">B</span></div>'
            '</div>'
            '<div class="Definition"><span class="Definition__Definition">C</span></div>'
        )
        html = SCENARIO_A + _expression("de casa", body)
        expression = extract(html, "casa").entry.expressions[0]
        self.assertEqual([d.definition for d in expression.definitions], ["A", "B", "C"])

    def test_fallback_skips_definitions_outside_subentry(self):
        html = (
            '<div class="Fraseoloxia"><span class="Fraseoloxia__Texto">de casa</span>'
            '<div class="Definition"><span class="Definition__Definition">Solta</span></div>'
            '</div>'
        )
        self.assertEqual(extract(html, "casa").entry.expressions, ())

    def test_fallback_not_used_when_senses_exist(self):
        body = (
            _sense("1.", "Con sentido")
            + '<div class="Definition"><span class="Definition__Definition">Solta</span></div>'
        )
        html = SCENARIO_A + _expression("de casa", body)
        expression = extract(html, "casa").entry.expressions[0]
        self.assertEqual([d.definition for d in expression.definitions], ["Con sentido"])

    def test_expressions_without_primary_block(self):
        """Expression scan still runs when the primary block is missing."""
        html = (
            '<div class="Fraseoloxia"><span class="Fraseoloxia__Texto">en casa</span>'
            + _sense("1.", "No propio fogar")
            + '</div>'
        )
        result = extract(html, "casa")

        self.assertEqual(result.entry.word, "casa")
        self.assertEqual(result.entry.definitions, ())
        self.assertEqual(result.entry.expressions[0].expression, "en casa")
        self.assertIn(DiagnosticKind.MISSING_PRIMARY_BLOCK, [d.kind for d in result.diagnostics])


class TestDefinitionStrategies(unittest.TestCase):
    """Ordered strategy contract: the first non-empty result wins."""

    def test_first_non_empty_result_wins(self):
        calls = []

        def empty(node):
            calls.append("empty")
            return []

        def found(node):
            calls.append("found")
            return [Definition(definition="x")]

        def never(node):
            calls.append("never")
            return [Definition(definition="y")]

        result = first_non_empty((empty, found, never), node=None)

        self.assertEqual(result, [Definition(definition="x")])
        self.assertEqual(calls, ["empty", "found"])

    def test_all_empty_returns_empty(self):
        self.assertEqual(first_non_empty((lambda n: [], lambda n: []), node=None), [])

    def test_senses_strategy_comes_first(self):
        self.assertEqual(
            [s.__name__ for s in EXPRESSION_DEFINITION_STRATEGIES],
            ["_definitions_from_senses", "_definitions_from_subentry"],
        )


class TestDiagnostics(unittest.TestCase):
    """Shape drift and parse failures."""

    def test_markerless_fragment_reports_shape_drift(self):
        """500 characters without any marker: empty entry plus diagnostic, no exception."""
        fragment = "<div><p>" + "x" * 482 + "</p></div>"
        self.assertEqual(len(fragment), 500)

        result = extract(fragment, "casa")

        self.assertEqual(result.entry.word, "casa")
        self.assertEqual(result.entry.definitions, ())
        self.assertEqual(result.entry.expressions, ())
        self.assertTrue(result.has_shape_drift)
        drift = [d for d in result.diagnostics if d.kind == DiagnosticKind.EMPTY_ENTRY][0]
        self.assertEqual(drift.markup_length, 500)

    def test_short_empty_fragment_is_not_shape_drift(self):
        result = extract("<p>nada</p>", "casa")
        self.assertTrue(result.entry.is_empty)
        self.assertFalse(result.has_shape_drift)

    def test_populated_entry_has_no_diagnostics(self):
        self.assertEqual(extract(SCENARIO_A, "casa").diagnostics, ())

    def test_empty_fragment_returns_fallback_entry(self):
        result = extract("", "casa")
        self.assertEqual(result.entry.word, "casa")
        self.assertTrue(result.entry.is_empty)

    def test_non_text_fragment_raises(self):
        with self.assertRaises(MarkupParseError):
            extract(None, "casa")

    def test_malformed_html_does_not_raise(self):
        html = '<div class="Subentry"><h2 class="Entry__Word_form">casa</h2><div class="Sense"><span class="Definition__Definition">Edificio'
        result = extract(html, "x")
        self.assertEqual(result.entry.definitions[0].definition, "Edificio")

    def test_repeated_extraction_is_equal(self):
        html = SCENARIO_A + _expression("de casa", _sense("1.", "Propio do fogar"))
        self.assertEqual(extract(html, "casa"), extract(html, "casa"))


if __name__ == "__main__":
    unittest.main()
