"""
Tests para el LineClassifier.

Cada línea se clasifica en exactamente una variante, siempre por
coincidencia de línea completa.
"""

import pytest

from kontoauszug.domain.models import (
    EntryStartLine,
    HeaderLine,
    PageBreakLine,
    StatementEndLine,
    TableStartLine,
    TextLine,
)
from kontoauszug.domain.services.line_classifier import LineClassifier


class TestLineClassifier:
    @pytest.fixture
    def classifier(self):
        return LineClassifier()

    # === Encabezado ===

    def test_encabezado(self, classifier):
        result = classifier.classify("Kontoauszug vom 29.12.2017 bis 31.01.2018")
        assert isinstance(result, HeaderLine)
        assert result.period_from_text == "29.12.2017"
        assert result.period_to_text == "31.01.2018"

    def test_encabezado_con_texto_adicional_no_coincide(self, classifier):
        result = classifier.classify("Kontoauszug vom 29.12.2017 bis 31.01.2018 Seite 1")
        assert isinstance(result, TextLine)

    def test_encabezado_con_prefijo_no_coincide(self, classifier):
        result = classifier.classify("Ihr Kontoauszug vom 29.12.2017 bis 31.01.2018")
        assert isinstance(result, TextLine)

    # === Salto de página ===

    def test_salto_de_pagina(self, classifier):
        result = classifier.classify("0012345678 / 12345678 / 123456789")
        assert isinstance(result, PageBreakLine)

    def test_salto_de_pagina_sin_prefijo_00_no_coincide(self, classifier):
        assert isinstance(classifier.classify("1112345678 / 12345678 / 12345678"), TextLine)

    def test_salto_de_pagina_con_pocos_digitos_no_coincide(self, classifier):
        assert isinstance(classifier.classify("001234567 / 12345678 / 12345678"), TextLine)

    # === Inicio y fin de tabla ===

    def test_inicio_de_tabla(self, classifier):
        result = classifier.classify("Buchung Valuta Vorgang Soll Haben")
        assert isinstance(result, TableStartLine)

    def test_inicio_de_tabla_con_espacio_final_no_coincide(self, classifier):
        assert isinstance(classifier.classify("Buchung Valuta Vorgang Soll Haben "), TextLine)

    def test_fin_de_tabla(self, classifier):
        result = classifier.classify("Filialnummer Kontonummer Neuer Saldo")
        assert isinstance(result, StatementEndLine)

    # === Movimiento ===

    def test_movimiento_cargo(self, classifier):
        result = classifier.classify("02.01. 29.12. SEPA Ueberweisung - 600,00")
        assert isinstance(result, EntryStartLine)
        assert result.booking_date_token == "02.01."
        assert result.value_date_token == "29.12."
        assert result.description == "SEPA Ueberweisung"
        assert result.amount_text == "- 600,00"

    def test_movimiento_abono_con_miles(self, classifier):
        result = classifier.classify("15.01. 15.01. Gutschrift Gehalt + 2.345,67")
        assert isinstance(result, EntryStartLine)
        assert result.amount_text == "+ 2.345,67"

    def test_movimiento_con_monto_en_la_descripcion(self, classifier):
        """El monto es siempre el ÚLTIMO "<signo> <importe>" de la línea."""
        result = classifier.classify("03.01. 03.01. Rueckbuchung - 12,00 Gebuehr - 5,00")
        assert isinstance(result, EntryStartLine)
        assert result.description == "Rueckbuchung - 12,00 Gebuehr"
        assert result.amount_text == "- 5,00"

    def test_movimiento_sin_signo_no_coincide(self, classifier):
        assert isinstance(classifier.classify("02.01. 29.12. SEPA Ueberweisung 600,00"), TextLine)

    def test_movimiento_con_un_decimal_no_coincide(self, classifier):
        assert isinstance(classifier.classify("02.01. 29.12. SEPA - 600,0"), TextLine)

    def test_movimiento_sin_descripcion_no_coincide(self, classifier):
        assert isinstance(classifier.classify("02.01. 29.12. - 600,00"), TextLine)

    # === Texto ===

    def test_texto_libre(self, classifier):
        result = classifier.classify("Verwendungszweck Test")
        assert isinstance(result, TextLine)
        assert result.text == "Verwendungszweck Test"
        assert result.is_blank is False

    def test_linea_vacia(self, classifier):
        result = classifier.classify("")
        assert isinstance(result, TextLine)
        assert result.is_blank is True

    def test_todas_las_variantes_guardan_el_texto(self, classifier):
        linea = "Buchung Valuta Vorgang Soll Haben"
        assert classifier.classify(linea).text == linea
