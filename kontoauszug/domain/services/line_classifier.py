"""
Servicio de dominio: Clasificador de líneas del Kontoauszug.

Reconoce las cinco formas de línea que estructuran el texto extraído:

    Kontoauszug vom 29.12.2017 bis 31.01.2018        → HeaderLine
    0012345678 / 12345678 / 12345678                 → PageBreakLine
    Buchung Valuta Vorgang Soll Haben                → TableStartLine
    02.01. 29.12. SEPA Ueberweisung - 600,00         → EntryStartLine
    Filialnummer Kontonummer Neuer Saldo             → StatementEndLine

Todo lo demás es TextLine. Los patrones se aplican a la línea COMPLETA
(re.fullmatch), nunca como búsqueda de subcadena.

El clasificador no tiene estado: no sabe si la línea llega antes o
después del encabezado. Decidir si un marcador aplica es trabajo del
StatementDecoder.
"""

import re

from kontoauszug.domain.models.classified_line import (
    ClassifiedLine,
    EntryStartLine,
    HeaderLine,
    PageBreakLine,
    StatementEndLine,
    TableStartLine,
    TextLine,
)


class LineClassifier:
    """Convierte una línea de texto en una variante de ClassifiedLine."""

    _HEADER_PATTERN: re.Pattern[str] = re.compile(
        r"Kontoauszug vom (\d{2}\.\d{2}\.\d{4}) bis (\d{2}\.\d{2}\.\d{4})"
    )

    # Letra pequeña vertical abajo a la izquierda de cada página impresa.
    _PAGE_BREAK_PATTERN: re.Pattern[str] = re.compile(r"00\d{8,} / \d{8,} / \d{8,}")

    _TABLE_START_TEXT: str = "Buchung Valuta Vorgang Soll Haben"

    # "(.+) " es codicioso: el último " <signo> <monto>" de la línea es el monto.
    _ENTRY_PATTERN: re.Pattern[str] = re.compile(
        r"(\d{2}\.\d{2}\.) (\d{2}\.\d{2}\.) (.+) ([-+] \d+(?:\.\d+)*,\d{2})"
    )

    _STATEMENT_END_TEXT: str = "Filialnummer Kontonummer Neuer Saldo"

    def classify(self, line: str) -> ClassifiedLine:
        """Clasifica una línea.

        Args:
            line: Una línea del texto extraído, sin el salto de línea final.

        Returns:
            Exactamente una variante. TextLine si no coincide ningún patrón.
        """
        if line == self._TABLE_START_TEXT:
            return TableStartLine(text=line)

        if line == self._STATEMENT_END_TEXT:
            return StatementEndLine(text=line)

        m = self._HEADER_PATTERN.fullmatch(line)
        if m:
            return HeaderLine(
                text=line,
                period_from_text=m.group(1),
                period_to_text=m.group(2),
            )

        if self._PAGE_BREAK_PATTERN.fullmatch(line):
            return PageBreakLine(text=line)

        m = self._ENTRY_PATTERN.fullmatch(line)
        if m:
            return EntryStartLine(
                text=line,
                booking_date_token=m.group(1),
                value_date_token=m.group(2),
                description=m.group(3).strip(),
                amount_text=m.group(4),
            )

        return TextLine(text=line)
