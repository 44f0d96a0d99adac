"""
Modelo de dominio: Línea clasificada.

El LineClassifier convierte cada línea de texto en exactamente UNA de
estas variantes. Es un conjunto cerrado: el StatementDecoder solo
necesita preguntar `isinstance(line, EntryStartLine)` y tiene los campos
capturados ya tipados, sin volver a consultar grupos de un regex.

Todas las variantes guardan el texto crudo (`text`) porque una línea
que "parece" marcador pero llega en un estado donde no aplica se trata
como texto de continuación.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassifiedLine:
    """Base común de todas las variantes."""

    text: str


@dataclass(frozen=True)
class HeaderLine(ClassifiedLine):
    """Kontoauszug vom 29.12.2017 bis 31.01.2018"""

    period_from_text: str
    period_to_text: str


@dataclass(frozen=True)
class PageBreakLine(ClassifiedLine):
    """Letra pequeña vertical al pie de cada página: 00123... / ... / ..."""


@dataclass(frozen=True)
class TableStartLine(ClassifiedLine):
    """Buchung Valuta Vorgang Soll Haben"""


@dataclass(frozen=True)
class EntryStartLine(ClassifiedLine):
    """02.01. 29.12. SEPA Ueberweisung - 600,00"""

    booking_date_token: str
    """Fecha "Buchung" sin año. Ej: "02.01."."""

    value_date_token: str
    """Fecha "Valuta" sin año. Ej: "29.12."."""

    description: str
    """Primer fragmento de "Vorgang"."""

    amount_text: str
    """Monto con signo. Ej: "- 600,00"."""


@dataclass(frozen=True)
class StatementEndLine(ClassifiedLine):
    """Filialnummer Kontonummer Neuer Saldo"""


@dataclass(frozen=True)
class TextLine(ClassifiedLine):
    """Cualquier otra línea (posible continuación de descripción)."""

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()
