"""
Servicio de dominio: Decodificador de Kontoauszüge.

Máquina de estados que recorre las líneas del texto extraído (en orden
de lectura) y produce un Booking con sus BookingLine, o None si el
documento no tiene encabezado "Kontoauszug vom ... bis ...".

ESTADOS:
    SEEKING_HEADER  (S0) → todavía no apareció el encabezado
    BETWEEN_PAGES   (S1) → hay encabezado, fuera de la tabla de movimientos
    IN_TABLE        (S2) → dentro de la tabla, sin movimiento abierto
    IN_ENTRY        (S3) → dentro de la tabla, con un movimiento abierto

TRANSICIONES (en este orden de prioridad):
    1. S0       + Header         → crear Booking                    → S1
    2. S1/S2/S3 + PageBreak      → cerrar movimiento abierto        → S1
    3. S1/S2/S3 + TableStart     → cerrar movimiento abierto        → S2
    4. S2/S3    + EntryStart     → cerrar abierto, abrir uno nuevo  → S3
    5. S3       + StatementEnd   → cerrar abierto y terminar
    6. S3       + línea no vacía → continuar la descripción abierta
    7. cualquier otro caso       → nada

La tabla se reinicia en cada página ("Buchung Valuta ..." se repite), y
un movimiento puede continuar en la línea siguiente pero nunca cruza un
salto de página.

¿Por qué `transition` es una función pura separada?
Porque así se prueba cada transición con una línea ya clasificada, sin
construir documentos completos.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from kontoauszug.domain.models.booking import Booking
from kontoauszug.domain.models.booking_line import BookingLine
from kontoauszug.domain.models.classified_line import (
    ClassifiedLine,
    EntryStartLine,
    HeaderLine,
    PageBreakLine,
    StatementEndLine,
    TableStartLine,
    TextLine,
)
from kontoauszug.domain.models.page_text import PageText
from kontoauszug.domain.services.line_classifier import LineClassifier
from kontoauszug.domain.shared.date_parser import complete_partial_date, parse_full_date
from kontoauszug.domain.shared.money import parse_minor_units


class DecoderState(Enum):
    SEEKING_HEADER = "S0"
    BETWEEN_PAGES = "S1"
    IN_TABLE = "S2"
    IN_ENTRY = "S3"


class Action(Enum):
    """Efecto secundario que acompaña a una transición."""

    NONE = "none"
    START_BOOKING = "start-booking"
    FLUSH = "flush"
    FLUSH_AND_OPEN = "flush-and-open"
    FLUSH_AND_STOP = "flush-and-stop"
    APPEND_TEXT = "append-text"


_AFTER_HEADER = (DecoderState.BETWEEN_PAGES, DecoderState.IN_TABLE, DecoderState.IN_ENTRY)
_INSIDE_TABLE = (DecoderState.IN_TABLE, DecoderState.IN_ENTRY)
_FLUSHING = (Action.FLUSH, Action.FLUSH_AND_OPEN, Action.FLUSH_AND_STOP)


def transition(state: DecoderState, line: ClassifiedLine) -> tuple[DecoderState, Action]:
    """Calcula el siguiente estado y el efecto para una línea clasificada."""
    if state is DecoderState.SEEKING_HEADER and isinstance(line, HeaderLine):
        return DecoderState.BETWEEN_PAGES, Action.START_BOOKING

    if state in _AFTER_HEADER and isinstance(line, PageBreakLine):
        return DecoderState.BETWEEN_PAGES, Action.FLUSH

    if state in _AFTER_HEADER and isinstance(line, TableStartLine):
        return DecoderState.IN_TABLE, Action.FLUSH

    if state in _INSIDE_TABLE and isinstance(line, EntryStartLine):
        return DecoderState.IN_ENTRY, Action.FLUSH_AND_OPEN

    if state is DecoderState.IN_ENTRY and isinstance(line, StatementEndLine):
        return DecoderState.IN_ENTRY, Action.FLUSH_AND_STOP

    if state is DecoderState.IN_ENTRY and not (isinstance(line, TextLine) and line.is_blank):
        return DecoderState.IN_ENTRY, Action.APPEND_TEXT

    return state, Action.NONE


@dataclass
class _OpenEntry:
    """Movimiento que todavía puede recibir líneas de continuación."""

    booking_date: date
    value_date: date
    amount_text: str
    amount_minor_units: int
    fragments: list[str] = field(default_factory=list)

    def append(self, text: str) -> None:
        fragment = text.strip()
        if fragment:
            self.fragments.append(fragment)

    def close(self) -> BookingLine:
        return BookingLine(
            booking_date=self.booking_date,
            value_date=self.value_date,
            description=" ".join(self.fragments),
            amount_text=self.amount_text,
            amount_minor_units=self.amount_minor_units,
        )


class StatementDecoder:
    """Decodifica el texto de un Kontoauszug en un Booking.

    No guarda estado entre llamadas: decodificar dos veces las mismas
    líneas produce dos Bookings con los mismos valores.
    """

    def __init__(self, classifier: LineClassifier | None = None, strict: bool = False) -> None:
        """
        Args:
            classifier: Clasificador de líneas. Por defecto LineClassifier().
            strict: Si True, un movimiento que sigue abierto al terminar el
                    texto (sin "Filialnummer Kontonummer Neuer Saldo") se
                    conserva. Si False (por defecto), se descarta.
        """
        self._classifier = classifier or LineClassifier()
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def decode_pages(self, pages: Iterable[PageText], source_id: str) -> Booking | None:
        """Decodifica las páginas en orden, como un único flujo de líneas."""
        return self.decode((line for page in pages for line in page.lines), source_id)

    def decode(self, lines: Iterable[str], source_id: str) -> Booking | None:
        """Recorre las líneas y devuelve el Booking decodificado.

        Args:
            lines: Líneas del texto extraído, en orden de lectura.
            source_id: Identificador del documento (trazabilidad).

        Returns:
            Booking con los movimientos encontrados.
            None si nunca apareció el encabezado del Kontoauszug.
        """
        state = DecoderState.SEEKING_HEADER
        period: tuple[date, date] | None = None
        collected: list[BookingLine] = []
        current: _OpenEntry | None = None

        for raw_line in lines:
            line = raw_line.rstrip("\r\n")
            classified = self._classifier.classify(line)
            new_state, action = transition(state, classified)

            # Un marcador cuyas fechas no se pueden construir se trata
            # como texto plano (nunca se lanza error por contenido).
            opened: _OpenEntry | None = None
            if action is Action.START_BOOKING and isinstance(classified, HeaderLine):
                try:
                    period = self._parse_period(classified)
                except ValueError:
                    new_state, action = transition(state, TextLine(text=line))
            elif (
                action is Action.FLUSH_AND_OPEN
                and isinstance(classified, EntryStartLine)
                and period is not None
            ):
                try:
                    opened = self._open_entry(classified, *period)
                except ValueError:
                    new_state, action = transition(state, TextLine(text=line))

            if action in _FLUSHING and current is not None:
                collected.append(current.close())
                current = None

            if action is Action.FLUSH_AND_OPEN:
                current = opened
            elif action is Action.APPEND_TEXT and current is not None:
                current.append(line)
            elif action is Action.FLUSH_AND_STOP:
                break

            state = new_state

        if self._strict and current is not None:
            collected.append(current.close())

        if period is None:
            return None

        return Booking(
            source_id=source_id,
            period_from=period[0],
            period_to=period[1],
            lines=tuple(collected),
        )

    @staticmethod
    def _parse_period(line: HeaderLine) -> tuple[date, date]:
        period_from = parse_full_date(line.period_from_text)
        period_to = parse_full_date(line.period_to_text)
        if period_from > period_to:
            raise ValueError(f"Periodo invertido: {line.text}")
        return period_from, period_to

    @staticmethod
    def _open_entry(line: EntryStartLine, period_from: date, period_to: date) -> _OpenEntry:
        entry = _OpenEntry(
            booking_date=complete_partial_date(line.booking_date_token, period_from, period_to),
            value_date=complete_partial_date(line.value_date_token, period_from, period_to),
            amount_text=line.amount_text,
            amount_minor_units=parse_minor_units(line.amount_text),
        )
        entry.append(line.description)
        return entry
