"""
Modelos de dominio del proyecto kontoauszug-reader.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from kontoauszug.domain.models import Booking, BookingLine, PageText
"""

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
from kontoauszug.domain.models.output_config import (
    DateField,
    OutputConfig,
    OutputMode,
    RecordFormat,
)
from kontoauszug.domain.models.page_text import PageText

__all__ = [
    "Booking",
    "BookingLine",
    "ClassifiedLine",
    "DateField",
    "EntryStartLine",
    "HeaderLine",
    "OutputConfig",
    "OutputMode",
    "PageBreakLine",
    "PageText",
    "RecordFormat",
    "StatementEndLine",
    "TableStartLine",
    "TextLine",
]
