"""
Conversión de modelos a registros serializables.

Aquí se decide QUÉ se serializa (nombres de campo, formato de fechas,
campos opcionales). CÓMO se escribe (JSON indentado, Excel) lo decide el
OutputWriter.

Reglas:
- Fechas como "dd.mm.yyyy", igual que en el Kontoauszug.
- `sourceId` / `lineIndex` de una línea solo aparecen si tienen valor
  (se omiten, no se emiten vacíos).
- `amountText` y `amountMinorUnits` siempre van juntos.
"""

from typing import Any

from kontoauszug.domain.models.booking import Booking
from kontoauszug.domain.models.booking_line import BookingLine
from kontoauszug.domain.shared.date_parser import format_date


def booking_line_to_record(line: BookingLine) -> dict[str, Any]:
    record: dict[str, Any] = {}
    if line.source_id is not None:
        record["sourceId"] = line.source_id
    if line.line_index is not None:
        record["lineIndex"] = line.line_index
    record["bookingDate"] = format_date(line.booking_date)
    record["valueDate"] = format_date(line.value_date)
    record["description"] = line.description
    record["amountText"] = line.amount_text
    record["amountMinorUnits"] = line.amount_minor_units
    return record


def booking_to_record(booking: Booking) -> dict[str, Any]:
    return {
        "sourceId": booking.source_id,
        "periodFrom": format_date(booking.period_from),
        "periodTo": format_date(booking.period_to),
        "lines": [booking_line_to_record(line) for line in booking.lines],
    }
