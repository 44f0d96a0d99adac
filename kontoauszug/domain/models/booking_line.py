"""
Modelo de dominio: BookingLine (una línea de movimiento del Kontoauszug).

Una BookingLine representa una operación individual dentro de la tabla
"Buchung Valuta Vorgang Soll Haben": una transferencia SEPA, un cargo
de tarjeta, una comisión, etc.

Decisiones de diseño:
- El monto se guarda DOS veces: el texto original (`amount_text`, por
  ejemplo "- 1.234,56") y el valor en centavos (`amount_minor_units`,
  -123456). El texto permite auditar contra el PDF; el entero permite
  sumar sin errores de redondeo.
- Las fechas son `date` (no `str`), ya completadas con el año que
  resolvió el DateYearResolver.
- `source_id` y `line_index` son la trazabilidad hacia el documento
  origen. El decoder NUNCA los llena: los adjunta el OutputRouter al
  emitir registros a nivel de línea.
"""

from dataclasses import dataclass, replace
from datetime import date


@dataclass(frozen=True)
class BookingLine:
    """Representa un movimiento individual de un Kontoauszug."""

    booking_date: date
    """Fecha de la columna "Buchung"."""

    value_date: date
    """Fecha de la columna "Valuta"."""

    description: str
    """Texto de "Vorgang". Si el PDF lo parte en varias líneas, los
    fragmentos se unen con un solo espacio."""

    amount_text: str
    """Monto tal como aparece en el PDF, con signo. Ej: "- 600,00"."""

    amount_minor_units: int
    """Monto en centavos, con signo. Ej: -60000."""

    source_id: str | None = None
    """Documento de origen. None hasta que el OutputRouter lo adjunta."""

    line_index: int | None = None
    """Posición (0-indexed) dentro del Booking. None hasta que el
    OutputRouter lo adjunta."""

    def with_provenance(self, source_id: str, line_index: int) -> "BookingLine":
        """Devuelve una copia con la trazabilidad adjunta.

        La instancia original no se modifica (frozen=True), así que una
        misma BookingLine puede emitirse con y sin trazabilidad.
        """
        return replace(self, source_id=source_id, line_index=line_index)

    def __post_init__(self) -> None:
        """El signo del entero debe coincidir con el signo del texto."""
        sign = self.amount_text.strip()[:1]
        if sign not in ("-", "+"):
            raise ValueError(f"amount_text sin signo: '{self.amount_text}'")
        if sign == "-" and self.amount_minor_units > 0:
            raise ValueError(
                f"Signo inconsistente: '{self.amount_text}' vs {self.amount_minor_units}"
            )
        if sign == "+" and self.amount_minor_units < 0:
            raise ValueError(
                f"Signo inconsistente: '{self.amount_text}' vs {self.amount_minor_units}"
            )
