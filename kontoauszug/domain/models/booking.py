"""
Modelo de dominio: Booking (el contenido decodificado de un Kontoauszug).

Este es el objeto central que fluye por toda la arquitectura:
- Lo PRODUCE el StatementDecoder (uno por documento, o ninguno).
- Lo CONSUME el OutputRouter, que decide dónde y si persistirlo.

Un Booking es dueño exclusivo de sus BookingLine. Ningún Booking
comparte líneas con otro, por eso los documentos se pueden procesar
de forma independiente.
"""

from dataclasses import dataclass, field
from datetime import date

from kontoauszug.domain.models.booking_line import BookingLine


@dataclass(frozen=True)
class Booking:
    """Resultado de decodificar un documento Kontoauszug."""

    source_id: str
    """Identificador del documento de origen (normalmente su ruta).
    Solo se usa para trazabilidad y para nombrar la salida por documento."""

    period_from: date
    """Inicio del periodo: "Kontoauszug vom <period_from> bis ..."."""

    period_to: date
    """Fin del periodo: "... bis <period_to>"."""

    lines: tuple[BookingLine, ...] = field(default_factory=tuple)
    """Movimientos en el orden en que aparecen en el documento."""

    def __len__(self) -> int:
        return len(self.lines)

    def __post_init__(self) -> None:
        if self.period_from > self.period_to:
            raise ValueError(
                f"Periodo inválido: {self.period_from} es posterior a {self.period_to}"
            )
