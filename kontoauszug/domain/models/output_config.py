"""
Modelo de dominio: Configuración de salida.

Reúne todas las opciones que deciden DÓNDE y CÓMO se entregan los
registros decodificados. Se valida una sola vez, al construirse, para
que una combinación imposible (por ejemplo -j junto con -d) falle antes
de abrir el primer PDF.

Los tres modos de entrega son mutuamente excluyentes:
    STREAM        → un único flujo ordenado (stdout o archivo -o)
    PER_DOCUMENT  → un archivo junto a cada PDF (-j)
    PER_DATE      → un archivo por línea en <base>/<yyyy>/<mm>[/<dd>] (-d)
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from kontoauszug.domain.exceptions import ConfigurationError


class OutputMode(Enum):
    STREAM = "stream"
    PER_DOCUMENT = "per-document"
    PER_DATE = "per-date"


class DateField(Enum):
    """Fecha que decide la carpeta/nombre en modo PER_DATE."""

    VALUE_DATE = "valuta"
    BOOKING_DATE = "buchung"


class RecordFormat(Enum):
    JSON = "json"
    XLSX = "xlsx"


@dataclass(frozen=True)
class OutputConfig:
    """Opciones de salida ya validadas."""

    mode: OutputMode = OutputMode.STREAM

    line_granularity: bool = False
    """Solo STREAM: un registro por BookingLine en vez de por Booking."""

    overwrite: bool = False
    """PER_DOCUMENT / PER_DATE: reescribir archivos existentes (-u)."""

    month_granularity: bool = False
    """Solo PER_DATE: carpetas <yyyy>/<mm> en vez de <yyyy>/<mm>/<dd> (-m)."""

    date_field: DateField = DateField.VALUE_DATE

    base_dir: Path | None = None
    """Solo PER_DATE: directorio base (-d)."""

    output_file: Path | None = None
    """Solo STREAM: archivo de salida (-o). None = stdout."""

    record_format: RecordFormat = RecordFormat.JSON

    one_line: bool = False
    """JSON en una sola línea (-1) en vez de indentado."""

    def __post_init__(self) -> None:
        if self.mode is OutputMode.PER_DATE and self.base_dir is None:
            raise ConfigurationError("El modo directorio requiere un directorio base (-d)")
        if self.mode is not OutputMode.PER_DATE and self.base_dir is not None:
            raise ConfigurationError("El directorio base (-d) solo aplica al modo directorio")
        if self.mode is not OutputMode.STREAM and self.output_file is not None:
            raise ConfigurationError(
                "El archivo de salida (-o) es mutuamente excluyente con -d y -j"
            )
        if self.line_granularity and self.mode is not OutputMode.STREAM:
            raise ConfigurationError(
                "Las líneas individuales (-bl) solo se pueden emitir en modo flujo"
            )
        if self.overwrite and self.mode is OutputMode.STREAM:
            raise ConfigurationError("La opción -u solo se puede usar con -d o -j")
        if self.month_granularity and self.mode is not OutputMode.PER_DATE:
            raise ConfigurationError("La opción -m solo se puede usar con -d")
        if self.record_format is RecordFormat.XLSX:
            if self.mode is OutputMode.PER_DATE:
                raise ConfigurationError("El formato xlsx no se puede usar con -d")
            if self.mode is OutputMode.STREAM and self.output_file is None:
                raise ConfigurationError("El formato xlsx en modo flujo requiere -o")

    @classmethod
    def from_options(
        cls,
        *,
        json_mode: bool = False,
        base_dir: Path | None = None,
        output_file: Path | None = None,
        line_mode: bool = False,
        update: bool = False,
        month: bool = False,
        booking_date: bool = False,
        one_line: bool = False,
        record_format: str = "json",
    ) -> "OutputConfig":
        """Construye la configuración a partir de las opciones del CLI.

        Detecta los pares de opciones mutuamente excluyentes con mensajes
        específicos, antes de que __post_init__ aplique las reglas generales.

        Raises:
            ConfigurationError: Si las opciones son incompatibles o el
                                directorio base no existe.
        """
        if json_mode and output_file is not None:
            raise ConfigurationError("El modo -j es mutuamente excluyente con -o")
        if json_mode and base_dir is not None:
            raise ConfigurationError("El modo -j es mutuamente excluyente con -d")
        if output_file is not None and base_dir is not None:
            raise ConfigurationError("Las opciones -o y -d son mutuamente excluyentes")
        if json_mode and line_mode:
            raise ConfigurationError("El modo -j no puede emitir líneas individuales (-bl)")
        if base_dir is not None and not base_dir.is_dir():
            raise ConfigurationError(f"No es un directorio: {base_dir}")

        try:
            formato = RecordFormat(record_format)
        except ValueError:
            raise ConfigurationError(f"Formato de salida desconocido: '{record_format}'")

        if json_mode:
            mode = OutputMode.PER_DOCUMENT
        elif base_dir is not None:
            mode = OutputMode.PER_DATE
        else:
            mode = OutputMode.STREAM

        return cls(
            mode=mode,
            line_granularity=line_mode,
            overwrite=update,
            month_granularity=month,
            date_field=DateField.BOOKING_DATE if booking_date else DateField.VALUE_DATE,
            base_dir=base_dir,
            output_file=output_file,
            record_format=formato,
            one_line=one_line,
        )
