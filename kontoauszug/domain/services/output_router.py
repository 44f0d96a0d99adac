"""
Servicio de dominio: Enrutador de salida.

Recibe un Booking ya decodificado y decide dónde (y si) se persiste,
según el modo de OutputConfig:

STREAM
    Un registro por Booking, o uno por BookingLine si se pidió
    granularidad de línea. Todo va al mismo flujo ordenado.

PER_DOCUMENT
    Un archivo con el Booking completo junto al documento de origen:
    "Kontoauszug_2018_01.pdf" → "Kontoauszug_2018_01.json".

PER_DATE
    Un archivo por BookingLine en <base>/<yyyy>/<mm>/<dd>/ (o
    <base>/<yyyy>/<mm>/ con granularidad mensual), llamado
    <yyyy>-<mm>-<dd>-<secuencia de 8 dígitos>. La secuencia empieza en 1
    y se reinicia cada vez que la fecha cambia respecto a la línea
    anterior. NO es única globalmente: solo dentro de una racha de
    líneas consecutivas con la misma fecha.

En los dos modos de archivo, un destino que ya existe se omite salvo que
`overwrite` esté activo. Los contadores y la bitácora solo cambian con
escrituras reales.
"""

from pathlib import Path

from kontoauszug.domain.exceptions import ConfigurationError
from kontoauszug.domain.models.booking import Booking
from kontoauszug.domain.models.output_config import DateField, OutputConfig, OutputMode
from kontoauszug.domain.ports.output_writer import OutputWriter
from kontoauszug.domain.ports.process_logger import ProcessLogger
from kontoauszug.domain.services.records import booking_line_to_record, booking_to_record


class OutputRouter:
    """Entrega los registros de cada Booking según la configuración.

    Recibe sus dependencias por constructor. El contador de secuencia
    del modo PER_DATE es local a cada llamada de route(), así que un
    router puede atender Bookings de distintos documentos sin compartir
    estado entre ellos.
    """

    def __init__(self, config: OutputConfig, writer: OutputWriter, logger: ProcessLogger) -> None:
        self._config = config
        self._writer = writer
        self._logger = logger
        self._lines_emitted: int = 0
        self._written_paths: list[Path] = []

    @property
    def lines_emitted(self) -> int:
        """Total acumulado de BookingLine emitidas (solo escrituras reales)."""
        return self._lines_emitted

    @property
    def written_paths(self) -> list[Path]:
        """Archivos escritos, en orden. Vacío en modo STREAM."""
        return list(self._written_paths)

    def route(self, booking: Booking) -> int:
        """Entrega un Booking.

        Returns:
            Cantidad de BookingLine emitidas para este Booking.

        Raises:
            OutputError: Si el escritor falla.
        """
        if self._config.mode is OutputMode.PER_DOCUMENT:
            emitted = self._route_per_document(booking)
        elif self._config.mode is OutputMode.PER_DATE:
            if self._config.base_dir is None:
                raise ConfigurationError("El modo directorio requiere un directorio base (-d)")
            emitted = self._route_per_date(booking, self._config.base_dir)
        else:
            emitted = self._route_stream(booking)

        self._lines_emitted += emitted
        return emitted

    def close(self) -> None:
        self._writer.close()

    # =================================================================
    # Modos
    # =================================================================

    def _route_stream(self, booking: Booking) -> int:
        if self._config.line_granularity:
            for index, line in enumerate(booking.lines):
                provenance = line.with_provenance(booking.source_id, index)
                self._writer.emit(booking_line_to_record(provenance))
        else:
            self._writer.emit(booking_to_record(booking))
        return len(booking)

    def _route_per_document(self, booking: Booking) -> int:
        target = self.document_target(booking.source_id, self._writer.file_extension)
        written = self._writer.write_file(
            target, booking_to_record(booking), overwrite=self._config.overwrite
        )
        if not written:
            self._logger.log_record_skipped(target)
            return 0

        self._written_paths.append(target)
        self._logger.log_record_written(target, len(booking))
        return len(booking)

    def _route_per_date(self, booking: Booking, base_dir: Path) -> int:
        emitted = 0
        sequence = 1
        last_date = None

        for index, line in enumerate(booking.lines):
            if self._config.date_field is DateField.BOOKING_DATE:
                line_date = line.booking_date
            else:
                line_date = line.value_date

            if line_date != last_date:
                last_date = line_date
                sequence = 1

            target = self.date_target(
                base_dir,
                line_date.year,
                line_date.month,
                line_date.day,
                sequence,
                self._writer.file_extension,
                month_granularity=self._config.month_granularity,
            )
            # La secuencia avanza aunque el destino se omita.
            sequence += 1

            record = booking_line_to_record(line.with_provenance(booking.source_id, index))
            if not self._writer.write_file(target, record, overwrite=self._config.overwrite):
                self._logger.log_record_skipped(target)
                continue

            emitted += 1
            self._written_paths.append(target)
            self._logger.log_record_written(target, 1)

        return emitted

    # =================================================================
    # Nombres de destino
    # =================================================================

    @staticmethod
    def document_target(source_id: str, extension: str) -> Path:
        """Ruta del registro por documento: mismo directorio y nombre base.

        Ejemplos:
            >>> OutputRouter.document_target("in/Kontoauszug_2018.pdf", ".json")
            PosixPath('in/Kontoauszug_2018.json')
        """
        source = Path(source_id)
        return source.with_name(source.stem + extension)

    @staticmethod
    def date_target(
        base_dir: Path,
        year: int,
        month: int,
        day: int,
        sequence: int,
        extension: str,
        month_granularity: bool = False,
    ) -> Path:
        """Ruta del registro por fecha.

        Ejemplos:
            >>> OutputRouter.date_target(Path("out"), 2017, 12, 29, 2, ".json")
            PosixPath('out/2017/12/29/2017-12-29-00000002.json')
        """
        yyyy, mm, dd = f"{year:04d}", f"{month:02d}", f"{day:02d}"
        directory = base_dir / yyyy / mm
        if not month_granularity:
            directory = directory / dd
        return directory / f"{yyyy}-{mm}-{dd}-{sequence:08d}{extension}"
