"""
Servicio de dominio: Procesador de Kontoauszüge.

Orquesta el pipeline completo de UN documento:
1. Selecciona el TextExtractor adecuado (can_handle).
2. Extrae el texto de las páginas.
3. Decodifica el Booking (StatementDecoder).
4. Lo entrega al OutputRouter.

Y recorre las rutas de entrada (archivos y carpetas) del CLI:
- Un archivo indicado explícitamente se procesa sin mirar su extensión.
- Una carpeta indicada explícitamente se lista (un nivel).
- Dentro de carpetas solo se toman archivos .pdf cuyo nombre empiece
  con el prefijo configurado; las subcarpetas solo se recorren con
  `recurse`.

Los errores de un documento (PDF corrupto, fallo al escribir) se
registran en la bitácora y el lote continúa, salvo que `fail_fast` esté
activo.
"""

from collections.abc import Iterator, Sequence
from pathlib import Path

from kontoauszug.domain.exceptions import ExtractionError, FormatoInvalidoError, OutputError
from kontoauszug.domain.models.booking import Booking
from kontoauszug.domain.models.page_text import PageText
from kontoauszug.domain.ports.process_logger import ProcessLogger
from kontoauszug.domain.ports.text_extractor import TextExtractor
from kontoauszug.domain.services.output_router import OutputRouter
from kontoauszug.domain.services.statement_decoder import StatementDecoder


class StatementProcessor:
    """Procesa documentos y entrega sus Bookings.

    Recibe sus dependencias por constructor (Dependency Injection).
    No sabe qué extractores ni qué escritor concretos se están usando,
    solo conoce las interfaces (puertos).
    """

    def __init__(
        self,
        text_extractors: Sequence[TextExtractor],
        decoder: StatementDecoder,
        router: OutputRouter,
        logger: ProcessLogger,
        fail_fast: bool = False,
    ) -> None:
        """
        Args:
            text_extractors: Extractores disponibles, en orden de prioridad.
            decoder: Decodificador de Kontoauszüge.
            router: Enrutador de salida.
            logger: Bitácora de procesamiento.
            fail_fast: Si True, el primer documento con error detiene el
                       lote (la excepción se propaga).
        """
        self._extractors = text_extractors
        self._decoder = decoder
        self._router = router
        self._logger = logger
        self._fail_fast = fail_fast
        self._failed: list[Path] = []

    @property
    def failed_files(self) -> list[Path]:
        """Documentos que no se pudieron procesar, en orden."""
        return list(self._failed)

    def process_file(self, file_path: Path) -> Booking | None:
        """Procesa un documento completo (extraer → decodificar → enrutar).

        Returns:
            El Booking decodificado, o None si el documento no tiene
            Kontoauszug, no tiene texto o falló.
        """
        self._logger.log_file_received(file_path)

        try:
            pages = self._extract(file_path)
            if pages is None:
                return None

            booking = self._decoder.decode_pages(pages, source_id=str(file_path))
            if booking is None:
                self._logger.log_statement_not_found(file_path)
                return None

            self._logger.log_decode_complete(file_path, len(pages), len(booking))
            self._router.route(booking)
        except (ExtractionError, FormatoInvalidoError, OutputError) as e:
            self._failed.append(file_path)
            self._logger.log_error(file_path, e)
            if self._fail_fast:
                raise
            return None

        return booking

    def process_path(
        self,
        path: Path,
        recurse: bool = False,
        prefix: str | None = None,
    ) -> list[Booking]:
        """Procesa un archivo o todos los documentos de una carpeta.

        Args:
            path: Archivo o carpeta indicada en la línea de comandos.
            recurse: Recorrer subcarpetas.
            prefix: Si se indica, solo se toman archivos cuyo nombre
                    empiece con este prefijo (ej: "Kontoauszug_").

        Returns:
            Lista de Bookings decodificados (solo los exitosos).

        Raises:
            FormatoInvalidoError: Si la ruta no existe.
        """
        if not path.exists():
            raise FormatoInvalidoError(str(path), "archivo o carpeta", "La ruta no existe")

        bookings: list[Booking] = []
        for document in self.iter_documents(path, recurse=recurse, prefix=prefix):
            booking = self.process_file(document)
            if booking is not None:
                bookings.append(booking)
        return bookings

    @staticmethod
    def iter_documents(
        path: Path,
        recurse: bool = False,
        prefix: str | None = None,
    ) -> Iterator[Path]:
        """Genera los documentos a procesar a partir de una ruta del CLI.

        El orden es alfabético dentro de cada carpeta para que la salida
        sea reproducible.
        """
        if path.is_file():
            yield path
            return

        yield from StatementProcessor._walk(path, recurse, prefix)

    @staticmethod
    def _walk(directory: Path, recurse: bool, prefix: str | None) -> Iterator[Path]:
        for child in sorted(directory.iterdir()):
            if child.is_dir():
                if recurse:
                    yield from StatementProcessor._walk(child, recurse, prefix)
                continue
            if prefix and not child.name.startswith(prefix):
                continue
            if child.suffix.lower() == ".pdf":
                yield child

    def _extract(self, file_path: Path) -> list[PageText] | None:
        """Extrae el texto con el primer extractor compatible.

        Returns:
            Lista de PageText, o None si ningún extractor puede manejar el
            archivo o el documento no tiene texto.

        Raises:
            ExtractionError / FormatoInvalidoError: Del extractor.
        """
        extractor = self._find_extractor(file_path)
        if extractor is None:
            self._logger.log_file_skipped(
                file_path,
                f"Ningún extractor puede manejar '{file_path.suffix}'",
            )
            return None

        self._logger.log_extraction_start(file_path, extractor.name)
        pages = extractor.extract(file_path)

        if not pages or all(p.is_empty for p in pages):
            self._logger.log_file_skipped(file_path, f"Sin texto con {extractor.name}")
            return None

        return pages

    def _find_extractor(self, file_path: Path) -> TextExtractor | None:
        """Encuentra el primer extractor que pueda manejar el archivo."""
        for extractor in self._extractors:
            if extractor.can_handle(file_path):
                return extractor
        return None
