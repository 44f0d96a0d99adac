"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante el procesamiento
de Kontoauszüge.

¿Por qué no usar simplemente el módulo `logging` de Python?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS de negocio (WHAT):
- "Se escribió el archivo 2017/12/29/2017-12-29-00000001.json"
- "El documento no contiene un Kontoauszug"

La implementación puede usar `logging` internamente, pero el dominio
solo conoce los eventos de negocio. En los tests se acumulan en memoria.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Entrada ---

    @abstractmethod
    def log_file_received(self, file_path: Path) -> None:
        """Registra que se recibió un archivo para procesar."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo fue descartado.

        Args:
            file_path: Ruta del archivo descartado.
            reason: Razón del descarte. Ejemplo: "Sin texto extraíble"
        """
        ...

    @abstractmethod
    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        """Registra el inicio de extracción de texto."""
        ...

    # --- Decodificación ---

    @abstractmethod
    def log_statement_not_found(self, file_path: Path) -> None:
        """Registra que el texto no contiene encabezado de Kontoauszug.

        No es un error: el documento simplemente no produce Booking.
        """
        ...

    @abstractmethod
    def log_decode_complete(self, file_path: Path, num_pages: int, num_lines: int) -> None:
        """Registra el fin exitoso de la decodificación.

        Args:
            file_path: Ruta del archivo procesado.
            num_pages: Cantidad de páginas extraídas.
            num_lines: Cantidad de BookingLine decodificadas.
        """
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error que impidió procesar un documento."""
        ...

    # --- Salida ---

    @abstractmethod
    def log_record_written(self, output_path: Path, num_lines: int) -> None:
        """Registra que se escribió un archivo de salida.

        Solo se llama con escrituras reales, nunca con archivos omitidos.
        """
        ...

    @abstractmethod
    def log_record_skipped(self, output_path: Path) -> None:
        """Registra que un archivo de salida ya existía y no se reescribió."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_descartados': int,
                'archivos_con_error': int,
                'total_lineas': int,
                'archivos_escritos': int,
                'archivos_omitidos': int,
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...
