"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos y un resumen
final. Escribe en stderr por defecto, porque stdout queda reservado para
el flujo JSON del modo por defecto.

- verbose: imprime cada archivo de salida escrito.
- quiet: no imprime el resumen final.
"""

import sys
from pathlib import Path
from typing import TextIO

from kontoauszug.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(
        self,
        stream: TextIO | None = None,
        verbose: bool = False,
        quiet: bool = False,
    ) -> None:
        self._stream = stream
        self._verbose = verbose
        self._quiet = quiet
        self._archivos_recibidos: int = 0
        self._archivos_procesados: int = 0
        self._archivos_descartados: int = 0
        self._archivos_escritos: int = 0
        self._archivos_omitidos: int = 0
        self._total_lineas: int = 0
        self._errores: list[dict] = []

    def _print(self, message: str) -> None:
        print(message, file=self._stream if self._stream is not None else sys.stderr)

    # --- Entrada ---

    def log_file_received(self, file_path: Path) -> None:
        self._archivos_recibidos += 1
        if self._verbose:
            self._print(f"  📄 Recibido: {file_path}")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        self._print(f"  ⏭️  Descartado: {file_path.name} ({reason})")

    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        if self._verbose:
            self._print(f"  🔍 Extrayendo texto ({extractor_name}): {file_path.name}")

    # --- Decodificación ---

    def log_statement_not_found(self, file_path: Path) -> None:
        self._archivos_descartados += 1
        self._print(f"  ⏭️  Sin Kontoauszug: {file_path.name}")

    def log_decode_complete(self, file_path: Path, num_pages: int, num_lines: int) -> None:
        self._archivos_procesados += 1
        self._total_lineas += num_lines
        if self._verbose:
            self._print(
                f"  ✅ Decodificado: {file_path.name} - "
                f"{num_pages} páginas, {num_lines} movimientos"
            )

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path), "error": str(error)})
        self._print(f"  ❌ Error: {file_path} - {error}")

    # --- Salida ---

    def log_record_written(self, output_path: Path, num_lines: int) -> None:
        self._archivos_escritos += 1
        if self._verbose:
            self._print(str(output_path))

    def log_record_skipped(self, output_path: Path) -> None:
        self._archivos_omitidos += 1

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "archivos_descartados": self._archivos_descartados,
            "archivos_con_error": len(self._errores),
            "total_lineas": self._total_lineas,
            "archivos_escritos": self._archivos_escritos,
            "archivos_omitidos": self._archivos_omitidos,
            "errores": self._errores,
        }

    def print_summary(self, lines_emitted: int) -> None:
        """Imprime el resumen final del procesamiento.

        Args:
            lines_emitted: Movimientos realmente emitidos (contador del
                           OutputRouter; no cuenta destinos omitidos).
        """
        if self._quiet:
            return

        self._print("=" * 60)
        self._print(f"  Archivos recibidos:   {self._archivos_recibidos}")
        self._print(f"  Archivos procesados:  {self._archivos_procesados}")
        self._print(f"  Archivos descartados: {self._archivos_descartados}")
        self._print(f"  Archivos con error:   {len(self._errores)}")
        if self._archivos_escritos or self._archivos_omitidos:
            self._print(f"  Archivos escritos:    {self._archivos_escritos}")
            self._print(f"  Archivos omitidos:    {self._archivos_omitidos}")

        if self._errores:
            self._print("\n  ERRORES:")
            for err in self._errores:
                self._print(f"    - {err['archivo']}: {err['error']}")

        self._print(f"Number of booking lines processed: {lines_emitted}")
        self._print("=" * 60)
