"""
Adaptador de salida: Escritor de JSON.

Dos formas de salida:
- emit(): cada registro se escribe en el flujo único (stdout o -o),
  separado del siguiente por una línea en blanco. Con un solo documento
  el resultado es un JSON válido; con varios es una concatenación de
  documentos JSON, apta para post-procesar con herramientas como `jq`.
- write_file(): cada registro en su propio archivo .json.

JSON indentado (2 espacios) por defecto; una sola línea con one_line=True.

La creación de archivos usa el modo exclusivo "x" de open(): comprobar
que el archivo no existe y crearlo es una sola operación del sistema de
archivos, así dos procesos nunca escriben el mismo destino a la vez.
"""

import json
import sys
from pathlib import Path
from typing import Any, TextIO

from kontoauszug.domain.exceptions import OutputError
from kontoauszug.domain.ports.output_writer import OutputWriter


class JsonWriter(OutputWriter):
    """Serializa registros como JSON."""

    def __init__(
        self,
        stream: TextIO | None = None,
        output_file: Path | None = None,
        one_line: bool = False,
    ) -> None:
        """
        Args:
            stream: Flujo para emit(). Por defecto sys.stdout.
            output_file: Si se indica, emit() escribe en este archivo (se
                         abre al primer registro y se cierra en close()).
            one_line: JSON compacto en una línea.
        """
        self._stream = stream
        self._output_file = output_file
        self._one_line = one_line
        self._owned_stream: TextIO | None = None

    @property
    def file_extension(self) -> str:
        return ".json"

    def dumps(self, record: dict[str, Any]) -> str:
        if self._one_line:
            return json.dumps(record, ensure_ascii=False)
        return json.dumps(record, ensure_ascii=False, indent=2)

    def emit(self, record: dict[str, Any]) -> None:
        stream = self._get_stream()
        try:
            stream.write(self.dumps(record))
            stream.write("\n" if self._one_line else "\n\n")
        except (OSError, TypeError, ValueError) as e:
            raise OutputError(str(self._output_file or "<stdout>"), str(e))

    def write_file(self, path: Path, record: dict[str, Any], overwrite: bool = False) -> bool:
        try:
            content = self.dumps(record) + "\n"
        except (TypeError, ValueError) as e:
            raise OutputError(str(path), f"Registro no serializable: {e}")

        mode = "w" if overwrite else "x"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            f = open(path, mode, encoding="utf-8")
        except FileExistsError:
            return False
        except OSError as e:
            raise OutputError(str(path), str(e))

        try:
            with f:
                f.write(content)
        except OSError as e:
            # No puede quedar un archivo parcial en el destino.
            path.unlink(missing_ok=True)
            raise OutputError(str(path), str(e))

        return True

    def close(self) -> None:
        if self._owned_stream is not None:
            self._owned_stream.close()
            self._owned_stream = None

    def _get_stream(self) -> TextIO:
        if self._output_file is not None:
            if self._owned_stream is None:
                try:
                    self._owned_stream = open(self._output_file, "w", encoding="utf-8")
                except OSError as e:
                    raise OutputError(str(self._output_file), str(e))
            return self._owned_stream
        return self._stream if self._stream is not None else sys.stdout
