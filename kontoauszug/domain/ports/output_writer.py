"""
Puerto de salida: Escritor de registros.

El OutputRouter decide QUÉ registros se emiten y A DÓNDE van; este
puerto decide CÓMO se serializan y se persisten (JSON, Excel, ...).

Un registro es un dict ya armado con los nombres de campo finales
(ver kontoauszug.domain.services.records). El escritor no interpreta
su contenido.

¿Por qué write_file devuelve bool en vez de tener exists() + write()?
Porque "comprobar que no existe" y "escribir" tienen que ser UNA sola
operación. Si dos procesos deciden a la vez que el archivo no existe,
con dos pasos separados ambos escribirían; con una creación exclusiva
solo gana el primero.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class OutputWriter(ABC):
    """Interfaz para serializar y persistir registros."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extensión de los archivos generados, con punto. Ej: '.json'."""
        ...

    @abstractmethod
    def emit(self, record: dict[str, Any]) -> None:
        """Agrega un registro al flujo de salida único (modo flujo).

        Raises:
            OutputError: Si falla la escritura.
        """
        ...

    @abstractmethod
    def write_file(self, path: Path, record: dict[str, Any], overwrite: bool = False) -> bool:
        """Escribe un registro en su propio archivo.

        Crea los directorios intermedios si hace falta.

        Args:
            path: Ruta destino (ya incluye la extensión).
            record: Registro a serializar.
            overwrite: Si False y el archivo ya existe, no se toca.

        Returns:
            True si se escribió, False si se omitió porque ya existía.

        Raises:
            OutputError: Si falla la escritura.
        """
        ...

    def close(self) -> None:
        """Libera recursos del flujo de salida. Por defecto no hace nada."""
