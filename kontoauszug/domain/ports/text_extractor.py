"""
Puerto de entrada: Extractor de texto.

Define el contrato para extraer texto de un archivo. Cada tipo de
archivo tiene su propio adaptador que implementa este puerto:

    TextExtractor (interfaz)
    ├── PdfplumberExtractor     → PDFs (sin mapas ToUnicode)
    └── PlainTextExtractor      → Texto ya extraído (.txt)

El texto devuelto debe estar en orden de lectura: de arriba hacia abajo
y de izquierda a derecha. El StatementDecoder depende de ese orden.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from kontoauszug.domain.models.page_text import PageText


class TextExtractor(ABC):
    """Interfaz para extraer texto de un archivo."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este extractor puede manejar el archivo dado.

        El StatementProcessor usa el primer extractor cuyo can_handle
        devuelva True.
        """
        ...

    @abstractmethod
    def extract(self, file_path: Path) -> list[PageText]:
        """Extrae el texto del archivo, separado por páginas.

        El recurso subyacente (handle del documento) debe quedar liberado
        al salir de este método, también cuando la extracción falla.

        Args:
            file_path: Ruta al archivo del cual extraer texto.

        Returns:
            Lista de PageText, una por cada página del documento.

        Raises:
            ExtractionError: Si falla la extracción (archivo corrupto,
                            protegido con contraseña, etc.)
            FormatoInvalidoError: Si el archivo no existe o no es del tipo
                                  esperado.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del extractor. Para la bitácora.

        Ejemplo: 'pdfplumber', 'plain-text'
        """
        ...
