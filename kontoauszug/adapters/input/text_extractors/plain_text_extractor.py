"""
Adaptador de entrada: Extractor de texto ya extraído (.txt).

Permite volver a decodificar un Kontoauszug a partir de un volcado de
texto (por ejemplo, guardado con otra herramienta o adjuntado a un
reporte de error) sin tener el PDF original.

El archivo completo se trata como una sola página. Los caracteres
form-feed (\\f), que usan algunas herramientas como separador de
páginas, se convierten en páginas separadas.
"""

from pathlib import Path

from kontoauszug.domain.exceptions import ExtractionError, FormatoInvalidoError
from kontoauszug.domain.models.page_text import PageText
from kontoauszug.domain.ports.text_extractor import TextExtractor
from kontoauszug.domain.shared.text_cleaner import clean_pdf_text


class PlainTextExtractor(TextExtractor):
    """Lee texto plano en orden de lectura."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    @property
    def name(self) -> str:
        return "plain-text"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".txt"

    def extract(self, file_path: Path) -> list[PageText]:
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "TXT", "El archivo no existe")

        try:
            raw_text = file_path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ExtractionError(str(file_path), str(e))

        return [
            PageText(page_num=page_num, text=clean_pdf_text(chunk))
            for page_num, chunk in enumerate(raw_text.split("\f"), start=1)
        ]
