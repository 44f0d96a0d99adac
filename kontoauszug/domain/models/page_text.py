"""
Modelo de dominio: Texto extraído de una página.

Este modelo actúa como el "puente" entre los adaptadores de extracción
de texto (pdfplumber, archivos .txt) y el StatementDecoder.

¿Por qué no pasar un string crudo? Porque el número de página permite
rastrear en qué página se encontró cada línea y reportar cuántas
páginas tenía el documento en la bitácora.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageText:
    """Texto extraído de una página individual de un documento."""

    page_num: int
    """Número de página (1-indexed). La primera página es 1, no 0."""

    text: str
    """Texto completo de la página en orden de lectura (arriba→abajo,
    izquierda→derecha). Puede contener saltos de línea."""

    @property
    def is_empty(self) -> bool:
        """Indica si la página no tiene texto útil."""
        return not self.text.strip()

    @property
    def lines(self) -> list[str]:
        """Devuelve el texto dividido en líneas."""
        return self.text.split("\n")
