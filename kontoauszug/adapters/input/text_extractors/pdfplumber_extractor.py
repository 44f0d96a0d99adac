"""
Adaptador de entrada: Extractor de texto usando pdfplumber.

pdfplumber (sobre pdfminer.six) lee el texto embebido de cada página y
lo devuelve ordenado por posición: de arriba hacia abajo y de izquierda
a derecha, que es el orden que espera el StatementDecoder.

PROBLEMA DE ESTOS PDFs:
Las fuentes de los Kontoauszüge traen un mapa ToUnicode roto: con él,
el texto extraído sale con caracteres equivocados. Sin él, pdfminer
usa la codificación simple de la fuente (WinAnsiEncoding), que sí es
correcta. Por eso, ANTES de extraer, se elimina la entrada /ToUnicode
de cada fuente de cada página, incluidas las fuentes de los Form
XObjects anidados.

pdfminer cachea los objetos resueltos del documento, así que el
diccionario de fuente modificado aquí es el mismo que usa después el
intérprete de la página.
"""

from pathlib import Path
from typing import Any

import pdfplumber
from pdfminer.pdfparser import PDFSyntaxError
from pdfminer.pdftypes import PDFStream, resolve1

from kontoauszug.domain.exceptions import ExtractionError, FormatoInvalidoError
from kontoauszug.domain.models.page_text import PageText
from kontoauszug.domain.ports.text_extractor import TextExtractor
from kontoauszug.domain.shared.text_cleaner import clean_pdf_text


class PdfplumberExtractor(TextExtractor):
    """Extrae texto de PDFs nativos usando pdfplumber."""

    def __init__(self, remove_to_unicode: bool = True) -> None:
        """
        Args:
            remove_to_unicode: Eliminar los mapas ToUnicode de las fuentes
                               antes de extraer. Por defecto True porque es
                               imprescindible para esta familia de PDFs.
        """
        self._remove_to_unicode = remove_to_unicode

    @property
    def name(self) -> str:
        return "pdfplumber"

    def can_handle(self, file_path: Path) -> bool:
        """Puede manejar archivos con extensión .pdf."""
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> list[PageText]:
        """Extrae el texto de cada página del PDF.

        Returns:
            Lista de PageText, una por página. Páginas sin texto se incluyen
            con text="" para mantener la correspondencia page_num ↔ índice.

        Raises:
            ExtractionError: Si pdfplumber no puede abrir el PDF
                            (corrupto, protegido con contraseña, etc.)
            FormatoInvalidoError: Si el archivo no existe.
        """
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "PDF", "El archivo no existe")

        pages: list[PageText] = []

        try:
            # El `with` garantiza que el documento se cierra también
            # cuando la extracción falla a mitad de camino.
            with pdfplumber.open(file_path) as pdf:
                if len(pdf.pages) == 0:
                    raise ExtractionError(str(file_path), "El PDF no tiene páginas")

                if self._remove_to_unicode:
                    for page in pdf.pages:
                        remove_to_unicode_maps(page.page_obj.resources)

                for page_num, page in enumerate(pdf.pages, start=1):
                    raw_text = page.extract_text() or ""
                    pages.append(PageText(page_num=page_num, text=clean_pdf_text(raw_text)))

        except ExtractionError:
            raise
        except PDFSyntaxError as e:
            raise ExtractionError(str(file_path), f"PDF corrupto o inválido: {e}")
        except Exception as e:
            # Captura genérica para errores inesperados de pdfplumber
            # (PDFs protegidos, encoding roto, etc.)
            if "password" in str(e).lower() or "encrypt" in str(e).lower():
                raise ExtractionError(str(file_path), "El PDF está protegido con contraseña")
            raise ExtractionError(str(file_path), str(e))

        return pages


def remove_to_unicode_maps(resources: Any, _seen: set[int] | None = None) -> int:
    """Elimina /ToUnicode de todas las fuentes de un diccionario de recursos.

    Recorre también los Form XObjects, que tienen sus propios recursos.

    Args:
        resources: Diccionario /Resources de una página (o referencia a él).

    Returns:
        Cantidad de mapas ToUnicode eliminados.
    """
    seen = _seen if _seen is not None else set()
    resources = resolve1(resources)
    if not isinstance(resources, dict) or id(resources) in seen:
        return 0
    seen.add(id(resources))

    removed = 0

    fonts = resolve1(resources.get("Font"))
    if isinstance(fonts, dict):
        for font in fonts.values():
            font = resolve1(font)
            if isinstance(font, dict) and font.pop("ToUnicode", None) is not None:
                removed += 1

    xobjects = resolve1(resources.get("XObject"))
    if isinstance(xobjects, dict):
        for xobject in xobjects.values():
            xobject = resolve1(xobject)
            if isinstance(xobject, PDFStream) and _is_form(xobject):
                removed += remove_to_unicode_maps(xobject.get("Resources"), seen)

    return removed


def _is_form(xobject: PDFStream) -> bool:
    subtype = resolve1(xobject.get("Subtype"))
    return getattr(subtype, "name", subtype) == "Form"
