"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar el texto extraído de PDFs antes
de que el StatementDecoder lo procese línea por línea.

Estas funciones NO tienen lógica de negocio (no saben de Kontoauszüge
ni de montos). Solo operan sobre strings puros.
"""


def remove_non_printable(text: str) -> str:
    """Reemplaza caracteres no imprimibles por espacio (excepto \\n, \\r, \\t).

    Con el mapa ToUnicode eliminado, algunas fuentes producen caracteres
    de control sueltos que romperían los regex de línea completa.
    """
    return "".join(char if (char.isprintable() or char in "\n\r\t") else " " for char in text)


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def clean_pdf_text(text: str) -> str:
    """Aplica las limpiezas comunes en secuencia.

    Los text extractors la llaman después de extraer el texto crudo.
    Conserva los \\n: el decoder procesa línea por línea.
    """
    text = remove_non_printable(text)
    text = normalize_line_endings(text)
    return text
