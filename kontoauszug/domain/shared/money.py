"""
Utilidades para manejo de montos monetarios.

CONTEXTO DEL PROBLEMA:
Los Kontoauszüge usan el formato alemán, con el signo separado del
número por un espacio:

    "- 1.234,56"   → cargo ("Soll")
    "+ 75,00"      → abono ("Haben")

El punto es separador de miles y la coma es separador decimal, siempre
con EXACTAMENTE dos decimales.

SOLUCIÓN:
Como los decimales son siempre dos, basta con quitar espacios, puntos y
comas para obtener el monto en centavos: "- 1.234,56" → "-123456".
Nunca pasa por float ni por Decimal.

ADVERTENCIA: esto NO es un parser general de monedas. Con precisión
decimal variable ("1,5") daría un resultado incorrecto, por eso
parse_minor_units valida el formato antes de convertir.
"""

import re

_AMOUNT_PATTERN: re.Pattern[str] = re.compile(r"^[-+] ?\d+(?:\.\d+)*,\d{2}$")

_SEPARATORS: re.Pattern[str] = re.compile(r"[ .,]")


def parse_minor_units(text: str) -> int:
    """Convierte un monto con formato alemán a centavos (int con signo).

    Args:
        text: Monto tal como aparece en el Kontoauszug.

    Returns:
        Entero con el monto en centavos. Negativo para cargos.

    Raises:
        ValueError: Si el texto no tiene el formato esperado. El mensaje
                    incluye el valor original para debugging.

    Ejemplos:
        >>> parse_minor_units("- 600,00")
        -60000
        >>> parse_minor_units("+ 1.234,56")
        123456
        >>> parse_minor_units("- 0,01")
        -1
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_minor_units espera str, recibió {type(text).__name__}")

    cleaned = text.strip()
    if not _AMOUNT_PATTERN.match(cleaned):
        raise ValueError(f"Monto con formato inesperado: '{text}'")

    return int(_SEPARATORS.sub("", cleaned))

