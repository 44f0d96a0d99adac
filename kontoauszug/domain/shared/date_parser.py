"""
Conversión de fechas del Kontoauszug.

CONTEXTO DEL PROBLEMA:
El encabezado trae el periodo con año completo:

    "Kontoauszug vom 29.12.2017 bis 31.01.2018"

pero cada movimiento solo trae día y mes:

    "02.01. 29.12. SEPA Ueberweisung - 600,00"

El año de cada fecha parcial se deduce del periodo. Si el periodo cruza
el fin de año, los meses "altos" (≥ mes inicial) pertenecen al año
inicial y los "bajos" al año final.

LIMITACIÓN CONOCIDA:
Solo resuelve UN cruce de año. Un estado de cuenta de más de ~11 meses
se resolvería mal. No existen en la práctica, así que no se corrige.
"""

import re
from datetime import date

_PARTIAL_DATE: re.Pattern[str] = re.compile(r"^(\d{2})\.(\d{2})\.$")

_FULL_DATE: re.Pattern[str] = re.compile(r"^(\d{2})\.(\d{2})\.(\d{4})$")


def complete_partial_date(token: str, period_from: date, period_to: date) -> date:
    """Completa una fecha "dd.mm." con el año que corresponde según el periodo.

    La comparación se hace entre los textos "mm." (dos dígitos y punto),
    igual que en el formato impreso: si el mes del token es mayor o igual
    al mes de period_from, la fecha es del año de period_from; si no, del
    año de period_to.

    Args:
        token: Fecha parcial, ej: "02.01.".
        period_from: Inicio del periodo del Kontoauszug.
        period_to: Fin del periodo del Kontoauszug.

    Returns:
        Objeto date con el año resuelto.

    Raises:
        ValueError: Si el token no tiene formato "dd.mm." o la fecha no
                    existe (ej: "30.02.").

    Ejemplos:
        >>> complete_partial_date("02.01.", date(2017, 12, 29), date(2018, 1, 31))
        date(2018, 1, 2)
        >>> complete_partial_date("29.12.", date(2017, 12, 29), date(2018, 1, 31))
        date(2017, 12, 29)
    """
    m = _PARTIAL_DATE.match(token.strip())
    if not m:
        raise ValueError(f"Fecha parcial con formato inesperado: '{token}' (se esperaba dd.mm.)")

    token_month = token.strip()[3:]
    from_month = f"{period_from.month:02d}."
    year = period_from.year if token_month >= from_month else period_to.year

    return _build_date(year, int(m.group(2)), int(m.group(1)), token)


def parse_full_date(text: str) -> date:
    """Parsea una fecha completa "dd.mm.yyyy".

    Ejemplos:
        >>> parse_full_date("29.12.2017")
        date(2017, 12, 29)
    """
    m = _FULL_DATE.match(text.strip())
    if not m:
        raise ValueError(f"Fecha con formato inesperado: '{text}' (se esperaba dd.mm.yyyy)")
    return _build_date(int(m.group(3)), int(m.group(2)), int(m.group(1)), text)


def format_date(value: date) -> str:
    """Formatea una fecha como "dd.mm.yyyy" (formato del Kontoauszug)."""
    return value.strftime("%d.%m.%Y")


def _build_date(year: int, month: int, day: int, original_text: str) -> date:
    """Construye un objeto date con un mensaje que incluye el texto original."""
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day} ({e})"
        )
