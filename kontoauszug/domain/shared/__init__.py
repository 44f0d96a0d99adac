"""
Utilidades compartidas del dominio.

Estas funciones no dependen de ninguna librería externa. Solo operan
sobre tipos nativos de Python.

Uso:
    from kontoauszug.domain.shared.money import parse_minor_units
    from kontoauszug.domain.shared.date_parser import complete_partial_date, parse_full_date
    from kontoauszug.domain.shared.text_cleaner import clean_pdf_text
"""
