"""
kontoauszug-reader: decodifica Kontoauszüge (PDF) en registros JSON.
"""

__version__ = "1.1.0"
