"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from kontoauszug.domain.ports import TextExtractor, OutputWriter, ProcessLogger
"""

from kontoauszug.domain.ports.output_writer import OutputWriter
from kontoauszug.domain.ports.process_logger import ProcessLogger
from kontoauszug.domain.ports.text_extractor import TextExtractor

__all__ = [
    "OutputWriter",
    "ProcessLogger",
    "TextExtractor",
]
