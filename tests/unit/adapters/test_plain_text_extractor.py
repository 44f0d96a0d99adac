"""
Tests para el PlainTextExtractor.
"""

from pathlib import Path

import pytest

from kontoauszug.adapters.input.text_extractors.plain_text_extractor import PlainTextExtractor
from kontoauszug.domain.exceptions import ExtractionError, FormatoInvalidoError


class TestPlainTextExtractor:
    @pytest.fixture
    def extractor(self):
        return PlainTextExtractor()

    def test_solo_maneja_txt(self, extractor):
        assert extractor.name == "plain-text"
        assert extractor.can_handle(Path("volcado.txt")) is True
        assert extractor.can_handle(Path("VOLCADO.TXT")) is True
        assert extractor.can_handle(Path("Kontoauszug.pdf")) is False

    def test_una_pagina(self, extractor, tmp_path):
        doc = tmp_path / "volcado.txt"
        doc.write_text("Kontoauszug vom 29.12.2017 bis 31.01.2018\nBuchung", encoding="utf-8")

        pages = extractor.extract(doc)

        assert len(pages) == 1
        assert pages[0].lines == ["Kontoauszug vom 29.12.2017 bis 31.01.2018", "Buchung"]

    def test_form_feed_separa_paginas(self, extractor, tmp_path):
        doc = tmp_path / "volcado.txt"
        doc.write_text("Seite 1\fSeite 2\fSeite 3", encoding="utf-8")

        pages = extractor.extract(doc)

        assert [p.page_num for p in pages] == [1, 2, 3]
        assert [p.text for p in pages] == ["Seite 1", "Seite 2", "Seite 3"]

    def test_normaliza_saltos_de_linea(self, extractor, tmp_path):
        doc = tmp_path / "volcado.txt"
        doc.write_bytes(b"uno\r\ndos\rtres")

        assert extractor.extract(doc)[0].lines == ["uno", "dos", "tres"]

    def test_archivo_inexistente(self, extractor, tmp_path):
        with pytest.raises(FormatoInvalidoError):
            extractor.extract(tmp_path / "no_existe.txt")

    def test_codificacion_invalida(self, extractor, tmp_path):
        doc = tmp_path / "latin1.txt"
        doc.write_bytes("Überweisung".encode("latin-1"))

        with pytest.raises(ExtractionError):
            extractor.extract(doc)

    def test_otra_codificacion(self, tmp_path):
        doc = tmp_path / "latin1.txt"
        doc.write_bytes("Überweisung".encode("latin-1"))

        pages = PlainTextExtractor(encoding="latin-1").extract(doc)

        assert pages[0].text == "Überweisung"
