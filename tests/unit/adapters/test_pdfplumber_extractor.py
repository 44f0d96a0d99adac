"""
Tests para el PdfplumberExtractor y la eliminación de mapas ToUnicode.

El PDF de prueba se genera en memoria (una página, fuente Helvetica)
para no guardar binarios en el repositorio.
"""

from pathlib import Path

import pytest
from pdfminer.psparser import LIT
from pdfminer.pdftypes import PDFStream

from kontoauszug.adapters.input.text_extractors.pdfplumber_extractor import (
    PdfplumberExtractor,
    remove_to_unicode_maps,
)
from kontoauszug.domain.exceptions import ExtractionError, FormatoInvalidoError

LINEAS = [
    "Kontoauszug vom 29.12.2017 bis 31.01.2018",
    "Buchung Valuta Vorgang Soll Haben",
]


def _broken_cmap() -> bytes:
    """CMap ToUnicode que traduce todo carácter imprimible a "X"."""
    entries = "\n".join(f"<{code:02X}> <0058>" for code in range(0x20, 0x7F))
    return (
        "/CIDInit /ProcSet findresource begin\n"
        "12 dict begin\n"
        "begincmap\n"
        "/CMapName /Broken-UCS def\n"
        "/CMapType 2 def\n"
        "1 begincodespacerange\n<00> <FF>\nendcodespacerange\n"
        f"{0x7F - 0x20} beginbfchar\n{entries}\nendbfchar\n"
        "endcmap\n"
        "CMapName currentdict /CMap defineresource pop\n"
        "end\nend\n"
    ).encode("ascii")


def _minimal_pdf(lines: list[str], broken_to_unicode: bool = False) -> bytes:
    """Arma un PDF de una página con una línea de texto por elemento.

    Con broken_to_unicode=True la fuente lleva un mapa ToUnicode roto,
    como los Kontoauszüge reales.
    """
    ops = ["BT", "/F1 10 Tf", "12 TL", "50 750 Td"]
    for line in lines:
        ops.append(f"({line}) Tj")
        ops.append("T*")
    ops.append("ET")
    content = "\n".join(ops).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 595 842] "
        b"/Resources << /Font << /F1 4 0 R >> >> /Contents 5 0 R >>",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding"
        + (b" /ToUnicode 6 0 R" if broken_to_unicode else b"")
        + b" >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
    ]
    if broken_to_unicode:
        cmap = _broken_cmap()
        objects.append(b"<< /Length %d >>\nstream\n" % len(cmap) + cmap + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


class TestPdfplumberExtractor:
    """Pruebas de extracción de texto."""

    @pytest.fixture
    def extractor(self):
        return PdfplumberExtractor()

    def test_nombre_y_extensiones(self, extractor):
        assert extractor.name == "pdfplumber"
        assert extractor.can_handle(Path("Kontoauszug.pdf")) is True
        assert extractor.can_handle(Path("Kontoauszug.PDF")) is True
        assert extractor.can_handle(Path("Kontoauszug.txt")) is False

    def test_extrae_el_texto_de_la_pagina(self, extractor, tmp_path):
        pdf = tmp_path / "Kontoauszug.pdf"
        pdf.write_bytes(_minimal_pdf(LINEAS))

        pages = extractor.extract(pdf)

        assert len(pages) == 1
        assert pages[0].page_num == 1
        assert "Kontoauszug vom 29.12.2017 bis 31.01.2018" in pages[0].lines
        assert "Buchung Valuta Vorgang Soll Haben" in pages[0].lines

    def test_mapa_to_unicode_roto_se_ignora(self, extractor, tmp_path):
        pdf = tmp_path / "Kontoauszug.pdf"
        pdf.write_bytes(_minimal_pdf(LINEAS, broken_to_unicode=True))

        pages = extractor.extract(pdf)

        assert "Kontoauszug vom 29.12.2017 bis 31.01.2018" in pages[0].lines
        assert "Buchung Valuta Vorgang Soll Haben" in pages[0].lines

    def test_con_el_mapa_to_unicode_el_texto_sale_ilegible(self, tmp_path):
        pdf = tmp_path / "Kontoauszug.pdf"
        pdf.write_bytes(_minimal_pdf(LINEAS, broken_to_unicode=True))

        pages = PdfplumberExtractor(remove_to_unicode=False).extract(pdf)

        assert "Buchung Valuta Vorgang Soll Haben" not in pages[0].lines
        assert set(pages[0].text.replace("\n", "").replace(" ", "")) == {"X"}

    def test_archivo_inexistente(self, extractor, tmp_path):
        with pytest.raises(FormatoInvalidoError):
            extractor.extract(tmp_path / "no_existe.pdf")

    def test_pdf_corrupto(self, extractor, tmp_path):
        pdf = tmp_path / "roto.pdf"
        pdf.write_bytes(b"esto no es un PDF")

        with pytest.raises(ExtractionError):
            extractor.extract(pdf)


class TestRemoveToUnicodeMaps:
    """Pruebas para remove_to_unicode_maps sobre objetos de pdfminer."""

    def test_elimina_de_las_fuentes_de_la_pagina(self):
        font_a = {"Type": LIT("Font"), "ToUnicode": object()}
        font_b = {"Type": LIT("Font")}
        resources = {"Font": {"F1": font_a, "F2": font_b}}

        assert remove_to_unicode_maps(resources) == 1
        assert "ToUnicode" not in font_a
        assert font_b == {"Type": LIT("Font")}

    def test_recorre_form_xobjects(self):
        inner_font = {"ToUnicode": object()}
        form = PDFStream(
            {"Subtype": LIT("Form"), "Resources": {"Font": {"F9": inner_font}}},
            b"",
        )
        resources = {"Font": {"F1": {"ToUnicode": object()}}, "XObject": {"X1": form}}

        assert remove_to_unicode_maps(resources) == 2
        assert "ToUnicode" not in inner_font

    def test_ignora_imagenes(self):
        image = PDFStream(
            {"Subtype": LIT("Image"), "Resources": {"Font": {"F9": {"ToUnicode": 1}}}},
            b"",
        )
        assert remove_to_unicode_maps({"XObject": {"Im1": image}}) == 0

    def test_recursos_compartidos_se_visitan_una_vez(self):
        shared = {"Font": {"F1": {"ToUnicode": object()}}}
        form = PDFStream({"Subtype": LIT("Form"), "Resources": shared}, b"")
        shared["XObject"] = {"X1": form}

        assert remove_to_unicode_maps(shared) == 1

    def test_sin_recursos(self):
        assert remove_to_unicode_maps(None) == 0
        assert remove_to_unicode_maps({}) == 0
