"""
Tests para el CLI (kontoauszug.cli.main.run).

Se usan volcados .txt como entrada; el ensamblado es el mismo que con
PDFs, solo cambia el extractor que los atiende.
"""

import json

import pytest

from kontoauszug.cli.main import run

KONTOAUSZUG = "\n".join(
    [
        "Kontoauszug vom 29.12.2017 bis 31.01.2018",
        "Buchung Valuta Vorgang Soll Haben",
        "02.01. 29.12. SEPA Ueberweisung - 600,00",
        "29.12. 29.12. Dauerauftrag - 75,00",
        "15.01. 15.01. Gutschrift + 1.234,56",
        "Filialnummer Kontonummer Neuer Saldo",
    ]
)


@pytest.fixture
def documento(tmp_path):
    doc = tmp_path / "Kontoauszug_2018_01.txt"
    doc.write_text(KONTOAUSZUG, encoding="utf-8")
    return doc


class TestRun:
    def test_flujo_a_stdout(self, documento, capsys):
        assert run([str(documento)]) == 0

        captured = capsys.readouterr()
        record = json.loads(captured.out)
        assert record["periodFrom"] == "29.12.2017"
        assert [line["bookingDate"] for line in record["lines"]] == [
            "02.01.2018",
            "29.12.2017",
            "15.01.2018",
        ]
        assert "Number of booking lines processed: 3" in captured.err

    def test_flujo_por_linea_en_una_linea(self, documento, capsys):
        assert run(["-bl", "-1", "-q", str(documento)]) == 0

        captured = capsys.readouterr()
        records = [json.loads(linea) for linea in captured.out.splitlines()]
        assert [r["lineIndex"] for r in records] == [0, 1, 2]
        assert captured.err == ""

    def test_archivo_de_salida(self, documento, tmp_path, capsys):
        destino = tmp_path / "salida.json"
        assert run(["-q", "-o", str(destino), str(documento)]) == 0

        assert capsys.readouterr().out == ""
        assert len(json.loads(destino.read_text(encoding="utf-8"))["lines"]) == 3

    def test_modo_por_fecha(self, documento, tmp_path):
        base = tmp_path / "out"
        base.mkdir()

        assert run(["-q", "-d", str(base), str(documento)]) == 0

        creados = sorted(p.relative_to(base).as_posix() for p in base.rglob("*.json"))
        assert creados == [
            "2017/12/29/2017-12-29-00000001.json",
            "2017/12/29/2017-12-29-00000002.json",
            "2018/01/15/2018-01-15-00000001.json",
        ]

    def test_modo_por_fecha_segunda_corrida_omite(self, documento, tmp_path, capsys):
        base = tmp_path / "out"
        base.mkdir()

        run(["-q", "-d", str(base), str(documento)])
        assert run(["-d", str(base), str(documento)]) == 0

        assert "Number of booking lines processed: 0" in capsys.readouterr().err

    def test_modo_por_documento(self, documento, tmp_path):
        assert run(["-q", "-j", str(documento)]) == 0

        destino = tmp_path / "Kontoauszug_2018_01.json"
        assert json.loads(destino.read_text(encoding="utf-8"))["sourceId"] == str(documento)

    def test_argumentos_comentados_se_ignoran(self, documento, capsys):
        assert run(["-#u", str(documento), "#no_existe.pdf"]) == 0
        assert json.loads(capsys.readouterr().out)["lines"]

    # === Errores ===

    def test_opciones_incompatibles(self, documento, capsys):
        assert run(["-j", "-bl", str(documento)]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Configuración inválida" in captured.err

    def test_directorio_base_inexistente(self, documento, tmp_path):
        assert run(["-d", str(tmp_path / "no_existe"), str(documento)]) == 2

    def test_ruta_de_entrada_inexistente(self, tmp_path, capsys):
        assert run([str(tmp_path / "no_existe.pdf")]) == 2
        assert "La ruta no existe" in capsys.readouterr().err

    def test_documento_roto_devuelve_1(self, tmp_path, capsys):
        roto = tmp_path / "roto.pdf"
        roto.write_bytes(b"esto no es un PDF")

        assert run(["-q", str(roto)]) == 1
        assert "Error" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run(["-V"])
        assert exc_info.value.code == 0
        assert "kontoauszug-reader 1.1.0" in capsys.readouterr().out
