"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con el layout estándar de 2 hojas:
- Hoja 1 (Auszuege): una fila por Kontoauszug (origen, periodo,
  cantidad de movimientos, suma).
- Hoja 2 (Buchungen): una fila por movimiento.

En modo flujo los registros se acumulan y el libro consolidado se
escribe al cerrar (close). En modo por documento cada registro genera
su propio libro junto al PDF.

Los montos se escriben en euros (centavos / 100) con formato de dos
decimales; la columna "Centavos" conserva el entero exacto.
"""

from pathlib import Path
from typing import Any

import pandas as pd

from kontoauszug.domain.exceptions import OutputError
from kontoauszug.domain.ports.output_writer import OutputWriter


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def __init__(self, output_file: Path | None = None) -> None:
        """
        Args:
            output_file: Libro consolidado para el modo flujo.
        """
        self._output_file = output_file
        self._pending: list[dict[str, Any]] = []

    @property
    def file_extension(self) -> str:
        return ".xlsx"

    def emit(self, record: dict[str, Any]) -> None:
        if self._output_file is None:
            raise OutputError("<stdout>", "El formato xlsx requiere un archivo de salida")
        self._pending.append(record)

    def write_file(self, path: Path, record: dict[str, Any], overwrite: bool = False) -> bool:
        if path.suffix.lower() != ".xlsx":
            path = path.with_suffix(".xlsx")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Reserva el nombre con creación exclusiva antes de generar el libro.
            if not overwrite:
                with open(path, "x"):
                    pass
        except FileExistsError:
            return False
        except OSError as e:
            raise OutputError(str(path), str(e))

        try:
            self._write_workbook([record], path)
        except OutputError:
            path.unlink(missing_ok=True)
            raise
        return True

    def close(self) -> None:
        """Escribe el libro consolidado con todos los registros emitidos."""
        if self._output_file is None or not self._pending:
            return
        records, self._pending = self._pending, []
        self._write_workbook(records, self._output_file)

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _write_workbook(self, records: list[dict[str, Any]], output_path: Path) -> None:
        try:
            self._escribir_excel(records, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

    def _escribir_excel(self, records: list[dict[str, Any]], output_path: Path) -> None:
        """Genera el archivo Excel con las 2 hojas.

        Acepta registros de Booking (con "lines") y registros de línea
        individuales (modo -bl); estos últimos no generan fila en Auszuege.
        """
        filas_auszuege = []
        filas_buchungen = []

        for record in records:
            if "lines" in record:
                lines = record["lines"]
                filas_auszuege.append(
                    {
                        "Archivo": record["sourceId"],
                        "Desde": record["periodFrom"],
                        "Hasta": record["periodTo"],
                        "Movimientos": len(lines),
                        "Total": sum(line["amountMinorUnits"] for line in lines) / 100,
                    }
                )
                source_id = record["sourceId"]
            else:
                lines = [record]
                source_id = record.get("sourceId", "")

            for line in lines:
                filas_buchungen.append(
                    {
                        "Archivo": line.get("sourceId", source_id),
                        "Linea": line.get("lineIndex"),
                        "Buchung": line["bookingDate"],
                        "Valuta": line["valueDate"],
                        "Vorgang": line["description"],
                        "Monto": line["amountMinorUnits"] / 100,
                        "Centavos": line["amountMinorUnits"],
                        "Texto monto": line["amountText"],
                    }
                )

        df_auszuege = pd.DataFrame(
            filas_auszuege, columns=["Archivo", "Desde", "Hasta", "Movimientos", "Total"]
        )
        df_buchungen = pd.DataFrame(
            filas_buchungen,
            columns=[
                "Archivo",
                "Linea",
                "Buchung",
                "Valuta",
                "Vorgang",
                "Monto",
                "Centavos",
                "Texto monto",
            ],
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_auszuege.to_excel(writer, index=False, sheet_name="Auszuege")
            df_buchungen.to_excel(writer, index=False, sheet_name="Buchungen")

            workbook = writer.book
            ws_auszuege = writer.sheets["Auszuege"]
            ws_buchungen = writer.sheets["Buchungen"]

            money_format = workbook.add_format({"num_format": "#,##0.00"})

            # --- Formato Hoja Auszuege ---
            ws_auszuege.set_column("A:A", 40)  # Archivo
            ws_auszuege.set_column("B:C", 12)  # Periodo
            ws_auszuege.set_column("D:D", 12)  # Movimientos
            ws_auszuege.set_column("E:E", 15, money_format)  # Total

            # --- Formato Hoja Buchungen ---
            ws_buchungen.set_column("A:A", 40)  # Archivo
            ws_buchungen.set_column("B:B", 6)  # Linea
            ws_buchungen.set_column("C:D", 12)  # Fechas
            ws_buchungen.set_column("E:E", 60)  # Vorgang
            ws_buchungen.set_column("F:F", 15, money_format)  # Monto
            ws_buchungen.set_column("G:H", 14)  # Centavos / Texto
