"""
Punto de entrada CLI: kontoauszug-reader.

Uso:
    # Todos los movimientos como flujo JSON en stdout
    kontoauszug-reader Kontoauszug_2018_01.pdf

    # Una carpeta, recursiva, solo archivos "Kontoauszug_*", a un archivo
    kontoauszug-reader -r -p Kontoauszug_ -o buchungen.json /ruta/pdfs

    # Un archivo por movimiento en <base>/<yyyy>/<mm>/<dd>/
    kontoauszug-reader -d /ruta/salida /ruta/pdfs

    # Un .json junto a cada PDF, reescribiendo los existentes
    kontoauszug-reader -j -u /ruta/pdfs

Convenciones de la línea de comandos:
- `--` termina las opciones.
- Los argumentos que empiezan con `#` se ignoran (argumentos comentados),
  igual que las opciones que empiezan con `-#`.

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
crea las instancias concretas (PdfplumberExtractor, JsonWriter, etc.),
las inyecta en el StatementProcessor y ejecuta el procesamiento.
"""

import argparse
import sys
from pathlib import Path

from kontoauszug import __version__
from kontoauszug.adapters.input.text_extractors.pdfplumber_extractor import (
    PdfplumberExtractor,
)
from kontoauszug.adapters.input.text_extractors.plain_text_extractor import (
    PlainTextExtractor,
)
from kontoauszug.adapters.output.loggers.console_logger import ConsoleLogger
from kontoauszug.adapters.output.writers.excel_writer import ExcelWriter
from kontoauszug.adapters.output.writers.json_writer import JsonWriter
from kontoauszug.domain.exceptions import ConfigurationError, KontoauszugError
from kontoauszug.domain.models.output_config import OutputConfig, RecordFormat
from kontoauszug.domain.ports.output_writer import OutputWriter
from kontoauszug.domain.services.output_router import OutputRouter
from kontoauszug.domain.services.statement_decoder import StatementDecoder
from kontoauszug.domain.services.statement_processor import StatementProcessor

EXIT_OK = 0
EXIT_DOCUMENT_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2


def main() -> None:
    """Punto de entrada principal del CLI."""
    sys.exit(run())


def run(argv: list[str] | None = None) -> int:
    """Ejecuta el CLI y devuelve el código de salida.

    Returns:
        0 si todo salió bien, 1 si algún documento falló, 2 si las
        opciones son inválidas.
    """
    args = _parse_args(argv)

    # --- Validar configuración ANTES de tocar ningún documento ---
    try:
        config = OutputConfig.from_options(
            json_mode=args.json_mode,
            base_dir=Path(args.base_dir) if args.base_dir else None,
            output_file=Path(args.output_file) if args.output_file else None,
            line_mode=args.line_mode,
            update=args.update,
            month=args.month,
            booking_date=args.booking_date,
            one_line=args.one_line,
            record_format=args.record_format,
        )
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    inputs = [Path(arg) for arg in args.inputs if not arg.startswith("#")]
    missing = [path for path in inputs if not path.exists()]
    if missing:
        for path in missing:
            print(f"❌ La ruta no existe: {path}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    # --- Ensamblar componentes ---
    logger = ConsoleLogger(verbose=args.verbose, quiet=args.quiet)
    router = OutputRouter(config, _create_writer(config), logger)

    processor = StatementProcessor(
        text_extractors=[
            PdfplumberExtractor(),
            PlainTextExtractor(),
        ],
        decoder=StatementDecoder(strict=args.strict),
        router=router,
        logger=logger,
        fail_fast=args.fail_fast,
    )

    # --- Procesar ---
    try:
        try:
            for path in inputs:
                processor.process_path(path, recurse=args.recurse, prefix=args.prefix)
        finally:
            router.close()
    except KontoauszugError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_DOCUMENT_ERROR

    # --- Resumen final ---
    logger.print_summary(router.lines_emitted)

    return EXIT_DOCUMENT_ERROR if processor.failed_files else EXIT_OK


def _create_writer(config: OutputConfig) -> OutputWriter:
    if config.record_format is RecordFormat.XLSX:
        return ExcelWriter(output_file=config.output_file)
    return JsonWriter(output_file=config.output_file, one_line=config.one_line)


def _strip_ignored_options(argv: list[str]) -> list[str]:
    """Quita las opciones comentadas (-#...) que aparecen antes de `--`."""
    result: list[str] = []
    options = True
    for arg in argv:
        if options and arg == "--":
            options = False
        elif options and arg.startswith("-#"):
            continue
        result.append(arg)
    return result


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="kontoauszug-reader",
        description="Decodifica Kontoauszüge (PDF) en registros JSON legibles por máquina",
        epilog="Ejemplo: kontoauszug-reader -r -p Kontoauszug_ -d /ruta/salida /ruta/pdfs",
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="ARCHIVO",
        help="Archivos PDF (o .txt ya extraídos) y/o carpetas con PDFs",
    )

    # --- Modos de salida ---
    parser.add_argument(
        "-o",
        dest="output_file",
        help="Archivo de salida para el flujo de registros (por defecto stdout)",
    )
    parser.add_argument(
        "-d",
        dest="base_dir",
        help="Directorio base: un archivo por movimiento en <yyyy>/<mm>/<dd>/",
    )
    parser.add_argument(
        "-j",
        dest="json_mode",
        action="store_true",
        help="Un archivo .json junto a cada PDF",
    )
    parser.add_argument(
        "-bl",
        dest="line_mode",
        action="store_true",
        help="Emitir un registro por movimiento en vez de uno por Kontoauszug",
    )

    # --- Opciones de los modos de archivo ---
    parser.add_argument(
        "-u",
        dest="update",
        action="store_true",
        help="Reescribir archivos de salida existentes (con -d o -j)",
    )
    parser.add_argument(
        "-m",
        dest="month",
        action="store_true",
        help="Carpetas por mes en vez de por día (con -d)",
    )
    parser.add_argument(
        "-b",
        dest="booking_date",
        action="store_true",
        help="Usar la fecha de Buchung en vez de Valuta para -d",
    )

    # --- Formato ---
    parser.add_argument(
        "-1",
        dest="one_line",
        action="store_true",
        help="JSON en una sola línea en vez de indentado",
    )
    parser.add_argument(
        "--format",
        dest="record_format",
        choices=[f.value for f in RecordFormat],
        default=RecordFormat.JSON.value,
        help="Formato de los registros (xlsx requiere -o o -j)",
    )

    # --- Entrada ---
    parser.add_argument(
        "-r",
        dest="recurse",
        action="store_true",
        help="Recorrer subcarpetas",
    )
    parser.add_argument(
        "-p",
        dest="prefix",
        help="Solo archivos cuyo nombre empiece con este prefijo (ej: Kontoauszug_)",
    )

    # --- Decodificación y errores ---
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Conservar el último movimiento si el texto termina sin el pie de tabla",
    )
    parser.add_argument(
        "--fail-fast",
        dest="fail_fast",
        action="store_true",
        help="Detener el lote en el primer documento con error",
    )

    # --- Bitácora ---
    parser.add_argument(
        "-q",
        dest="quiet",
        action="store_true",
        help="No imprimir el resumen final",
    )
    parser.add_argument(
        "-v",
        dest="verbose",
        action="store_true",
        help="Imprimir cada archivo de salida generado",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"kontoauszug-reader {__version__}",
    )

    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(_strip_ignored_options(argv))


if __name__ == "__main__":
    main()
