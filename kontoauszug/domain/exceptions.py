"""
Excepciones de dominio del proyecto kontoauszug-reader.

¿Por qué excepciones propias en lugar de usar ValueError/RuntimeError?
Porque permiten que el StatementProcessor distinga entre "el PDF está
corrupto" (se registra y se sigue con el siguiente documento) y "las
opciones son incompatibles" (se aborta antes de procesar nada).

Jerarquía:
    KontoauszugError
    ├── ConfigurationError          → Opciones de salida incompatibles
    ├── FormatoInvalidoError        → El archivo no tiene el formato esperado
    ├── ExtractionError             → Error al extraer texto del archivo
    └── OutputError                 → Error al escribir un registro

Lo que NO es error:
- Un documento sin línea "Kontoauszug vom ... bis ..." → no hay Booking.
- Una línea de movimiento mal formada → se trata como texto de continuación.
- Un archivo de salida que ya existe (sin -u) → se omite en silencio.
"""


class KontoauszugError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar cualquier error del proyecto con un solo
    `except KontoauszugError` en el CLI.
    """


class ConfigurationError(KontoauszugError):
    """Se lanza cuando la combinación de opciones no es válida.

    Ejemplos:
    - Modo por documento (-j) junto con archivo de salida (-o).
    - Directorio base (-d) que no existe.
    - Granularidad mensual (-m) sin modo directorio.

    Siempre se lanza ANTES de procesar el primer documento.
    """

    def __init__(self, detalle: str):
        self.detalle = detalle
        super().__init__(f"Configuración inválida: {detalle}")


class FormatoInvalidoError(KontoauszugError):
    """Se lanza cuando un archivo no tiene el formato esperado.

    Ejemplos:
    - El archivo no existe.
    - Se esperaba un PDF pero la extensión es otra.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class ExtractionError(KontoauszugError):
    """Se lanza cuando falla la extracción de texto de un archivo.

    Es fatal para ESE documento, pero no para el lote: el
    StatementProcessor lo registra y continúa con el siguiente.

    Esto puede pasar porque:
    - El PDF está protegido con contraseña.
    - pdfplumber/pdfminer no puede leer el archivo.
    - El archivo está corrupto o no tiene páginas.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error extrayendo texto de '{archivo}': {causa}")


class OutputError(KontoauszugError):
    """Se lanza cuando falla la escritura de un registro de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - No se pudo serializar el registro.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
