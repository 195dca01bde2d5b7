"""User-facing messages shared across the package."""

HELP_MESSAGE = "Uso: ./programa [-h] | [-f ruta_config.txt]\n"
PARAMS_ERROR = "Error: Número de parámetros incorrecto\n"
EMPTY_NAME = "Error: Nombre de archivo vacío\n"
NAME_ERROR = "Error: Nombre de archivo inválido\n"
FOPEN_ERROR = "Error: No se pudo abrir el archivo\n"

SHORT_HELP = "-h"
LONG_HELP = "--help"
SHORT_FILE = "-f"
LONG_FILE = "--file"

CONFIG_NUMBERS = "numbers_per_thread"
CONFIG_THREADS = "thread_num"

CLEAN_RESOURCES = "Limpiando recursos...\n"
CANCELING_THREADS = "Cancelando hilos activos ({} hilos)...\n"
THREAD_CANCELED = "- Hilo {} cancelado exitosamente\n"
THREAD_CANCEL_FAIL = "- No se pudo cancelar el hilo {} (error: {})\n"
THREAD_END_SUCCESS = "- Hilo {} terminado correctamente\n"
THREAD_JOIN_FAIL = "- No se pudo unir al hilo {}, continuando...\n"
FREE_EVEN_LIST = "Liberando lista de números pares...\n"
NODES_COUNT_EVEN = "- {} nodos en la lista de pares\n"
FREE_ODD_LIST = "Liberando lista de números impares...\n"
NODES_COUNT_ODD = "- {} nodos en la lista de impares\n"
CLEAN_COMPLETE = "Limpieza de recursos completada.\n"

SIGINT_ERROR = "Error al configurar el manejador para SIGINT\n"
SIGTERM_ERROR = "Error al configurar el manejador para SIGTERM\n"
SIGNAL_RECEIVED = "\nRecibida señal {}, terminando hilos...\n"
PROGRAM_INTERRUPTED = "\nPrograma interrumpido por señal. Terminando...\n"

EVEN_LIST_HEADER = "\nLista PARES:\n"
ODD_LIST_HEADER = "\nLista IMPARES:\n"

CONFIG_VALID = "Configuración válida:\n"
CONFIG_THREAD_COUNT = "Número de hilos: {}\n"
CONFIG_NUMBERS_COUNT = "Números por hilo: {}\n"
CONFIG_INVALID = "Configuración inválida.\n"

CONFIG_FILE_PATH = "El archivo de configuración es: {}\n"

THREAD_MEMORY_ERROR = "Error: No se pudo asignar memoria para los datos del hilo\n"
THREAD_CREATE_ERROR = "Error: No se pudo crear el hilo {}\n"