# settings.py
import logging

# --- Формат входного файла (.obj) ---
VERTEX_RECORD = 'v'       # v x y z
FACE_RECORD = 'f'         # f i j k
TOKEN_SEPARATOR = ' '     # строго один пробел, как в исходных файлах моделей
DEFAULT_ENCODING = 'utf-8'

# --- Раскладка данных ---
COMPONENTS_PER_VERTEX = 3                                   # x, y, z
VERTICES_PER_FACE = 3                                       # только треугольники
VERTEX_DATA_STRIDE = COMPONENTS_PER_VERTEX                  # floats на одну вершину в выходном массиве
FACE_DATA_STRIDE = VERTICES_PER_FACE * VERTEX_DATA_STRIDE   # 9 floats на грань

VERTEX_DTYPE = 'float32'
INDEX_DTYPE = 'uint64'
MAX_FACE_INDEX = 2 ** 64 - 1                                # максимум беззнакового 64-bit индекса

# --- Логирование ---
LOG_LEVEL = logging.WARNING
LOG_FORMAT = '%(levelname)s: %(message)s'

# --- Коды выхода ---
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
