import logging
import re
from collections import namedtuple
from decimal import Decimal

import numpy as np

from settings import (VERTEX_RECORD, FACE_RECORD, TOKEN_SEPARATOR, DEFAULT_ENCODING,
                      COMPONENTS_PER_VERTEX, VERTICES_PER_FACE, VERTEX_DTYPE, INDEX_DTYPE,
                      MAX_FACE_INDEX)
from meshes.errors import ObjReadError, MalformedRecordError, NumericParseError

logger = logging.getLogger(__name__)

# Синтаксис чисел строже, чем у float()/int(): без пробелов по краям и без '_'
_FLOAT_RE = re.compile(r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)',
                       re.IGNORECASE)
_UINT_RE = re.compile(r'\+?[0-9]+')

# Количество токенов в записи v/f: маркер + три значения
_RECORD_TOKENS = 1 + max(COMPONENTS_PER_VERTEX, VERTICES_PER_FACE)


class ObjData(namedtuple('ObjData', ['vertices', 'faces'])):
    """
    Результат загрузки .obj файла.

    vertices: numpy.array формы (N, 3), dtype='float32' - координаты вершин в порядке объявления.
    faces:    numpy.array формы (M, 3), dtype='uint64' - 1-based индексы вершин каждой грани.
    Оба массива только для чтения.
    """
    __slots__ = ()

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def face_count(self) -> int:
        return len(self.faces)


def _to_float32(token):
    """
    Округляет десятичную запись к float32 один раз.
    float() даёт float64; если он попал ровно в середину между соседними float32,
    направление округления решает точное десятичное значение токена.
    """
    value = float(token)
    with np.errstate(over='ignore'):
        nearest = np.float32(value)
    if not np.isfinite(nearest):
        return nearest

    lower = nearest if float(nearest) <= value else np.nextafter(nearest, np.float32(-np.inf))
    upper = np.nextafter(lower, np.float32(np.inf))
    if not np.isfinite(upper):
        return nearest
    # Середина двух соседних float32 всегда точно представима во float64
    midpoint = (float(lower) + float(upper)) / 2
    if value != midpoint:
        return nearest

    exact = Decimal(token)
    if exact > Decimal(midpoint):
        return upper
    if exact < Decimal(midpoint):
        return lower
    return nearest


def _parse_float(token, line_num, line):
    if not _FLOAT_RE.fullmatch(token):
        raise NumericParseError(f"invalid vertex coordinate '{token}'", token, line_num=line_num, line=line)
    return _to_float32(token)


def _parse_index(token, line_num, line):
    if not _UINT_RE.fullmatch(token):
        raise NumericParseError(f"invalid face index '{token}'", token, line_num=line_num, line=line)
    # Длину проверяем до int(): у CPython есть лимит на длину строки при переводе в int
    digits = token.lstrip('+').lstrip('0') or '0'
    if len(digits) > len(str(MAX_FACE_INDEX)) or int(digits) > MAX_FACE_INDEX:
        raise NumericParseError(f"face index '{token}' does not fit in 64 bits", token,
                                line_num=line_num, line=line)
    return int(digits)


def _iter_lines(text):
    """Разбивает текст на строки по '\\n', убирая '\\r' перед переводом строки."""
    if not text:
        return
    segments = text.split('\n')
    trailing = segments.pop()
    for segment in segments:
        yield segment[:-1] if segment.endswith('\r') else segment
    if trailing:
        yield trailing


def _freeze(array):
    array.setflags(write=False)
    return array


def parse_obj_lines(lines):
    """
    Разбирает строки .obj (без символов конца строки) в ObjData.
    Поддерживаются только записи 'v x y z' и 'f i j k'; всё остальное пропускается.
    Из грани берутся только первые три индекса, триангуляции нет.
    """
    vertices_raw = []  # [(x, y, z), ...]
    faces_raw = []     # [(i, j, k), ...]

    for line_num, line in enumerate(lines, 1):
        parts = line.split(TOKEN_SEPARATOR)
        command = parts[0]

        if command == VERTEX_RECORD:
            if len(parts) < _RECORD_TOKENS:
                raise MalformedRecordError(
                    f"vertex record needs {COMPONENTS_PER_VERTEX} coordinates, got {len(parts) - 1}",
                    line_num=line_num, line=line)
            vertices_raw.append(tuple(_parse_float(token, line_num, line)
                                      for token in parts[1:1 + COMPONENTS_PER_VERTEX]))
        elif command == FACE_RECORD:
            if len(parts) < _RECORD_TOKENS:
                raise MalformedRecordError(
                    f"face record needs {VERTICES_PER_FACE} indices, got {len(parts) - 1}",
                    line_num=line_num, line=line)
            faces_raw.append(tuple(_parse_index(token, line_num, line)
                                   for token in parts[1:1 + VERTICES_PER_FACE]))

    vertices = np.array(vertices_raw, dtype=VERTEX_DTYPE).reshape(-1, COMPONENTS_PER_VERTEX)
    faces = np.array(faces_raw, dtype=INDEX_DTYPE).reshape(-1, VERTICES_PER_FACE)

    logger.debug(f"Parsed {len(vertices)} vertices, {len(faces)} faces.")
    return ObjData(vertices=_freeze(vertices), faces=_freeze(faces))


def load_obj_text(text):
    """Разбирает содержимое .obj файла, уже прочитанное в память."""
    return parse_obj_lines(_iter_lines(text))


def load_obj_file(filename, encoding=DEFAULT_ENCODING):
    """
    Загружает геометрию из .obj файла.
    Файл читается целиком до начала разбора.

    Возвращает:
        ObjData с вершинами и гранями.
    Исключения:
        ObjReadError, если файл не найден или не читается;
        MalformedRecordError / NumericParseError при ошибке в записи v/f.
    """
    logger.info(f"Loading OBJ file '{filename}'")
    try:
        # newline='' - концы строк разбираются в _iter_lines
        with open(filename, 'r', encoding=encoding, newline='') as f:
            text = f.read()
    except FileNotFoundError as e:
        raise ObjReadError(f"file '{filename}' not found", filename=filename) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ObjReadError(f"cannot read '{filename}': {e}", filename=filename) from e

    return load_obj_text(text)
