# meshes/errors.py
from settings import EXIT_FAILURE, EXIT_USAGE


class ObjLoadError(Exception):
    """Базовая ошибка загрузки .obj. Любая из них прерывает работу программы."""
    exit_code = EXIT_FAILURE

    def __init__(self, message, line_num=None, line=None):
        self.line_num = line_num  # 1-based номер строки, если ошибка привязана к строке
        self.line = line
        if line_num is not None:
            message = f"line {line_num}: {message} ('{line}')"
        super().__init__(message)


class MissingArgumentError(ObjLoadError):
    exit_code = EXIT_USAGE


class ObjReadError(ObjLoadError):
    """Файл не существует или не может быть прочитан/декодирован."""

    def __init__(self, message, filename=None):
        self.filename = filename
        super().__init__(message)


class MalformedRecordError(ObjLoadError, ValueError):
    """Строка v/f содержит меньше четырёх токенов."""


class NumericParseError(ObjLoadError, ValueError):
    def __init__(self, message, token, line_num=None, line=None):
        self.token = token
        super().__init__(message, line_num=line_num, line=line)


class FaceIndexError(ObjLoadError, IndexError):
    """Грань ссылается на вершину вне диапазона [1, vertex_count]."""

    def __init__(self, face_num, index, vertex_count):
        self.face_num = face_num  # 1-based номер грани
        self.index = index
        self.vertex_count = vertex_count
        super().__init__(
            f"face {face_num} references vertex {index}, "
            f"valid range is [1, {vertex_count}]"
        )
