from .errors import (ObjLoadError, MissingArgumentError, ObjReadError,
                     MalformedRecordError, NumericParseError, FaceIndexError)
from .obj_loader import ObjData, parse_obj_lines, load_obj_text, load_obj_file
from .mesh import Mesh, resolve_faces

__all__ = ['ObjLoadError', 'MissingArgumentError', 'ObjReadError', 'MalformedRecordError',
           'NumericParseError', 'FaceIndexError', 'ObjData', 'parse_obj_lines', 'load_obj_text',
           'load_obj_file', 'Mesh', 'resolve_faces']
