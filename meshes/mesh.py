# meshes/mesh.py
import logging

import numpy as np

from settings import VERTEX_DATA_STRIDE, FACE_DATA_STRIDE, VERTICES_PER_FACE, VERTEX_DTYPE
from meshes.obj_loader import load_obj_file
from meshes.errors import FaceIndexError

logger = logging.getLogger(__name__)


def resolve_faces(vertices: np.ndarray, faces: np.ndarray) -> np.ndarray:
    """
    Flattens the vertices referenced by each face into one float32 array,
    face by face, vertex by vertex, axis by axis. Face indices are 1-based.
    Raises FaceIndexError for the first index outside [1, len(vertices)].
    """
    vertex_count = len(vertices)
    flat_indices = np.asarray(faces).reshape(-1)

    out_of_range = (flat_indices < 1) | (flat_indices > vertex_count)
    if out_of_range.any():
        first_bad = int(np.argmax(out_of_range))
        raise FaceIndexError(face_num=first_bad // VERTICES_PER_FACE + 1,
                             index=int(flat_indices[first_bad]),
                             vertex_count=vertex_count)

    return np.asarray(vertices, dtype=VERTEX_DTYPE)[flat_indices - 1].reshape(-1)


class Mesh:
    def __init__(self, obj_filename: str):
        self.obj_filename = obj_filename
        self.obj_data = load_obj_file(obj_filename)
        self.vertex_data_np = self._resolve_vertex_data()

    def _resolve_vertex_data(self) -> np.ndarray:
        vertex_data = resolve_faces(self.obj_data.vertices, self.obj_data.faces)
        if vertex_data.size == 0:
            logger.info(f"No faces found in '{self.obj_filename}'.")
        else:
            logger.info(f"Mesh '{self.obj_filename}': {self.vertex_count} vertices, "
                        f"{vertex_data.size // FACE_DATA_STRIDE} triangles.")
        return vertex_data

    @property
    def vertex_count(self) -> int:
        return self.obj_data.vertex_count

    @property
    def face_count(self) -> int:
        return self.obj_data.face_count

    @property
    def triangle_count(self) -> int:
        return self.vertex_data_np.size // FACE_DATA_STRIDE

    def triangles(self) -> np.ndarray:
        """Vertex data as (triangles, 3, 3): one row of positions per triangle corner."""
        return self.vertex_data_np.reshape(-1, VERTICES_PER_FACE, VERTEX_DATA_STRIDE)
