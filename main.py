# main.py
import logging
import sys

from settings import EXIT_OK
from meshes.mesh import Mesh
from meshes.errors import ObjLoadError, MissingArgumentError
from utils.logging_config import setup_logging
from utils.reporter import report

logger = logging.getLogger(__name__)

USAGE = "usage: obj-face-dump <input.obj>"


def run(obj_filename, stream=None):
    """Загрузка -> разрешение граней -> вывод. Любая ошибка пробрасывается как ObjLoadError."""
    mesh = Mesh(obj_filename)
    report(mesh.vertex_data_np, stream=stream)
    return mesh


def main(argv=None):
    setup_logging()
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        if not args:
            raise MissingArgumentError(f"no input file given; {USAGE}")
        if len(args) > 1:
            logger.warning(f"Ignoring extra arguments: {' '.join(args[1:])}")
        run(args[0])
    except ObjLoadError as e:
        # Восстановления нет: первая же ошибка завершает программу
        logger.critical(str(e))
        return e.exit_code

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
