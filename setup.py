# setup.py
from setuptools import setup

# -----------------------------------------------------------------------------
# Сборка чисто на Python: C++ расширения больше нет, только пакеты meshes/utils
# и модули верхнего уровня main.py / settings.py (плоская структура проекта).
# -----------------------------------------------------------------------------

setup(
    name='obj-face-dump',
    version='0.1.0',
    description='Reads v/f records from an OBJ file and prints the face vertex coordinates to stderr',
    packages=['meshes', 'utils'],
    py_modules=['main', 'settings'],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'obj-face-dump=main:main',
        ],
    },
)
