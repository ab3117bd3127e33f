# reporter.py
import sys

import numpy as np


def _format_component(value):
    value = np.float32(value)
    if np.isnan(value):
        return 'NaN'
    # numpy печатает кратчайшее представление float32: 0.1 -> '0.1', 1 -> '1.0'
    text = str(value)
    if 'e' in text:
        # '1e+20' -> '1e20', '1e-05' -> '1e-5'
        mantissa, exponent = text.split('e')
        text = f"{mantissa}e{int(exponent)}"
    return text


def format_vertex_data(values):
    """Список чисел в отладочном виде: [0.0, 1.5, ...]"""
    return '[' + ', '.join(_format_component(v) for v in np.asarray(values).reshape(-1)) + ']'


def report(values, stream=None):
    """Пишет одну строку с данными вершин в поток диагностики (по умолчанию stderr)."""
    if stream is None:
        stream = sys.stderr
    stream.write(format_vertex_data(values) + '\n')
    stream.flush()
