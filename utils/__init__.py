from .reporter import format_vertex_data, report
from .logging_config import setup_logging

__all__ = ['format_vertex_data', 'report', 'setup_logging']
