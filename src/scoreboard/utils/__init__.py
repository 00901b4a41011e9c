"""
Utils module for helper functions
"""
from scoreboard.utils.formatters import (format_summary_table, format_summary_lines,
                                         format_boxed_message)

__all__ = [
    'format_summary_table',
    'format_summary_lines',
    'format_boxed_message'
]
