"""
Utilities Package

Shared helper functions used across the application.
"""

from app.utils.helpers import (
    load_json_file,
    save_json_file,
    format_currency,
    format_date,
    format_project_type,
    generate_quote_number,
    resolve_client_id,
)

__all__ = [
    'load_json_file',
    'save_json_file',
    'format_currency',
    'format_date',
    'format_project_type',
    'generate_quote_number',
    'resolve_client_id',
]
