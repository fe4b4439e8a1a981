"""
Helper utility functions for file operations and document formatting.
"""

import os
import json
import random
from datetime import datetime


def load_json_file(filepath, default=None):
    """
    Load JSON data from a file.

    Args:
        filepath: Path to the JSON file
        default: Default value if file doesn't exist (defaults to empty dict)

    Returns:
        Parsed JSON data or default value
    """
    if os.path.exists(filepath):
        with open(filepath, 'r') as f:
            return json.load(f)
    return default if default is not None else {}


def save_json_file(filepath, data):
    """
    Save data to a JSON file.

    Args:
        filepath: Path to the JSON file
        data: Data to save (must be JSON serializable)
    """
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)


def format_currency(amount):
    """$1,234.56 style; negative amounts as -$1,234.56"""
    amount = float(amount or 0)
    sign = '-' if amount < 0 else ''
    return f"{sign}${abs(amount):,.2f}"


def format_date(date=None):
    """MM/DD/YYYY"""
    return (date or datetime.now()).strftime('%m/%d/%Y')


def format_project_type(project_type):
    """jewelry_store -> Jewelry Store"""
    return ' '.join(word.capitalize() for word in (project_type or '').split('_'))


def generate_quote_number(now=None, rng=None):
    """Q-<year>-<4 random digits>"""
    year = (now or datetime.now()).year
    number = (rng or random).randint(1000, 9999)
    return f"Q-{year}-{number}"


def resolve_client_id(headers, payload=None):
    """Client id from the X-Client-Id header, else from a clientId body field"""
    client_id = headers.get('X-Client-Id')
    if not client_id and isinstance(payload, dict):
        client_id = payload.get('clientId')
    return client_id or None
