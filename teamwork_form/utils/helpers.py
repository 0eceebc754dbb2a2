"""
Utility functions and helpers
"""

import json
import logging
import os
from typing import List, Tuple

from ..core.config import FORM_ACCESS_KEYS, KEY_GROUPS, placeholder_for
from ..core.form_access import FormAccessConfig

logger = logging.getLogger(__name__)

TEMPLATE_FORMATS = {
    'json': 'form_access.json',
    'env': 'form_access.env',
}


def render_template(fmt: str = 'json') -> str:
    """Text of a config template with every key set to its placeholder"""
    if fmt == 'json':
        data = {key: placeholder_for(key) for key in FORM_ACCESS_KEYS}
        return json.dumps(data, indent=2) + '\n'
    if fmt == 'env':
        lines = [f"{key}='{placeholder_for(key)}'" for key in FORM_ACCESS_KEYS]
        return '\n'.join(lines) + '\n'
    raise ValueError(f"Unsupported template format: {fmt}. Use one of: {', '.join(TEMPLATE_FORMATS)}")


def create_sample_config(filename: str = None, fmt: str = 'json') -> str:
    """
    Create a sample config file filled with placeholders

    Args:
        filename: output path, defaults to form_access.<fmt>
        fmt: 'json' or 'env'

    Returns:
        Path of the written file
    """
    content = render_template(fmt)
    filename = filename or TEMPLATE_FORMATS[fmt]

    if os.path.exists(filename):
        raise FileExistsError(f"Refusing to overwrite existing file: {filename}")

    with open(filename, 'w', encoding='utf-8') as f:
        f.write(content)

    logger.info(f"✅ Sample config created: {filename}")
    return filename


def describe_form_access(config: FormAccessConfig) -> List[Tuple[str, str, str]]:
    """Rows of (key, group, value) with secrets redacted"""
    return [(key, KEY_GROUPS[key], value) for key, value in config.redacted().items()]


def format_table(rows: List[Tuple[str, str, str]]) -> str:
    """Plain-text table for CLI output"""
    if not rows:
        return ''
    key_width = max(len(row[0]) for row in rows)
    return '\n'.join(f"  {key:<{key_width}}  [{group}]  {value}" for key, group, value in rows)
