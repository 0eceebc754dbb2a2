"""
Form page parser to extract entry IDs in order
"""

import re
import logging
from typing import List

logger = logging.getLogger(__name__)

ENTRY_PATTERN = re.compile(r'entry\.(\d+)')


def extract_entry_ids(text: str) -> List[str]:
    """Extract item IDs (the digits of entry.<id>) in order of first appearance"""
    seen = set()
    unique_entries = []
    for entry in ENTRY_PATTERN.findall(text or ''):
        if entry not in seen:
            seen.add(entry)
            unique_entries.append(entry)

    logger.debug(f"Extracted {len(unique_entries)} entry IDs")
    return unique_entries


def normalize_item_id(item_id: str) -> str:
    """Accept both '123' and 'entry.123' spellings of an item ID"""
    item_id = item_id.strip()
    if item_id.startswith('entry.'):
        return item_id[len('entry.'):]
    return item_id


def get_view_url(base_url: str) -> str:
    """Form base URL without query string or fragment, for fetching the form page"""
    return base_url.split('#')[0].split('?')[0]
