"""
Online verification of the form access configuration
"""

import logging
import time
from typing import Dict, List, Optional

import requests
from pydantic import BaseModel

from ..core.config import EDIT_ITEM_KEYS, FORM_ID_KEY, REQUEST_CONFIG
from ..core.form_access import FormAccessConfig
from ..utils.url_parser import extract_entry_ids, get_view_url, normalize_item_id

logger = logging.getLogger(__name__)


class VerificationReport(BaseModel):
    """Result of checking the configuration against the live form"""
    url: str
    reachable: bool = False
    status_code: Optional[int] = None
    found_fill_items: List[str] = []
    missing_fill_items: List[str] = []
    unchecked_keys: List[str] = []
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reachable and not self.missing_fill_items and self.error is None


class FormAccessVerifier:
    """
    Checks that the form base URL serves a form and that the fill item IDs
    appear on it. The form ID and edit item IDs need authenticated access to
    the form design, so they are listed as unchecked.
    """

    def __init__(self, config: FormAccessConfig, request_config: Dict = None,
                 session: requests.Session = None):
        self.config = config
        self.request_config = request_config or REQUEST_CONFIG
        self.session = session or requests.Session()
        self.session.headers.update(self.request_config.get('headers', {}))

    def fetch_form_page(self) -> requests.Response:
        """GET the form page, retrying on network errors and 5xx responses"""
        url = get_view_url(self.config.form_base_url)
        retries = max(1, self.request_config.get('retries', 1))
        last_error = None

        for attempt in range(retries):
            try:
                response = self.session.get(url, timeout=self.request_config.get('timeout', 30))
                if response.status_code < 500:
                    return response
                last_error = requests.HTTPError(f"HTTP {response.status_code}", response=response)
                logger.warning(f"⚠️ Attempt {attempt + 1} got HTTP {response.status_code}")
            except requests.RequestException as e:
                last_error = e
                logger.warning(f"⚠️ Attempt {attempt + 1} failed: {e}")

            if attempt < retries - 1:
                time.sleep(self.request_config.get('retry_delay', 1))

        logger.error(f"❌ Failed after {retries} attempts")
        raise last_error

    def verify(self) -> VerificationReport:
        """Fetch the form and compare its entry IDs with the configured fill items"""
        url = get_view_url(self.config.form_base_url)
        report = VerificationReport(url=url, unchecked_keys=[FORM_ID_KEY, *EDIT_ITEM_KEYS])

        try:
            response = self.fetch_form_page()
        except requests.RequestException as e:
            if getattr(e, 'response', None) is not None:
                report.status_code = e.response.status_code
            report.error = str(e)
            return report

        report.status_code = response.status_code
        if response.status_code != 200:
            report.error = f"HTTP {response.status_code}"
            logger.error(f"❌ Form page returned HTTP {response.status_code}")
            return report

        report.reachable = True
        page_entries = set(extract_entry_ids(response.text))

        for key, item_id in self.config.fill_item_ids.items():
            if normalize_item_id(item_id) in page_entries:
                report.found_fill_items.append(key)
            else:
                report.missing_fill_items.append(key)

        if report.missing_fill_items:
            logger.warning(f"⚠️ Fill items not found on form: {', '.join(report.missing_fill_items)}")
        else:
            logger.info(f"✅ All {len(report.found_fill_items)} fill items found on form")
        return report
