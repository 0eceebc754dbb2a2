"""Shared fixtures"""

import json

import pytest

from teamwork_form.core.loader import reset_form_access


VALID_VALUES = {
    'RECORD_TEAMWORK_FORM_BASE_URL': 'https://docs.google.com/forms/d/e/1FAIpQLSdTeamwork/viewform',
    'RECORD_TEAMWORK_FORM_ID': '1AbCdEfGhIjKlMnOpQrStUvWxYz0123456789',
    'EDIT_DURATION_CATEGORY_ITEM_ID': '1016170131',
    'EDIT_OTHER_CATEGORY_ITEM_ID': '1650422395',
    'EMAIL_ITEM_ID': '574418038',
    'FIRST_NAME_ITEM_ID': '491424067',
    'LAST_NAME_ITEM_ID': '1076213498',
    'DATE_PERFORMED_ITEM_ID': '2114887994',
    'DURATION_CATEGORY_ITEM_ID': '540416168',
    'DESCRIPTION_ITEM_ID': '283916026',
}


@pytest.fixture
def valid_values():
    """Fresh copy of a complete configuration"""
    return dict(VALID_VALUES)


@pytest.fixture
def json_config(tmp_path, valid_values):
    """Complete configuration written as JSON"""
    path = tmp_path / 'form_access.json'
    path.write_text(json.dumps(valid_values), encoding='utf-8')
    return str(path)


@pytest.fixture(autouse=True)
def clean_cache():
    reset_form_access()
    yield
    reset_form_access()
