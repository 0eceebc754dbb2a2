"""FormAccessConfig tests"""

import pytest
from pydantic import ValidationError

from teamwork_form.core.config import (
    EDIT_ITEM_KEYS,
    FILL_ITEM_KEYS,
    FORM_ACCESS_KEYS,
    FORM_ID_KEY,
    ITEM_ID_PLACEHOLDER,
)
from teamwork_form.core.form_access import REDACTED, FormAccessConfig, FormAccessConfigError


class TestFormAccessConfig:
    """Configuration record"""

    def test_from_constant_names(self, valid_values):
        config = FormAccessConfig.from_mapping(valid_values)

        assert config.form_base_url == valid_values['RECORD_TEAMWORK_FORM_BASE_URL']
        assert config.form_id == valid_values['RECORD_TEAMWORK_FORM_ID']
        assert config.description_item_id == valid_values['DESCRIPTION_ITEM_ID']

    def test_from_field_names(self, valid_values):
        config = FormAccessConfig(
            form_base_url=valid_values['RECORD_TEAMWORK_FORM_BASE_URL'],
            form_id=valid_values['RECORD_TEAMWORK_FORM_ID'],
            edit_duration_category_item_id='1',
            edit_other_category_item_id='2',
            email_item_id='3',
            first_name_item_id='4',
            last_name_item_id='5',
            date_performed_item_id='6',
            duration_category_item_id='7',
            description_item_id='8',
        )

        assert config.email_item_id == '3'
        assert config.get('DURATION_CATEGORY_ITEM_ID') == '7'

    def test_values_are_stripped_but_not_interpreted(self, valid_values):
        valid_values['EMAIL_ITEM_ID'] = '  entry.574418038 \n'

        config = FormAccessConfig.from_mapping(valid_values)

        assert config.email_item_id == 'entry.574418038'

    def test_missing_key_fails(self, valid_values):
        del valid_values['LAST_NAME_ITEM_ID']

        with pytest.raises(FormAccessConfigError) as exc_info:
            FormAccessConfig.from_mapping(valid_values)

        assert exc_info.value.problems == {'LAST_NAME_ITEM_ID': 'missing'}
        assert 'LAST_NAME_ITEM_ID' in str(exc_info.value)

    def test_every_problem_is_reported(self, valid_values):
        valid_values['RECORD_TEAMWORK_FORM_ID'] = 'Your form ID goes here'
        valid_values['EMAIL_ITEM_ID'] = '   '
        valid_values['FIRST_NAME_ITEM_ID'] = 42
        del valid_values['DESCRIPTION_ITEM_ID']

        with pytest.raises(FormAccessConfigError) as exc_info:
            FormAccessConfig.from_mapping(valid_values)

        problems = exc_info.value.problems
        assert problems['RECORD_TEAMWORK_FORM_ID'] == 'placeholder value'
        assert problems['EMAIL_ITEM_ID'] == 'empty'
        assert problems['FIRST_NAME_ITEM_ID'].startswith('expected a string')
        assert problems['DESCRIPTION_ITEM_ID'] == 'missing'
        assert len(problems) == 4

    def test_untouched_template_fails_on_every_key(self):
        values = {key: ITEM_ID_PLACEHOLDER for key in FORM_ACCESS_KEYS}

        with pytest.raises(FormAccessConfigError) as exc_info:
            FormAccessConfig.from_mapping(values)

        assert set(exc_info.value.problems) == set(FORM_ACCESS_KEYS)

    def test_record_is_frozen(self, valid_values):
        config = FormAccessConfig.from_mapping(valid_values)

        with pytest.raises(ValidationError):
            config.email_item_id = 'changed'

    def test_reading_twice_is_identical(self, valid_values):
        config = FormAccessConfig.from_mapping(valid_values)

        first = config.as_dict()
        first['EMAIL_ITEM_ID'] = 'mutated'

        assert config.as_dict() == valid_values
        assert config.as_dict() == config.as_dict()

    def test_item_groups(self, valid_values):
        config = FormAccessConfig.from_mapping(valid_values)

        config.fill_item_ids['EMAIL_ITEM_ID'] = 'mutated'
        assert config.email_item_id == valid_values['EMAIL_ITEM_ID']

        assert list(config.edit_item_ids) == list(EDIT_ITEM_KEYS)
        assert list(config.fill_item_ids) == list(FILL_ITEM_KEYS)
        assert config.fill_item_ids['DATE_PERFORMED_ITEM_ID'] == valid_values['DATE_PERFORMED_ITEM_ID']

    def test_redacted_hides_form_id(self, valid_values):
        config = FormAccessConfig.from_mapping(valid_values)

        redacted = config.redacted()

        assert redacted[FORM_ID_KEY] == REDACTED
        assert redacted['EMAIL_ITEM_ID'] == valid_values['EMAIL_ITEM_ID']
        assert valid_values[FORM_ID_KEY] not in repr(config)

    def test_get_unknown_key(self, valid_values):
        config = FormAccessConfig.from_mapping(valid_values)

        with pytest.raises(KeyError):
            config.get('PHONE_ITEM_ID')

    def test_unknown_keys_ignored(self, valid_values):
        valid_values['SPREADSHEET_ID'] = 'abc'

        config = FormAccessConfig.from_mapping(valid_values)

        assert 'SPREADSHEET_ID' not in config.as_dict()
