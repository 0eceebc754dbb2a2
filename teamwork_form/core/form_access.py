"""
Form access configuration record
"""

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .config import (
    EDIT_ITEM_KEYS,
    FILL_ITEM_KEYS,
    FORM_ACCESS_KEYS,
    SECRET_KEYS,
    is_placeholder,
)

REDACTED = '***'


class FormAccessConfigError(Exception):
    """
    Raised when the form access configuration cannot be used.

    Attributes:
        problems: mapping of configuration key to a short reason
    """

    def __init__(self, problems: Dict[str, str], message: str = None):
        self.problems = dict(problems)
        if message is None:
            details = ', '.join(f"{key} ({reason})" for key, reason in self.problems.items())
            message = f"Invalid form access configuration: {details}"
        super().__init__(message)


def check_value(value: Any) -> str:
    """Return the reason a raw value is unusable, or an empty string if it is fine"""
    if value is None:
        return 'missing'
    if not isinstance(value, str):
        return f"expected a string, got {type(value).__name__}"
    if not value.strip():
        return 'empty'
    if is_placeholder(value):
        return 'placeholder value'
    return ''


class FormAccessConfig(BaseModel):
    """
    Identifiers the teamwork automation uses to address the Record Teamwork form.

    Every value is an opaque string from the form-hosting service. The record is
    frozen: it is built once at startup and passed to whoever needs it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')

    form_base_url: str = Field(..., alias='RECORD_TEAMWORK_FORM_BASE_URL',
                               description="URL that displays the form to a player")
    form_id: str = Field(..., alias='RECORD_TEAMWORK_FORM_ID',
                         description="ID giving the script write access to the form design")

    edit_duration_category_item_id: str = Field(..., alias='EDIT_DURATION_CATEGORY_ITEM_ID')
    edit_other_category_item_id: str = Field(..., alias='EDIT_OTHER_CATEGORY_ITEM_ID')

    email_item_id: str = Field(..., alias='EMAIL_ITEM_ID')
    first_name_item_id: str = Field(..., alias='FIRST_NAME_ITEM_ID')
    last_name_item_id: str = Field(..., alias='LAST_NAME_ITEM_ID')
    date_performed_item_id: str = Field(..., alias='DATE_PERFORMED_ITEM_ID')
    duration_category_item_id: str = Field(..., alias='DURATION_CATEGORY_ITEM_ID')
    description_item_id: str = Field(..., alias='DESCRIPTION_ITEM_ID')

    @model_validator(mode='before')
    @classmethod
    def _require_all_keys(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data

        values = {}
        problems = {}
        for name, field in cls.model_fields.items():
            key = field.alias
            raw = data.get(key, data.get(name))
            reason = check_value(raw)
            if reason:
                problems[key] = reason
            else:
                values[name] = raw.strip()

        if problems:
            raise FormAccessConfigError(problems)
        return values

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> 'FormAccessConfig':
        """Build a record from a mapping keyed by constant names or field names"""
        return cls.model_validate(dict(values))

    def get(self, key: str) -> str:
        """Value for a constant name such as EMAIL_ITEM_ID"""
        if key not in FORM_ACCESS_KEYS:
            raise KeyError(key)
        return self.as_dict()[key]

    @property
    def edit_item_ids(self) -> Dict[str, str]:
        """Edit-side item IDs by constant name; a new dict on every access"""
        values = self.as_dict()
        return {key: values[key] for key in EDIT_ITEM_KEYS}

    @property
    def fill_item_ids(self) -> Dict[str, str]:
        """Fill-side item IDs by constant name; a new dict on every access"""
        values = self.as_dict()
        return {key: values[key] for key in FILL_ITEM_KEYS}

    def as_dict(self) -> Dict[str, str]:
        """Fresh {constant name: value} dict in key order"""
        dumped = self.model_dump(by_alias=True)
        return {key: dumped[key] for key in FORM_ACCESS_KEYS}

    def redacted(self) -> Dict[str, str]:
        """Like as_dict(), with secret values masked"""
        return {key: (REDACTED if key in SECRET_KEYS else value)
                for key, value in self.as_dict().items()}

    def __repr__(self) -> str:
        fields = ', '.join(f"{key}={value!r}" for key, value in self.redacted().items())
        return f"FormAccessConfig({fields})"

    __str__ = __repr__
