"""
form_access_template.py

Copy this file (e.g. to form_access.py), fill in the values of the constants
below, and point FORM_ACCESS_CONFIG at the copy to hook the teamwork automation
to your spreadsheet & form.
DO NOT commit the filled-in copy - the form ID grants write access to the form.

Check the copy with:  python main.py check --config form_access.py
"""

# This URL displays the Record Teamwork form, allowing the player to
# record one activity.
RECORD_TEAMWORK_FORM_BASE_URL = 'Your form base URL goes here'

# This ID provides write access to the form design from the script.
RECORD_TEAMWORK_FORM_ID = 'Your form ID goes here'

# These form item IDs refer to the Record Teamwork form when the form
# design itself is being updated (i.e., setting an item's choice values).
EDIT_DURATION_CATEGORY_ITEM_ID = 'Your form item ID goes here'
EDIT_OTHER_CATEGORY_ITEM_ID = 'Your form item ID goes here'

# These form item IDs refer to the Record Teamwork form when an
# instance of the form is being filled out by a player
# (e.g., pre-populating the form for the player's use).
EMAIL_ITEM_ID = 'Your form item ID goes here'
FIRST_NAME_ITEM_ID = 'Your form item ID goes here'
LAST_NAME_ITEM_ID = 'Your form item ID goes here'
DATE_PERFORMED_ITEM_ID = 'Your form item ID goes here'
DURATION_CATEGORY_ITEM_ID = 'Your form item ID goes here'
DESCRIPTION_ITEM_ID = 'Your form item ID goes here'
