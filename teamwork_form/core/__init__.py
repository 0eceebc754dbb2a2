"""
Core module: settings, configuration record and loader
"""

from .form_access import FormAccessConfig, FormAccessConfigError
from .loader import load_form_access, get_form_access, reset_form_access
