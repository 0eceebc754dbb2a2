"""
Form access configuration loader

Sources, lowest precedence first:
    1. a config file (.json, .env, or a filled-in copy of form_access_template.py)
    2. environment variables named after the keys
"""

import importlib.util
import json
import logging
import os
import threading
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from .config import CONFIG_PATH_ENV, FORM_ACCESS_KEYS, SUPPORTED_CONFIG_EXTENSIONS
from .form_access import FormAccessConfig, FormAccessConfigError

logger = logging.getLogger(__name__)

_cached_config: Optional[FormAccessConfig] = None
_cache_lock = threading.Lock()


def _read_json(path: str) -> Dict[str, object]:
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise FormAccessConfigError({path: f"invalid JSON: {e}"}) from e

    if not isinstance(data, dict):
        raise FormAccessConfigError({path: 'expected a JSON object'})
    return data


def _read_env_file(path: str) -> Dict[str, object]:
    # dotenv_values parses without touching os.environ
    return dict(dotenv_values(path))


def _read_python_module(path: str) -> Dict[str, object]:
    spec = importlib.util.spec_from_file_location('_form_access_settings', path)
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise FormAccessConfigError({path: f"cannot execute config module: {e}"}) from e

    return {name: getattr(module, name) for name in dir(module) if name.isupper()}


_READERS = {
    '.json': _read_json,
    '.env': _read_env_file,
    '.py': _read_python_module,
}


def read_config_file(path: str) -> Dict[str, object]:
    """
    Read the form access keys from a config file

    Args:
        path: path to a .json, .env or .py file

    Returns:
        Dictionary of the known keys found in the file
    """
    if not os.path.exists(path):
        raise FormAccessConfigError({path: 'config file not found'})
    if not os.path.isfile(path):
        raise FormAccessConfigError({path: 'config path is not a file'})

    file_ext = os.path.splitext(path)[1].lower()
    if os.path.basename(path) == '.env':
        file_ext = '.env'
    if file_ext not in SUPPORTED_CONFIG_EXTENSIONS:
        raise FormAccessConfigError(
            {path: f"unsupported config format {file_ext or '(none)'}, use {', '.join(SUPPORTED_CONFIG_EXTENSIONS)}"}
        )

    try:
        raw = _READERS[file_ext](path)
    except (OSError, UnicodeDecodeError) as e:
        raise FormAccessConfigError({path: f"cannot read config file: {e}"}) from e

    unknown = [key for key in raw if key not in FORM_ACCESS_KEYS]
    if unknown and file_ext != '.py':
        logger.warning(f"⚠️ Ignoring unknown keys in {path}: {', '.join(sorted(unknown))}")

    values = {key: raw[key] for key in FORM_ACCESS_KEYS if key in raw}
    logger.debug(f"📄 Read {len(values)}/{len(FORM_ACCESS_KEYS)} keys from {path}")
    return values


def read_environment(environ: Mapping[str, str]) -> Dict[str, str]:
    """Form access keys present in an environment mapping"""
    return {key: environ[key] for key in FORM_ACCESS_KEYS if key in environ}


def load_form_access(config_path: str = None, environ: Mapping[str, str] = None) -> FormAccessConfig:
    """
    Load and validate the form access configuration

    Args:
        config_path: optional config file; defaults to $FORM_ACCESS_CONFIG
        environ: environment mapping; defaults to os.environ

    Returns:
        Validated, immutable FormAccessConfig

    Raises:
        FormAccessConfigError: file unusable, or any key missing, empty or placeholder
    """
    if environ is None:
        environ = os.environ

    config_path = config_path or environ.get(CONFIG_PATH_ENV) or None

    values: Dict[str, object] = {}
    if config_path:
        values.update(read_config_file(config_path))
        source = config_path
    else:
        source = 'environment'

    overrides = read_environment(environ)
    if overrides and config_path:
        logger.debug(f"🔧 Environment overrides {len(overrides)} key(s) from {config_path}")
    values.update(overrides)

    try:
        config = FormAccessConfig.from_mapping(values)
    except FormAccessConfigError as e:
        logger.error(f"❌ Form access configuration from {source} is incomplete: "
                     f"{len(e.problems)} problem(s)")
        raise

    logger.info(f"✅ Form access configuration loaded from {source}")
    return config


def get_form_access() -> FormAccessConfig:
    """Process-wide configuration, loaded from the environment on first use"""
    global _cached_config

    with _cache_lock:
        if _cached_config is None:
            _cached_config = load_form_access()
        return _cached_config


def reset_form_access():
    """Forget the cached configuration so the next get_form_access() reloads it"""
    global _cached_config

    with _cache_lock:
        _cached_config = None
