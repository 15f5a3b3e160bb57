"""Pytest fixtures for framework tests."""
import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

import pytest

from minirace import logging as mr_logging


@pytest.fixture
def log_config():
    """Snapshot logging config and restore it after the test."""
    saved_default = mr_logging._config['default_level']
    saved_modules = dict(mr_logging._config['module_levels'])
    yield mr_logging._config
    mr_logging._config['default_level'] = saved_default
    mr_logging._config['module_levels'].clear()
    mr_logging._config['module_levels'].update(saved_modules)
