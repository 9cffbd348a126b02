"""Pytest configuration and fixtures for cmdline-args tests"""
import logging

import pytest

from cmdline_args.core.constants import ENV_VAR_MAPPING, LOG_LEVEL_ENV_VAR
from cmdline_args.core.logging import SensitiveDataFilter
from cmdline_args.parsing.cache import get_cache


@pytest.fixture(autouse=True)
def clear_result_cache():
    """Start every test with no cached parse result"""
    get_cache().clear()
    yield
    get_cache().clear()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove CMDLINE_ARGS_* variables inherited from the developer's shell"""
    for env_var in [*ENV_VAR_MAPPING.values(), LOG_LEVEL_ENV_VAR]:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop handlers installed by setup_logging so they do not outlive the test"""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if any(isinstance(f, SensitiveDataFilter) for f in handler.filters):
            handler.close()
            root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)


@pytest.fixture
def sample_tokens():
    """A command line mixing every token category"""
    return [
        "--verbose",
        "--output=report.txt",
        "-abc",
        "-k=value",
        "input.csv",
        '--name="John Doe"',
        "second.csv",
    ]
