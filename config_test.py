"""
Test configuration loading from the environment
"""
import logging

import pytest

from config.base import BaseConfiguration, ConfigurationError
from core.data_models import IndicatorAlignment, IndicatorStyle, SelectionIndicator, SelectionMode


def test_defaults_from_empty_environment():
    config = BaseConfiguration.from_env({})

    assert config == BaseConfiguration()
    assert config.selection_mode is SelectionMode.MULTIPLE
    assert not config.require_selection
    assert config.indicator == SelectionIndicator.tap_on_element()
    assert config.selector_color is None
    assert config.log_level == "INFO"


def test_values_from_environment():
    config = BaseConfiguration.from_env({
        "SELECTABLE_ROWS_MODE": "Single",
        "SELECTABLE_ROWS_REQUIRE_SELECTION": "yes",
        "SELECTABLE_ROWS_INDICATOR": "checkbox",
        "SELECTABLE_ROWS_ALIGNMENT": "leading",
        "SELECTABLE_ROWS_COLOR": "#00ff00",
        "SELECTABLE_ROWS_LOG_LEVEL": "debug",
    })

    assert config.selection_mode is SelectionMode.SINGLE
    assert config.require_selection
    assert config.indicator_style is IndicatorStyle.CHECKBOX
    assert config.indicator_alignment is IndicatorAlignment.LEADING
    assert config.indicator == SelectionIndicator.checkbox(IndicatorAlignment.LEADING)
    assert config.selector_color == "#00ff00"
    assert config.log_level == "DEBUG"


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("SELECTABLE_ROWS_MODE", "single")
    monkeypatch.setenv("SELECTABLE_ROWS_INDICATOR", "tap_on_row")

    config = BaseConfiguration.from_env()

    assert config.selection_mode is SelectionMode.SINGLE
    assert config.indicator == SelectionIndicator.tap_on_row()


@pytest.mark.parametrize("name, value", [
    ("SELECTABLE_ROWS_MODE", "several"),
    ("SELECTABLE_ROWS_INDICATOR", "radio"),
    ("SELECTABLE_ROWS_ALIGNMENT", "center"),
    ("SELECTABLE_ROWS_REQUIRE_SELECTION", "maybe"),
    ("SELECTABLE_ROWS_LOG_LEVEL", "LOUD"),
])
def test_invalid_values_name_the_variable(name, value):
    with pytest.raises(ConfigurationError, match=name):
        BaseConfiguration.from_env({name: value})


def test_configure_logging_keeps_existing_handlers():
    root = logging.getLogger()
    handlers = list(root.handlers)
    root.addHandler(logging.NullHandler())
    try:
        BaseConfiguration(log_level="DEBUG").configure_logging()
        assert len(root.handlers) == len(handlers) + 1
    finally:
        root.handlers = handlers
