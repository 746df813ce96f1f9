"""
Base configuration for selectable rows.

Reads defaults for selection mode, indicator style, colors and logging from
the environment (a .env file is loaded first) and validates them.
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from core.data_models import IndicatorAlignment, IndicatorStyle, SelectionIndicator, SelectionMode

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


class ConfigurationError(Exception):
    """Raised when a configuration value is invalid."""


@dataclass
class BaseConfiguration:
    """Selection and presentation defaults."""
    selection_mode: SelectionMode = SelectionMode.MULTIPLE
    require_selection: bool = False
    indicator_style: IndicatorStyle = IndicatorStyle.TAP_ON_ELEMENT
    indicator_alignment: IndicatorAlignment = IndicatorAlignment.TRAILING
    selector_color: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BaseConfiguration":
        """
        Load configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ; no .env file is
                loaded when given

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        config = cls(
            selection_mode=_parse_enum(environ, "SELECTABLE_ROWS_MODE", SelectionMode, SelectionMode.MULTIPLE),
            require_selection=_parse_bool(environ, "SELECTABLE_ROWS_REQUIRE_SELECTION", False),
            indicator_style=_parse_enum(environ, "SELECTABLE_ROWS_INDICATOR", IndicatorStyle,
                                        IndicatorStyle.TAP_ON_ELEMENT),
            indicator_alignment=_parse_enum(environ, "SELECTABLE_ROWS_ALIGNMENT", IndicatorAlignment,
                                            IndicatorAlignment.TRAILING),
            selector_color=environ.get("SELECTABLE_ROWS_COLOR") or None,
            log_level=environ.get("SELECTABLE_ROWS_LOG_LEVEL", "INFO").strip().upper(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """
        Check field consistency.

        Raises:
            ConfigurationError: If the log level is unknown
        """
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"SELECTABLE_ROWS_LOG_LEVEL: unknown log level '{self.log_level}'")

    @property
    def indicator(self) -> SelectionIndicator:
        return SelectionIndicator(self.indicator_style, self.indicator_alignment)

    def configure_logging(self) -> None:
        """Configure default console logging if not already configured."""
        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=self.log_level, format=LOG_FORMAT)


def _parse_enum(environ: Mapping[str, str], name: str, enum_type, default):
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return enum_type(raw.strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ConfigurationError(f"{name}: expected one of {choices}, got '{raw}'") from None


def _parse_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name}: expected a boolean, got '{raw}'")
