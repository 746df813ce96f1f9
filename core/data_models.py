"""Core data structures for selectable rows.

Selection policy and presentation descriptors shared by the store, the
row controller and any UI backend that draws the rows.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Hashable, Optional, TypeVar

T = TypeVar("T", bound=Hashable)

# Opaque color value interpreted by the UI layer ("#ff8800", "blue", ...)
Color = str

# Per-item indicator color; None means "use the default"
ColorProvider = Callable[[T], Optional[Color]]


class SelectionMode(Enum):
    """How many elements may be selected at once."""
    SINGLE = "single"
    MULTIPLE = "multiple"


class IndicatorStyle(Enum):
    """Visual style used to show the selection state of a row."""
    CHECKMARK = "checkmark"
    CHECKBOX = "checkbox"
    TOGGLE = "toggle"
    TAP_ON_ELEMENT = "tap_on_element"
    TAP_ON_ROW = "tap_on_row"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").capitalize()


class IndicatorAlignment(Enum):
    """Placement of the indicator icon on a row."""
    LEADING = "leading"
    TRAILING = "trailing"


_ICON_STYLES = (IndicatorStyle.CHECKMARK, IndicatorStyle.CHECKBOX, IndicatorStyle.TOGGLE)


@dataclass(frozen=True, slots=True)
class SelectionIndicator:
    """Indicator style plus alignment; tap styles carry no alignment."""
    style: IndicatorStyle = IndicatorStyle.TAP_ON_ELEMENT
    alignment: Optional[IndicatorAlignment] = None

    def __post_init__(self) -> None:
        if self.style in _ICON_STYLES:
            if self.alignment is None:
                object.__setattr__(self, "alignment", IndicatorAlignment.TRAILING)
        else:
            object.__setattr__(self, "alignment", None)

    @property
    def shows_icon(self) -> bool:
        """True for checkmark, checkbox and toggle styles."""
        return self.style in _ICON_STYLES

    @classmethod
    def checkmark(cls, alignment: IndicatorAlignment = IndicatorAlignment.TRAILING) -> "SelectionIndicator":
        return cls(IndicatorStyle.CHECKMARK, alignment)

    @classmethod
    def checkbox(cls, alignment: IndicatorAlignment = IndicatorAlignment.TRAILING) -> "SelectionIndicator":
        return cls(IndicatorStyle.CHECKBOX, alignment)

    @classmethod
    def toggle(cls, alignment: IndicatorAlignment = IndicatorAlignment.TRAILING) -> "SelectionIndicator":
        return cls(IndicatorStyle.TOGGLE, alignment)

    @classmethod
    def tap_on_element(cls) -> "SelectionIndicator":
        return cls(IndicatorStyle.TAP_ON_ELEMENT)

    @classmethod
    def tap_on_row(cls) -> "SelectionIndicator":
        return cls(IndicatorStyle.TAP_ON_ROW)

    def __str__(self) -> str:
        if self.alignment is None:
            return f"SelectionIndicator({self.style.value})"
        return f"SelectionIndicator({self.style.value}, {self.alignment.value})"


@dataclass(frozen=True)
class RowState(Generic[T]):
    """Everything a UI backend needs to draw one row."""
    index: int
    element: T
    is_selected: bool
    indicator: SelectionIndicator
    color: Optional[Color] = None
