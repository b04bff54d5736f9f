"""tessera: composable terminal UI layouts over a cell surface."""

# Run loop
from tessera.application import Application, AppState

# Component contract
from tessera.component import ChildSlot, Component, Focusable, FormItem, is_focusable

# Layout containers and widgets (re-exported from components package)
from tessera.components import (
    Box,
    Button,
    Centerer,
    Flex,
    FlexDirection,
    Form,
    FractionalCenterer,
    Grid,
    ProgressBar,
    TextField,
)

# Configuration
from tessera.config import ApplicationConfig

# Errors
from tessera.errors import ConfigurationError, TerminalError, TesseraError

# Events
from tessera.events import (
    Event,
    Key,
    KeyEvent,
    Modifier,
    MouseButton,
    MouseEvent,
    NoopEventHandler,
    PasteEndEvent,
    PasteEvent,
    PasteStartEvent,
    ResizeEvent,
    SimpleEventHandler,
    is_left_press,
    offset_mouse_event,
)

# Space distribution
from tessera.layout import distribute

# Logging
from tessera.log import disable_debug_log, enable_debug_log

# Cell surfaces
from tessera.screen import (
    STYLE_DEFAULT,
    CellBuffer,
    ProxyScreen,
    Screen,
    Style,
    TerminalScreen,
)

# Theme
from tessera.theme import ASCII_BORDERS, DEFAULT_THEME, BorderGlyphs, Theme

# Utilities
from tessera.utils import Align, print_text, truncate_to_width, visible_width

__all__ = [
    # Run loop
    "AppState",
    "Application",
    # Component contract
    "ChildSlot",
    "Component",
    "Focusable",
    "FormItem",
    "is_focusable",
    # Components
    "Box",
    "Button",
    "Centerer",
    "Flex",
    "FlexDirection",
    "Form",
    "FractionalCenterer",
    "Grid",
    "ProgressBar",
    "TextField",
    # Configuration
    "ApplicationConfig",
    # Errors
    "ConfigurationError",
    "TerminalError",
    "TesseraError",
    # Events
    "Event",
    "Key",
    "KeyEvent",
    "Modifier",
    "MouseButton",
    "MouseEvent",
    "NoopEventHandler",
    "PasteEndEvent",
    "PasteEvent",
    "PasteStartEvent",
    "ResizeEvent",
    "SimpleEventHandler",
    "is_left_press",
    "offset_mouse_event",
    # Layout
    "distribute",
    # Logging
    "disable_debug_log",
    "enable_debug_log",
    # Screen
    "STYLE_DEFAULT",
    "CellBuffer",
    "ProxyScreen",
    "Screen",
    "Style",
    "TerminalScreen",
    # Theme
    "ASCII_BORDERS",
    "DEFAULT_THEME",
    "BorderGlyphs",
    "Theme",
    # Utilities
    "Align",
    "print_text",
    "truncate_to_width",
    "visible_width",
]
