"""Display layer: role-tagged layout tokens and the terminal painter."""

from .console_renderer import ConsoleRenderer
from .layout_tokens import Frame, Role, Token, calendar_frame, config_frame

__all__ = ["ConsoleRenderer", "Frame", "Role", "Token", "calendar_frame", "config_frame"]
