"""
This module holds all of the command classes for the main entrypoint
"""

# Local
from .base import CmdBase
from .render_cmd import RenderCmd
