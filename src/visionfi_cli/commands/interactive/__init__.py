"""Interactive menu mode.

Started by ``visionfi interactive`` or by running ``visionfi`` with no
command. Offers document analysis, results retrieval, account and
configuration management and developer tools as numbered menus.
"""

from .handlers import handle
from .parser import register_parser

__all__ = ["register_parser", "handle"]
