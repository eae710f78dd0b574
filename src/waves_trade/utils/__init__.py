"""工具模組"""

from .functional import pipe
from .time_utils import current_millis

__all__ = [
    "current_millis",
    "pipe",
]
