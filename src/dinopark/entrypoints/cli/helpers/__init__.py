"""CLI helpers for DINOPARK.

Utilities used by the command-line interface: URL sanitization for safe
display, message emitters that write to stderr with emoji→ASCII fallbacks,
and rendering of park read models as Rich tables or JSON.
"""

from .db_url import sanitize_url
from .messages import error, success, warn

__all__ = ["sanitize_url", "warn", "success", "error"]
