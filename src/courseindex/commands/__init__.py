"""
courseindex.commands - CLI command implementations
"""

__all__ = [
    "check",
    "config_cmd",
    "init",
    "list_cmd",
    "menu",
    "show",
]
