"""
ontodag.commands - CLI command implementations
"""

__all__ = [
    "config_cmd",
    "export",
    "index",
    "show",
]
