# platkit Output Module
# Rich console output for classification results

from platkit.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
