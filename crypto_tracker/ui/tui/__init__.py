"""Rich-based full-screen price table.

Modules:
- app.py: Interaction loop and refresh scheduling
- display.py: Rich renderables for header, body and footer
- renderer.py: Row formatting utilities
- terminal.py: Alternate screen and key input session
- config.py: TUI styles and constants
"""

__all__ = [
    "app",
    "display",
    "renderer",
    "terminal",
    "config",
]
