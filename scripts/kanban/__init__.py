"""
Kanban - a keyboard-driven task board for the terminal.

Architecture:
- models.py: Task and Status (status doubles as column index)
- messages.py: requests screens hand to the dispatcher
- widgets.py: adapters over Textual's ListView, Input and TextArea
- views/: board and form screens
- dispatcher.py: owns both screens, switches between them, performs hand-offs
- app.py: Textual application hosting the dispatcher
"""

__version__ = "0.1.0"
