"""Screens of the board application: the board and the task form."""
