"""PyQt6 front end: board widget, worker-thread bridge and main window."""
