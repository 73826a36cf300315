"""Qt presentation layer: render adapter, board widget and main window."""
