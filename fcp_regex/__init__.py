"""Operation parsing, undo/redo history and session routing for regex fragment composition."""

__version__ = "0.1.2"