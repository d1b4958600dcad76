"""Qt adapters wrapping the Qt-free grid engine."""
