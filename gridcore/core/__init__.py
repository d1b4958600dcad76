"""Qt-free engine core."""
