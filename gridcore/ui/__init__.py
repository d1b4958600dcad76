"""Optional Qt layer. Requires PyQt5 (install the ``qt`` extra)."""
