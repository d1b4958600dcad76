"""Application layer: stores, services and the DataGrid facade."""
