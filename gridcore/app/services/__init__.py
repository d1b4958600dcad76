"""Application services: diagnostics, pagination descriptors, progressive loading."""
