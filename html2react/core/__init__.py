"""Core business logic: parsing, mapping, assembly and generation."""
