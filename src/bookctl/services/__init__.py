"""Service layer: inventory operations returning ServiceResult."""
