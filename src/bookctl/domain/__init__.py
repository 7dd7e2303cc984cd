"""Domain layer: book model, flag parsing, filters, and ordering.

Pure Python with Pydantic models. No database or CLI imports.
"""
