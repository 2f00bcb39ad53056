"""Tool catalog, validation, handlers, and dispatch.

Each tool is declared once in the catalog, validated against its
fields, and fulfilled by one call to the presentation backend.
"""
