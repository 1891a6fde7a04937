"""
roster_core package: team generation, roster state, search, exports and diagnostics.
"""
__all__ = [
    "constants",
    "models",
    "generator",
    "manager",
    "file_save",
    "aliases",
    "io",
    "export_pdf",
    "config",
    "validation",
    "ui_state",
]
