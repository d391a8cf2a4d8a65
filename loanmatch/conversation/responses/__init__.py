"""Localized reply templates, one module per intent."""
