"""Correction form schema definitions.

Each module in this package exports a FORM_SCHEMA conforming to
correction_forms.schemas.rules.FormSchema.

The registry auto-discovers all modules via pkgutil.iter_modules.
To add a new form type, create a new .py file in this directory
with a module-level FORM_SCHEMA. Modules starting with "_" are skipped.
"""
