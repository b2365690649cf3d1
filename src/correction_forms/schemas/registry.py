"""Form Schema Registry - auto-discovery of correction form rule tables.

Every module in the forms/ subpackage exporting a FORM_SCHEMA is registered
under its form-type code on first use. The table is built once per process
and never mutated afterwards.

Adding a new form type:
  - create forms/form_<code>.py with a module-level FORM_SCHEMA
"""

import importlib
import pkgutil
from typing import Dict, List, Optional

from correction_forms.common.safe_log import safe_log
from correction_forms.schemas import forms as _forms_pkg
from correction_forms.schemas.rules import FormSchema

# Module-level registry, populated once on first access
_REGISTRY: Dict[str, FormSchema] = {}
_DISCOVERED: bool = False


def _discover_schemas() -> None:
    """Import every forms/ module and register its FORM_SCHEMA.

    A module that fails to import or declares a duplicate code is logged and
    skipped; the remaining form types stay available.
    """
    global _DISCOVERED
    if _DISCOVERED:
        return

    for _importer, modname, _ispkg in pkgutil.iter_modules(_forms_pkg.__path__):
        if modname.startswith("_"):
            continue
        qualified = f"{_forms_pkg.__name__}.{modname}"
        try:
            module = importlib.import_module(qualified)
        except Exception as e:
            safe_log("WARNING: Failed to load form schema", module=qualified, error=str(e))
            continue

        schema = getattr(module, "FORM_SCHEMA", None)
        if not isinstance(schema, FormSchema):
            continue
        if schema.form_type in _REGISTRY:
            safe_log(
                "WARNING: Duplicate form type - skipping",
                formType=schema.form_type,
                module=qualified,
            )
            continue
        _REGISTRY[schema.form_type] = schema

    _DISCOVERED = True


def get_schema(form_type: str) -> FormSchema:
    """Get a form schema by its form-type code.

    Args:
        form_type: Form-type code (e.g., "01721")

    Returns:
        The FormSchema for that code

    Raises:
        KeyError: If the code is not in the registry
    """
    _discover_schemas()
    if form_type not in _REGISTRY:
        raise KeyError(
            f"Unknown form type: '{form_type}'. "
            f"Available form types: {sorted(_REGISTRY)}"
        )
    return _REGISTRY[form_type]


def find_schema(form_type: str) -> Optional[FormSchema]:
    """Get a form schema by code, or None if the code is unknown."""
    _discover_schemas()
    return _REGISTRY.get(form_type)


def get_all_schemas() -> Dict[str, FormSchema]:
    """Get all registered schemas keyed by form-type code."""
    _discover_schemas()
    return dict(_REGISTRY)


def get_form_type_codes() -> List[str]:
    """Get all registered form-type codes, sorted."""
    _discover_schemas()
    return sorted(_REGISTRY)
