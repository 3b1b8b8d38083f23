"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from member_summary.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "visibility": {
        # Lowest access level that is documented: public/protected/package/private
        "min_access": "protected",
        # Type uids documented elsewhere that may still be linked to
        "linkable_external": [],
    },
    "properties": {
        "enabled": True,
    },
    "naming": {
        "getter_prefixes": ["get", "is"],
        "setter_prefixes": ["set"],
        "property_suffix": "Property",
    },
    "messages": {
        "property_getter_with_name": "Gets the value of the property {0}.",
        "property_setter_with_name": "Sets the value of the property {0}.",
        "nested_types_summary": "Nested Class Summary",
        "enum_constants_summary": "Enum Constant Summary",
        "fields_summary": "Field Summary",
        "properties_summary": "Property Summary",
        "constructors_summary": "Constructor Summary",
        "methods_summary": "Method Summary",
        "annotation_fields_summary": "Field Summary",
        "annotation_required_elements_summary": "Required Element Summary",
        "annotation_optional_elements_summary": "Optional Element Summary",
        "nested_types_inherited_from": "Nested classes/interfaces inherited from {0} {1}",
        "fields_inherited_from": "Fields inherited from {0} {1}",
        "properties_inherited_from": "Properties inherited from {0} {1}",
        "methods_inherited_from": "Methods inherited from {0} {1}",
    },
    "output": {
        "api_root": "/api",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
