from __future__ import annotations

from typing import Any, Dict

from .registry import get_api_functions, register_api


@register_api(
    "list_available_tools",
    description="Describe every registered layout function with its argument schema.",
    category="meta",
    tags=("tools", "metadata"),
)
def list_available_tools() -> Dict[str, Any]:
    functions = sorted(get_api_functions(), key=lambda item: item.name)
    return {
        "categories": sorted({func.category for func in functions}),
        "tools": [
            {
                "name": func.name,
                "description": func.description,
                "category": func.category,
                "tags": list(func.tags),
                "parameters": func.parameter_schema,
            }
            for func in functions
        ],
    }
