from __future__ import annotations

import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Union, get_args, get_origin

from pydantic import TypeAdapter

JsonSchema = Dict[str, Any]


def _strip_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _parameter_schema(param: inspect.Parameter) -> JsonSchema:
    annotation = Any if param.annotation is inspect.Parameter.empty else _strip_optional(param.annotation)
    schema: JsonSchema = TypeAdapter(annotation).json_schema()
    if param.default is not inspect.Parameter.empty and param.default is not None:
        schema["default"] = param.default
    return schema


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]
    signature: inspect.Signature

    @property
    def required(self) -> List[str]:
        return [
            param.name for param in self.signature.parameters.values() if param.default is inspect.Parameter.empty
        ]

    @property
    def parameter_schema(self) -> JsonSchema:
        """JSON schema of the keyword arguments, built from the pydantic view of each annotation."""

        schema: JsonSchema = {
            "type": "object",
            "properties": {name: _parameter_schema(param) for name, param in self.signature.parameters.items()},
            "additionalProperties": False,
        }
        if self.required:
            schema["required"] = self.required
        return schema

    def as_tool(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameter_schema,
            },
        }

    def check_arguments(self, kwargs: Dict[str, Any]) -> None:
        missing = [name for name in self.required if name not in kwargs]
        if missing:
            raise ValueError(f"{self.name} is missing argument(s): {', '.join(missing)}")
        unknown = sorted(set(kwargs) - set(self.signature.parameters))
        if unknown:
            raise ValueError(f"{self.name} does not accept argument(s): {', '.join(unknown)}")


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str,
    tags: Optional[Iterable[str]] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
            signature=inspect.signature(func, eval_str=True),
        )
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return list(REGISTRY.values())


def call_api(name: str, **kwargs: Any) -> Any:
    if name not in REGISTRY:
        raise KeyError(f"API function '{name}' is not registered.")
    api_function = REGISTRY[name]
    api_function.check_arguments(kwargs)
    return api_function.func(**kwargs)
