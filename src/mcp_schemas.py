"""Tool parameter contracts for the MCP server.

Each tool's parameters are declared once as ``ToolParam`` descriptors. The
JSON Schema used for input validation and the descriptions advertised by the
server are both derived from these descriptors.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from constants import Constants

JSON_SCHEMA_DRAFT7 = "http://json-schema.org/draft-07/schema#"


@dataclass(frozen=True)
class ToolParam:
    """One tool parameter: name, JSON type, required flag and description."""
    name: str
    type: str
    required: bool
    description: str
    min_length: Optional[int] = None


def input_schema(params: Sequence[ToolParam]) -> Dict[str, Any]:
    """Build a Draft-07 object schema from parameter descriptors."""
    properties: Dict[str, Any] = {}
    for p in params:
        prop: Dict[str, Any] = {"type": p.type, "description": p.description}
        if p.min_length is not None:
            prop["minLength"] = p.min_length
        properties[p.name] = prop
    return {
        "$schema": JSON_SCHEMA_DRAFT7,
        "type": "object",
        "properties": properties,
        "required": [p.name for p in params if p.required],
        "additionalProperties": False,
    }


def param(params: Sequence[ToolParam], name: str) -> ToolParam:
    """Look up a descriptor by parameter name."""
    for p in params:
        if p.name == name:
            return p
    raise KeyError(name)


README_TOOL_NAME = Constants.MCP_TOOL_NAME
README_TOOL_DESCRIPTION = (
    "Return the README markdown for npm package@version. "
    "Looks on GitHub first, then falls back to the npm registry blob."
)

README_PARAMS = (
    ToolParam(
        name="name",
        type="string",
        required=True,
        description='Package name, e.g. "react"',
        min_length=1,
    ),
    ToolParam(
        name="version",
        type="string",
        required=False,
        description='Semver (defaults to registry "latest")',
        min_length=1,
    ),
)

README_INPUT = input_schema(README_PARAMS)
