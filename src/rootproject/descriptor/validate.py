from __future__ import annotations

import json
from importlib.resources import files
from typing import Any

import jsonschema

from rootproject.descriptor.errors import DescriptorError


def validate_descriptor_basic(data: Any) -> None:
    if not isinstance(data, dict):
        raise DescriptorError("descriptor must be an object")

    if data.get("schema_version") != "0.1":
        raise DescriptorError("descriptor.schema_version must be '0.1'")

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise DescriptorError("descriptor.name must be a non-empty string")

    build_dir = data.get("build_dir", "../../build")
    if not isinstance(build_dir, str) or not build_dir.strip():
        raise DescriptorError("descriptor.build_dir must be a non-empty string")

    plugins = data.get("plugins", [])
    if not isinstance(plugins, list):
        raise DescriptorError("descriptor.plugins must be a list")
    for i, p in enumerate(plugins):
        if not isinstance(p, dict):
            raise DescriptorError(f"descriptor.plugins[{i}] must be an object")
        if not isinstance(p.get("id"), str) or not p["id"].strip():
            raise DescriptorError(f"descriptor.plugins[{i}].id must be a non-empty string")
        if not isinstance(p.get("version"), str):
            raise DescriptorError(f"descriptor.plugins[{i}].version must be a string")
        if "apply" in p and not isinstance(p["apply"], bool):
            raise DescriptorError(f"descriptor.plugins[{i}].apply must be a boolean")

    repos = data.get("repositories", [])
    if not isinstance(repos, list):
        raise DescriptorError("descriptor.repositories must be a list")
    for i, r in enumerate(repos):
        if isinstance(r, str):
            continue
        if not isinstance(r, dict) or not isinstance(r.get("name"), str):
            raise DescriptorError(f"descriptor.repositories[{i}] must be a name or {{name, url}} object")
        if "url" in r and r["url"] is not None and not isinstance(r["url"], str):
            raise DescriptorError(f"descriptor.repositories[{i}].url must be a string")

    subprojects = data.get("subprojects", [])
    if not isinstance(subprojects, list) or not all(isinstance(s, str) for s in subprojects):
        raise DescriptorError("descriptor.subprojects must be a list of strings")

    dep = data.get("evaluation_depends_on", ":app")
    if dep is not None and (not isinstance(dep, str) or not dep.strip()):
        raise DescriptorError("descriptor.evaluation_depends_on must be a project path or null")


def load_descriptor_schema() -> dict[str, Any]:
    schema_text = (files("rootproject.descriptor.schemas") / "descriptor.schema.json").read_text(encoding="utf-8")
    return json.loads(schema_text)


def validate_descriptor_schema(data: Any) -> None:
    """
    Full validation against the bundled JSON Schema.
    The basic checks above give friendlier messages; this catches the rest.
    """
    try:
        jsonschema.validate(instance=data, schema=load_descriptor_schema())
    except jsonschema.ValidationError as exc:
        where = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise DescriptorError(f"descriptor does not match schema at {where}: {exc.message}") from exc
