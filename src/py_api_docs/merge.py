"""
Combine several OpenAPI 3 documents into one

Paths are unioned and must not collide. Components with equal names are
deduplicated when their definitions match and renamed otherwise; every
$ref and security requirement of the renamed input follows the new name.
"""
import copy
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

import structlog

from .exceptions import MergeError
from .models import Dispute, MergeInput, OperationSelection

logger = structlog.get_logger(__name__)

OPENAPI_VERSION = "3.0.3"

COMPONENT_TYPES = (
    "schemas",
    "responses",
    "parameters",
    "examples",
    "requestBodies",
    "headers",
    "securitySchemes",
    "links",
    "callbacks",
)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

# component type -> {old name: new name}
Renames = Dict[str, Dict[str, str]]


def merge(inputs: Sequence[MergeInput]) -> Dict[str, Any]:
    """Merge the inputs, in order, into a single OpenAPI document."""
    if not inputs:
        raise MergeError("At least one input is required to merge")

    output: Dict[str, Any] = {"openapi": OPENAPI_VERSION}
    paths: Dict[str, Any] = {}
    components: Dict[str, Dict[str, Any]] = {t: {} for t in COMPONENT_TYPES}
    tags: List[Dict[str, Any]] = []
    seen_tags = set()
    security: List[Dict[str, Any]] = []
    appended_descriptions: List[str] = []

    info_source: Optional[int] = None
    for index, merge_input in enumerate(inputs):
        oas = copy.deepcopy(merge_input.oas)

        if "info" not in output and oas.get("info"):
            output["info"] = oas["info"]
            info_source = index
        if "servers" not in output and oas.get("servers"):
            output["servers"] = oas["servers"]
        if "externalDocs" not in output and oas.get("externalDocs"):
            output["externalDocs"] = oas["externalDocs"]

        incoming = oas.get("components") or {}
        renames = _plan_component_names(components, incoming, merge_input.dispute)
        if any(renames.values()):
            oas = _rewrite_refs(oas, renames)
            _rename_security_requirements(oas, renames.get("securitySchemes", {}))
            incoming = oas.get("components") or {}
        _add_components(components, incoming, renames)

        _add_paths(paths, oas.get("paths") or {}, merge_input, index)

        excluded = set()
        if merge_input.operation_selection:
            excluded = set(merge_input.operation_selection.exclude_tags)
        for tag in oas.get("tags") or []:
            name = tag.get("name")
            if name in seen_tags or name in excluded:
                continue
            seen_tags.add(name)
            tags.append(tag)

        for requirement in oas.get("security") or []:
            if requirement not in security:
                security.append(requirement)

        description = _appended_description(merge_input, oas)
        if description:
            appended_descriptions.append(description)

    if appended_descriptions:
        info = output.setdefault("info", {})
        sections = []
        if info_source is not None and not _appends_description(inputs[info_source]):
            if info.get("description"):
                sections.append(info["description"])
        sections.extend(appended_descriptions)
        info["description"] = "\n\n".join(sections)

    if tags:
        output["tags"] = tags
    if security:
        output["security"] = security
    output["paths"] = paths
    merged_components = {t: v for t, v in components.items() if v}
    if merged_components:
        output["components"] = merged_components

    logger.debug(
        "inputs_merged",
        inputs=len(inputs),
        paths=len(paths),
        components={t: len(v) for t, v in merged_components.items()},
    )
    return output


def _plan_component_names(
    existing: Dict[str, Dict[str, Any]],
    incoming: Dict[str, Any],
    dispute: Optional[Dispute],
) -> Renames:
    """Decide the merged name of every incoming component.

    Equality is judged on definitions whose refs already follow the
    renames, so a rename can cascade into components that point at it.
    Planning repeats until the renames stop changing.
    """
    renames: Renames = {t: {} for t in COMPONENT_TYPES}
    component_count = sum(len(incoming.get(t) or {}) for t in COMPONENT_TYPES)
    for _ in range(component_count + 1):
        rewritten = _rewrite_refs(incoming, renames) if any(renames.values()) else incoming
        planned = _plan_pass(existing, rewritten, dispute)
        if planned == renames:
            break
        renames = planned
    return renames


def _plan_pass(
    existing: Dict[str, Dict[str, Any]],
    incoming: Dict[str, Any],
    dispute: Optional[Dispute],
) -> Renames:
    renames: Renames = {}
    for ctype in COMPONENT_TYPES:
        definitions = incoming.get(ctype) or {}
        merged = existing[ctype]
        taken = set(merged) | set(definitions)
        mapping: Dict[str, str] = {}

        for name, definition in definitions.items():
            if dispute and dispute.always_apply:
                candidate = dispute.rename(name)
            elif name not in merged or merged[name] == definition:
                continue
            else:
                candidate = dispute.rename(name) if dispute else name

            new_name = _resolve_name(candidate, definition, merged, taken)
            taken.add(new_name)
            if new_name != name:
                mapping[name] = new_name

        renames[ctype] = mapping
    return renames


def _resolve_name(
    candidate: str,
    definition: Any,
    merged: Dict[str, Any],
    taken: Set[str],
) -> str:
    """First of candidate, candidate1, candidate2... that is free or already equal."""
    counter = 0
    name = candidate
    while True:
        if name in merged:
            if merged[name] == definition:
                return name
        elif name not in taken:
            return name
        counter += 1
        name = f"{candidate}{counter}"


def _add_components(
    existing: Dict[str, Dict[str, Any]],
    incoming: Dict[str, Any],
    renames: Renames,
):
    for ctype in COMPONENT_TYPES:
        mapping = renames.get(ctype, {})
        for name, definition in (incoming.get(ctype) or {}).items():
            new_name = mapping.get(name, name)
            if new_name in existing[ctype]:
                # matching definition already merged
                continue
            existing[ctype][new_name] = definition


def _pointer_token(name: str) -> str:
    return name.replace("~", "~0").replace("/", "~1")


def _ref_replacements(renames: Renames) -> List[Tuple[str, str]]:
    replacements = []
    for ctype, mapping in renames.items():
        for old, new in mapping.items():
            replacements.append((
                f"#/components/{ctype}/{_pointer_token(old)}",
                f"#/components/{ctype}/{_pointer_token(new)}",
            ))
    return replacements


def _rewrite_refs(node: Any, renames: Renames) -> Any:
    """Return node with every local $ref to a renamed component updated."""
    replacements = dict(_ref_replacements(renames))

    def rewrite(value: Any) -> Any:
        if isinstance(value, dict):
            out = {}
            for k, v in value.items():
                if k == "$ref" and isinstance(v, str):
                    out[k] = _rewrite_ref(v, replacements)
                else:
                    out[k] = rewrite(v)
            return out
        if isinstance(value, list):
            return [rewrite(v) for v in value]
        return value

    return rewrite(node)


def _rewrite_ref(ref: str, replacements: Dict[str, str]) -> str:
    if ref in replacements:
        return replacements[ref]
    # refs that point inside a renamed component, e.g. .../Pet/properties/id
    for old, new in replacements.items():
        if ref.startswith(old + "/"):
            return new + ref[len(old):]
    return ref


def _rename_security_requirements(oas: Dict[str, Any], mapping: Dict[str, str]):
    if not mapping:
        return

    def rename(requirements):
        return [
            {mapping.get(scheme, scheme): scopes for scheme, scopes in req.items()}
            for req in requirements
        ]

    if oas.get("security"):
        oas["security"] = rename(oas["security"])
    for path_item in (oas.get("paths") or {}).values():
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if isinstance(operation, dict) and operation.get("security"):
                operation["security"] = rename(operation["security"])


def _select_operations(
    path_item: Dict[str, Any],
    selection: Optional[OperationSelection],
) -> Optional[Dict[str, Any]]:
    """Filter a path item's operations; None when none are left."""
    if selection is None:
        return path_item

    kept = {
        method: operation
        for method, operation in path_item.items()
        if method in HTTP_METHODS and selection.keeps(operation)
    }
    if not kept:
        return None

    selected = {k: v for k, v in path_item.items() if k not in HTTP_METHODS}
    selected.update(kept)
    return selected


def _add_paths(
    paths: Dict[str, Any],
    incoming: Dict[str, Any],
    merge_input: MergeInput,
    index: int,
):
    for path, path_item in incoming.items():
        new_path = path
        if merge_input.path_modification:
            new_path = merge_input.path_modification.apply(path)

        selected = _select_operations(path_item, merge_input.operation_selection)
        if selected is None:
            continue

        if new_path in paths:
            raise MergeError(
                f"Input {index}: The path '{path}' maps to '{new_path}' and this "
                "has already been added by another input file",
                input_index=index,
            )
        paths[new_path] = selected


def _appends_description(merge_input: MergeInput) -> bool:
    return bool(merge_input.description and merge_input.description.append)


def _appended_description(merge_input: MergeInput, oas: Dict[str, Any]) -> Optional[str]:
    if not _appends_description(merge_input):
        return None
    text = (oas.get("info") or {}).get("description")
    if not text:
        return None
    if merge_input.description.title:
        return f"# {merge_input.description.title}\n\n{text}"
    return text
