"""Operation-specific Rich renderers for ServiceResult.

Renderers write to a StringIO-backed Console and are dispatched by
``result.op`` in :func:`render_result`. Unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from zonectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from zonectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: ids or paths, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    data = result.data
    for key in ("projects", "zones", "agents"):
        if key in data:
            return "\n".join(str(item.get("id", "")) for item in data[key])
    for key in ("project", "zone", "agent"):
        if key in data:
            return str(data[key].get("id", ""))
    if "paths" in data:
        return "\n".join(data["paths"])
    if "tree" in data:
        return "\n".join(p for p in _walk_paths(data["tree"]) if p)
    if "id" in data:
        return str(data["id"])
    return f"OK: {result.op}"


def render_tree(node: dict[str, Any], *, label: str | None = None) -> Tree:
    """Build a Rich Tree from a serialized TreeNode."""
    tree = Tree(Text(label or node.get("name", "."), style="zone.dir"))
    _add_children(tree, node.get("children", []))
    return tree


# ── Helpers ───────────────────────────────────────────────────────────


def _add_children(branch: Tree, children: list[dict[str, Any]]) -> None:
    for child in children:
        if child.get("is_dir"):
            sub = branch.add(Text(f"{child['name']}/", style="zone.dir"))
            _add_children(sub, child.get("children", []))
        else:
            branch.add(Text(child["name"]))


def _walk_paths(node: dict[str, Any]) -> list[str]:
    paths = [node.get("path", "")]
    for child in node.get("children", []):
        paths.extend(_walk_paths(child))
    return paths


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="zone.ok")
    op = Text(f"  {result.op}", style="zone.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="zone.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="zone.id")
    elif key in ("root", "root_dir", "pattern"):
        v = Text(str(value), style="zone.path")
    elif key == "name":
        v = Text(str(value), style="zone.name")
    elif isinstance(value, list):
        v = Text(", ".join(str(x) for x in value) if value else "-")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _agent_names(refs: list[dict[str, Any]]) -> str:
    return ", ".join(ref.get("name") or ref.get("id", "") for ref in refs)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="zone.error")
    op = Text(f"  {result.op}", style="zone.op")
    code = Text(f"  [{err.code}] " if err else "  ", style="zone.key")
    console.print(label, op, code, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Entity renderers ──────────────────────────────────────────────────


def _render_entity(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single project, zone, or agent as key-value fields."""
    _status_line(console, result)
    for key in ("project", "zone", "agent"):
        entity = result.data.get(key)
        if entity is None:
            continue
        for field, value in entity.items():
            if field == "assigned_agents":
                _field(console, "agents", _agent_names(value) or "-")
            elif field == "prompt" and not verbose and value:
                first = value.splitlines()[0]
                _field(console, field, first if len(first) < 60 else f"{first[:57]}...")
            else:
                _field(console, field, value)
    if verbose:
        _render_meta(console, result)


def _render_projects(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    projects = result.data.get("projects", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("ID", style="zone.id", no_wrap=True)
    table.add_column("Name", style="zone.name")
    table.add_column("Root", style="zone.path")
    table.add_column("Ignored")
    for p in projects:
        table.add_row(p["id"], p.get("name", ""), p["root_dir"], str(len(p.get("ignored_paths", []))))
    console.print(table)
    console.print(f"\n{len(projects)} projects")


def _render_zones(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    zones = result.data.get("zones", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("ID", style="zone.id", no_wrap=True)
    table.add_column("Name", style="zone.name")
    table.add_column("Pattern", style="zone.path")
    table.add_column("Paths", justify="right")
    table.add_column("Agents")
    if verbose:
        table.add_column("Purpose")
    for z in zones:
        row = [
            z["id"],
            z["name"],
            z.get("pattern", ""),
            str(len(z.get("explicit_paths", []))),
            _agent_names(z.get("assigned_agents", [])),
        ]
        if verbose:
            row.append(z.get("purpose", ""))
        table.add_row(*row)
    console.print(table)
    console.print(f"\n{len(zones)} zones")


def _render_agents(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    agents = result.data.get("agents", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("ID", style="zone.id", no_wrap=True)
    table.add_column("Name", style="zone.name")
    table.add_column("Description")
    for a in agents:
        table.add_row(a["id"], a.get("name", ""), a.get("description", ""))
    console.print(table)
    console.print(f"\n{len(agents)} agents")


# ── Filesystem renderers ──────────────────────────────────────────────


def _render_tree(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    root = result.data.get("root", ".")
    console.print(render_tree(result.data.get("tree", {}), label=root or "."))


def _render_paths(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "root", result.data.get("root", ""))
    paths = result.data.get("paths", [])
    for path in paths:
        console.print(Text(f"  {path or '.'}", style="zone.path"))
    console.print(f"\n{len(paths)} paths")


def _render_highlights(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    claims: dict[str, list[str]] = result.data.get("paths", {})
    for path, names in claims.items():
        console.print(Text(f"  {path or '.'}", style="zone.path"), Text(f"  {', '.join(names)}"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, dict):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Projects
    "list_projects": _render_projects,
    "get_project": _render_entity,
    "create_project": _render_entity,
    "update_project": _render_entity,
    "add_ignored_path": _render_entity,
    "remove_ignored_path": _render_entity,
    # Zones
    "list_zones": _render_zones,
    "get_zone": _render_entity,
    "create_zone": _render_entity,
    "update_zone": _render_entity,
    "assign_path_to_zone": _render_entity,
    "zone_highlights": _render_highlights,
    # Agents
    "list_agents": _render_agents,
    "get_agent": _render_entity,
    "create_agent": _render_entity,
    "update_agent": _render_entity,
    # Filesystem
    "list_tree": _render_tree,
    "list_matching_paths": _render_paths,
}
