"""Architectural tests for the order map service layout.

All checks use static filesystem/AST inspection to avoid import-time side
effects.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
APP_DIR = PROJECT_ROOT / "app"
LOGIC_DIR = APP_DIR / "logic"
ROUTES_DIR = APP_DIR / "routes"
MODELS_DIR = APP_DIR / "models"
SCHEMAS_DIR = PROJECT_ROOT / "schemas"


@dataclass
class ParsedModule:
    path: Path
    tree: ast.AST


def parse_module(path: Path) -> ParsedModule:
    try:
        return ParsedModule(path=path, tree=ast.parse(path.read_text(encoding="utf-8"), filename=str(path)))
    except (OSError, SyntaxError) as exc:  # pragma: no cover - explicit failure in test
        pytest.fail(f"Failed to parse {path}: {exc}")


def imported_modules(pm: ParsedModule) -> set[str]:
    names: set[str] = set()
    for node in ast.walk(pm.tree):
        if isinstance(node, ast.Import):
            names.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            names.add(node.module)
    return names


def top_level_functions(pm: ParsedModule) -> set[str]:
    return {n.name for n in getattr(pm.tree, "body", []) if isinstance(n, ast.FunctionDef)}


def dunder_all(pm: ParsedModule) -> Optional[list[str]]:
    for node in getattr(pm.tree, "body", []):
        if isinstance(node, ast.Assign) and any(isinstance(t, ast.Name) and t.id == "__all__" for t in node.targets):
            return [elt.value for elt in node.value.elts]  # type: ignore[attr-defined]
    return None


def test_order_map_module_exports_operations() -> None:
    pm = parse_module(LOGIC_DIR / "order_map.py")
    expected = {"apply_mappings", "move_at_order", "place_at_order", "add_at_order", "normalize", "change_min_order"}
    assert expected <= top_level_functions(pm)
    assert expected <= set(dunder_all(pm) or [])


@pytest.mark.parametrize("module", ["order_map.py", "order_by.py"])
def test_logic_modules_have_no_web_or_global_state_imports(module: str) -> None:
    pm = parse_module(LOGIC_DIR / module)
    forbidden = {"fastapi", "starlette", "app.routes", "app.config"}
    hits = {name for name in imported_modules(pm) if name.split(".")[0] in forbidden or name in forbidden}
    assert not hits, f"{module} must stay framework-free, found {sorted(hits)}"


def test_order_map_functions_do_not_mutate_arguments() -> None:
    """No subscript assignment may target a function parameter directly."""
    pm = parse_module(LOGIC_DIR / "order_map.py")
    for fn in ast.walk(pm.tree):
        if not isinstance(fn, ast.FunctionDef):
            continue
        params = {a.arg for a in fn.args.args}
        for node in ast.walk(fn):
            targets = []
            if isinstance(node, (ast.Assign, ast.AugAssign)):
                targets = node.targets if isinstance(node, ast.Assign) else [node.target]
            for tgt in targets:
                if isinstance(tgt, ast.Subscript) and isinstance(tgt.value, ast.Name):
                    assert tgt.value.id not in params, f"{fn.name} mutates parameter {tgt.value.id}"


def test_routes_delegate_to_logic_modules() -> None:
    maps = imported_modules(parse_module(ROUTES_DIR / "order_maps.py"))
    order_by = imported_modules(parse_module(ROUTES_DIR / "order_by.py"))
    assert "app.logic.order_map" in maps
    assert "app.logic.order_by" in order_by
    assert "app.logic.problem_factory" in maps & order_by


def test_router_registration_includes_both_routers() -> None:
    names = imported_modules(parse_module(ROUTES_DIR / "__init__.py"))
    assert {"app.routes.order_maps", "app.routes.order_by"} <= names


def test_response_schemas_exist() -> None:
    for name in ("order_map_result.schema.json", "problem.schema.json"):
        assert (SCHEMAS_DIR / name).exists(), f"schemas/{name} must exist"
