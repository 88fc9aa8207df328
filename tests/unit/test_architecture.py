"""
Architectural tests — enforce layer boundaries.

These tests verify that the codebase maintains proper separation of concerns:
- models.py, formatting.py and resolver.py are leaf modules
- adapters/ wrap Google APIs and know nothing about tools or MCP
- tools/ wires adapters to the registry
- server.py and cli.py are the only entry points

This prevents accidental coupling that would make adapters hard to test.
"""

import ast
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent

ENTRY_POINTS = {"server", "cli"}

# Layers (packages or single modules) and their forbidden imports
LAYER_RULES = {
    "models": {"adapters", "tools", "registry", "auth", "resolver", "formatting"} | ENTRY_POINTS,
    "formatting": {"adapters", "tools", "registry", "auth"} | ENTRY_POINTS,
    "resolver": {"adapters", "tools", "registry", "auth"} | ENTRY_POINTS,
    "auth": {"adapters", "tools", "registry"} | ENTRY_POINTS,
    "adapters": {"tools", "registry", "auth"} | ENTRY_POINTS,
    "registry": {"tools", "adapters"} | ENTRY_POINTS,
    "tools": ENTRY_POINTS,
}


def get_imports_from_file(filepath: Path) -> set[str]:
    """Extract all top-level import names from a Python file."""
    with open(filepath) as f:
        tree = ast.parse(f.read(), filename=str(filepath))

    imports = set()

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.add(alias.name.split(".")[0])
        elif isinstance(node, ast.ImportFrom):
            if node.module and node.level == 0:
                imports.add(node.module.split(".")[0])

    return imports


def get_layer_files(layer: str) -> list[Path]:
    """The module file for a single-module layer, or every file in a package."""
    module = PROJECT_ROOT / f"{layer}.py"
    if module.exists():
        return [module]
    return list((PROJECT_ROOT / layer).glob("*.py"))


class TestLayerBoundaries:
    """Verify that layer boundaries are respected."""

    @pytest.mark.parametrize("layer,forbidden", list(LAYER_RULES.items()))
    def test_layer_does_not_import_forbidden(self, layer: str, forbidden: set[str]) -> None:
        """Each layer must not import from its forbidden layers."""
        violations = []

        for filepath in get_layer_files(layer):
            bad_imports = get_imports_from_file(filepath) & forbidden
            if bad_imports:
                violations.append(f"{filepath.name} imports {bad_imports}")

        assert not violations, (
            f"Layer '{layer}' has forbidden imports:\n" +
            "\n".join(f"  - {v}" for v in violations)
        )

    def test_only_adapters_build_clients(self) -> None:
        """googleapiclient is confined to adapters/."""
        violations = []
        for filepath in PROJECT_ROOT.glob("*.py"):
            if "googleapiclient" in get_imports_from_file(filepath):
                violations.append(filepath.name)
        for filepath in (PROJECT_ROOT / "tools").glob("*.py"):
            if "googleapiclient" in get_imports_from_file(filepath):
                violations.append(f"tools/{filepath.name}")

        assert not violations, f"googleapiclient imported outside adapters/: {violations}"


class TestPackageStructure:
    """Verify expected package structure exists."""

    @pytest.mark.parametrize("package", ["adapters", "tools"])
    def test_package_has_init(self, package: str) -> None:
        """Each package must have an __init__.py."""
        init_file = PROJECT_ROOT / package / "__init__.py"
        assert init_file.exists(), f"{package}/__init__.py missing"

    def test_no_module_shadows_stdlib(self) -> None:
        """Tool modules are imported as tools.X but must not reuse stdlib names."""
        import sys
        names = {p.stem for p in (PROJECT_ROOT / "tools").glob("*.py")}
        names |= {p.stem for p in (PROJECT_ROOT / "adapters").glob("*.py")}
        assert not names & set(sys.stdlib_module_names)
