#!/usr/bin/env python3
"""
Keep hal_client.core free of network and event-loop code.

The core is a pure data model: it may use httpx for ``httpx.URL`` but must
never open a connection. Exits non-zero and lists every offending line.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

CORE_DIR = Path(__file__).resolve().parent.parent / "src" / "hal_client" / "core"

# module -> forbidden names within it; None bans the module outright
RULES: dict[str, frozenset[str] | None] = {
    "asyncio": None,
    "socket": None,
    "http.client": None,
    "urllib.request": None,
    "requests": None,
    "aiohttp": None,
    "httpx": frozenset({"Client", "AsyncClient", "request", "get", "post", "stream"}),
}


def _banned_module(module: str) -> str | None:
    for name, names in RULES.items():
        if names is None and (module == name or module.startswith(name + ".")):
            return name
    return None


class _Scanner(ast.NodeVisitor):
    def __init__(self) -> None:
        self.hits: list[tuple[int, str]] = []

    def visit_Import(self, node: ast.Import) -> None:
        for alias in node.names:
            if _banned_module(alias.name):
                self.hits.append((node.lineno, alias.name))

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        module = node.module or ""
        if _banned_module(module):
            self.hits.append((node.lineno, module))
            return
        banned = RULES.get(module) or frozenset()
        for alias in node.names:
            if alias.name in banned:
                self.hits.append((node.lineno, f"{module}.{alias.name}"))

    def visit_Attribute(self, node: ast.Attribute) -> None:
        if isinstance(node.value, ast.Name):
            banned = RULES.get(node.value.id) or frozenset()
            if node.attr in banned:
                self.hits.append((node.lineno, f"{node.value.id}.{node.attr}"))
        self.generic_visit(node)


def scan_file(path: Path) -> list[str]:
    scanner = _Scanner()
    scanner.visit(ast.parse(path.read_text(), filename=str(path)))
    return [f"{path}:{line}: forbidden '{what}'" for line, what in scanner.hits]


def main() -> int:
    violations = [
        hit for py_file in sorted(CORE_DIR.rglob("*.py")) for hit in scan_file(py_file)
    ]
    for v in violations:
        print(v, file=sys.stderr)
    return 1 if violations else 0


if __name__ == "__main__":
    sys.exit(main())
