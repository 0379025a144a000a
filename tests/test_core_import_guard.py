import importlib.util
from pathlib import Path

import pytest


@pytest.fixture(scope="module")
def guard():
    script = (
        Path(__file__).resolve().parent.parent / "scripts" / "check_core_imports.py"
    )
    spec = importlib.util.spec_from_file_location("check_core_imports", script)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None  # for mypy
    spec.loader.exec_module(module)
    return module


def test_core_import_guard_passes(guard):
    exit_code = guard.main()
    assert exit_code == 0, "core import guard failed"


@pytest.mark.parametrize(
    "source",
    [
        "import requests\n",
        "import asyncio\n",
        "from http.client import HTTPConnection\n",
        "from httpx import AsyncClient\n",
        "import httpx\nhttpx.get('https://example.com')\n",
    ],
)
def test_guard_flags_io_imports(guard, tmp_path, source):
    path = tmp_path / "module.py"
    path.write_text(source)
    assert guard.scan_file(path)


def test_guard_allows_url_type(guard, tmp_path):
    path = tmp_path / "module.py"
    path.write_text("import httpx\nfrom httpx import URL\nhttpx.URL('/a')\n")
    assert guard.scan_file(path) == []
