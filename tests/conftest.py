from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Callable

import pytest


@pytest.fixture()
def minimal_sherpadoc_document() -> dict[str, object]:
    return {
        "Name": "Minimal",
        "Docs": "",
        "Functions": [],
        "Sections": [],
        "Structs": [],
        "Ints": [],
        "Strings": [],
        "SherpadocVersion": 1,
    }


@pytest.fixture()
def item_sherpadoc_document() -> dict[str, object]:
    return {
        "Name": "Items",
        "Docs": "Items API.",
        "SherpadocVersion": 1,
        "Functions": [
            {
                "Name": "get",
                "Docs": "Get returns a single item.",
                "Params": [{"Name": "id", "Typewords": ["int64s"]}],
                "Returns": [{"Name": "item", "Typewords": ["Item"]}],
            }
        ],
        "Structs": [
            {
                "Name": "Item",
                "Docs": "An item in the store.",
                "Fields": [
                    {"Name": "id", "Docs": "", "Typewords": ["int64s"]},
                    {"Name": "name", "Docs": "", "Typewords": ["string"]},
                ],
            }
        ],
    }


@pytest.fixture()
def example_sherpadoc_document() -> dict[str, object]:
    return {
        "Name": "Example",
        "Docs": "Example API for tests.\nIt sells items.",
        "Version": "1.2.3",
        "SherpaVersion": 0,
        "SherpadocVersion": 1,
        "Functions": [
            {
                "Name": "get",
                "Docs": "Get returns a single item.",
                "Params": [{"Name": "id", "Typewords": ["int64s"]}],
                "Returns": [{"Name": "item", "Typewords": ["Item"]}],
            }
        ],
        "Structs": [
            {
                "Name": "Item",
                "Docs": "An item in the store.",
                "Fields": [
                    {"Name": "id", "Docs": "Unique identifier.", "Typewords": ["int64s"]},
                    {"Name": "name", "Docs": "Display name.\nAt most 64 characters.", "Typewords": ["string"]},
                ],
            }
        ],
        "Sections": [
            {
                "Name": "Shop",
                "Docs": "Shop functions.",
                "Structs": [
                    {
                        "Name": "Order",
                        "Docs": "",
                        "Fields": [
                            {"Name": "ID", "Docs": "", "Typewords": ["int64"]},
                            {"Name": "Items", "Docs": "", "Typewords": ["[]", "Item"]},
                            {"Name": "Status", "Docs": "", "Typewords": ["Status"]},
                            {"Name": "Created", "Docs": "", "Typewords": ["timestamp"]},
                            {"Name": "Note", "Docs": "", "Typewords": ["nullable", "string"]},
                            {"Name": "Tags", "Docs": "", "Typewords": ["{}", "string"]},
                            {"Name": "Color", "Docs": "", "Typewords": ["nullable", "Color"]},
                        ],
                    }
                ],
                "Ints": [
                    {
                        "Name": "Status",
                        "Docs": "Status of an order.",
                        "Values": [
                            {"Name": "New", "Value": 0, "Docs": "Just placed."},
                            {"Name": "Paid", "Value": 1, "Docs": ""},
                            {"Name": "Shipped", "Value": 2, "Docs": ""},
                        ],
                    }
                ],
                "Strings": [
                    {
                        "Name": "Color",
                        "Docs": "",
                        "Values": [
                            {"Name": "Red", "Value": "red", "Docs": ""},
                            {"Name": "Blue", "Value": "blue", "Docs": ""},
                        ],
                    }
                ],
                "Functions": [
                    {
                        "Name": "listOrders",
                        "Docs": "ListOrders returns orders with a status.\nA null status lists all orders.",
                        "Params": [{"Name": "status", "Typewords": ["nullable", "Status"]}],
                        "Returns": [{"Name": "orders", "Typewords": ["[]", "Order"]}],
                    },
                    {
                        "Name": "split",
                        "Docs": "",
                        "Params": [{"Name": "text", "Typewords": ["string"]}],
                        "Returns": [
                            {"Name": "head", "Typewords": ["string"]},
                            {"Name": "tail", "Typewords": ["string"]},
                        ],
                    },
                ],
                "Sections": [
                    {
                        "Name": "Admin",
                        "Docs": "Admin only.",
                        "Functions": [{"Name": "ping", "Docs": "", "Params": [], "Returns": []}],
                    }
                ],
            }
        ],
    }


@pytest.fixture()
def load_generated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[str, str], ModuleType]:
    """Write generated code to a file and import it as a module."""

    def load(code: str, module_name: str = "generated_client") -> ModuleType:
        path = tmp_path / f"{module_name}.py"
        path.write_text(code, encoding="utf-8")
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Could not load spec for {path}")
        module = importlib.util.module_from_spec(spec)
        monkeypatch.setitem(sys.modules, module_name, module)
        spec.loader.exec_module(module)
        return module

    return load

