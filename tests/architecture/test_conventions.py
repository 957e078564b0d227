"""
Convention Enforcement Tests.

Catch anti-patterns that import-based layer rules cannot detect: mutable
domain models, list-typed fields, silent exception swallowing and
incomplete adapters.
"""

import ast
import inspect
from pathlib import Path

import pytest

from rcflow.domain import interfaces
from rcflow.infrastructure.notifications import InMemoryNotifier, LoggingNotifier
from rcflow.infrastructure.transport import HttpNodeTransport, SimulatedNodeTransport
from rcflow.infrastructure.workflows import (
    FilesystemWorkflowSource,
    InMemoryWorkflowSource,
)

SRC_ROOT = Path(__file__).parent.parent.parent / "src" / "rcflow"


def _dataclasses(filepath: Path) -> list[tuple[ast.ClassDef, bool]]:
    """Return (class node, is_frozen) for each @dataclass in a file."""
    tree = ast.parse(filepath.read_text())
    results = []

    for node in ast.walk(tree):
        if not isinstance(node, ast.ClassDef):
            continue
        for decorator in node.decorator_list:
            if isinstance(decorator, ast.Name) and decorator.id == "dataclass":
                results.append((node, False))
            elif (
                isinstance(decorator, ast.Call)
                and isinstance(decorator.func, ast.Name)
                and decorator.func.id == "dataclass"
            ):
                frozen = any(
                    kw.arg == "frozen"
                    and isinstance(kw.value, ast.Constant)
                    and kw.value.value is True
                    for kw in decorator.keywords
                )
                results.append((node, frozen))
    return results


class TestFrozenDataclassConvention:
    """Domain models are values: every report and config is a new instance."""

    def test_domain_models_are_frozen(self):
        models_file = SRC_ROOT / "domain" / "models.py"

        violations = [
            node.name
            for node, frozen in _dataclasses(models_file)
            if not frozen
        ]

        assert not violations, f"Domain dataclasses must be frozen: {violations}"

    def test_domain_models_use_tuples_not_lists(self):
        models_file = SRC_ROOT / "domain" / "models.py"
        source = models_file.read_text()
        violations = []

        for node, _ in _dataclasses(models_file):
            for item in node.body:
                if not isinstance(item, ast.AnnAssign):
                    continue
                annotation = ast.get_source_segment(source, item.annotation) or ""
                if "list[" in annotation.lower():
                    target = getattr(item.target, "id", "?")
                    violations.append(f"{node.name}.{target}")

        assert not violations, f"Use tuple[] for model fields: {violations}"


class TestNoSilentExceptionSwallowing:
    """No 'except ...: pass' anywhere in src/rcflow/."""

    def test_no_except_pass(self):
        violations = []

        for py_file in SRC_ROOT.rglob("*.py"):
            source = py_file.read_text()
            for node in ast.walk(ast.parse(source)):
                if not isinstance(node, ast.ExceptHandler) or len(node.body) != 1:
                    continue
                stmt = node.body[0]
                is_ellipsis = (
                    isinstance(stmt, ast.Expr)
                    and isinstance(stmt.value, ast.Constant)
                    and stmt.value.value is ...
                )
                if isinstance(stmt, ast.Pass) or is_ellipsis:
                    rel_path = py_file.relative_to(SRC_ROOT.parent)
                    violations.append(f"{rel_path}:{node.lineno}")

        assert not violations, f"Silent exception swallowing found: {violations}"


class TestInterfaceConventions:
    """Ports and the adapters that implement them."""

    def test_all_ports_end_with_interface(self):
        abstract_classes = [
            name
            for name, obj in inspect.getmembers(interfaces, inspect.isclass)
            if inspect.isabstract(obj) and obj.__module__ == interfaces.__name__
        ]

        assert abstract_classes
        assert all(name.endswith("Interface") for name in abstract_classes)

    def test_all_interface_methods_are_abstract(self):
        violations = []

        for name, cls in inspect.getmembers(interfaces, inspect.isclass):
            if not inspect.isabstract(cls) or cls.__module__ != interfaces.__name__:
                continue
            for method_name, method in inspect.getmembers(
                cls, predicate=inspect.isfunction
            ):
                if method_name.startswith("_"):
                    continue
                if not getattr(method, "__isabstractmethod__", False):
                    violations.append(f"{name}.{method_name}")

        assert not violations, f"Public port methods must be abstract: {violations}"

    @pytest.mark.parametrize(
        ("port", "adapter"),
        [
            (interfaces.NodeTransportInterface, HttpNodeTransport),
            (interfaces.NodeTransportInterface, SimulatedNodeTransport),
            (interfaces.WorkflowSourceInterface, FilesystemWorkflowSource),
            (interfaces.WorkflowSourceInterface, InMemoryWorkflowSource),
            (interfaces.NotifierInterface, LoggingNotifier),
            (interfaces.NotifierInterface, InMemoryNotifier),
        ],
    )
    def test_adapters_implement_ports(self, port, adapter):
        assert issubclass(adapter, port)
        assert not inspect.isabstract(adapter)
