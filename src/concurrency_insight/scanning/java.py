"""Java structural extraction on top of tree-sitter.

Walks the concrete syntax tree directly: imports, every class and
interface declaration (nested and local ones flattened into the unit's
class list, in source order), and each declaration's own fields and
methods with their modifiers and declared types.
"""

from __future__ import annotations

from typing import Iterator, Optional

import tree_sitter_java
from tree_sitter import Language, Node, Parser

from ..exceptions import ParsingError
from ..logging_config import get_logger
from .models import ClassDescriptor, FieldDescriptor, MethodDescriptor, SourceUnit

logger = get_logger(__name__)

JAVA_LANGUAGE = Language(tree_sitter_java.language())

_CLASS_NODES = {"class_declaration": False, "interface_declaration": True}
_FIELD_NODES = ("field_declaration", "constant_declaration")
_NAME_NODES = ("scoped_identifier", "identifier")


def _text(node: Optional[Node]) -> str:
    if node is None or node.text is None:
        return ""
    return " ".join(node.text.decode("utf-8", errors="replace").split())


def _line(node: Node) -> int:
    return node.start_point[0] + 1


def _simple_name(type_text: str) -> str:
    """``java.util.AbstractMap<K, V>`` -> ``AbstractMap``."""
    return type_text.split("<", 1)[0].strip().rsplit(".", 1)[-1]


def _modifiers(node: Node) -> set[str]:
    for child in node.children:
        if child.type == "modifiers":
            return {m.type for m in child.children if not m.is_named}
    return set()


def _walk(node: Node) -> Iterator[Node]:
    """Pre-order traversal without recursion."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def _first_error_line(root: Node) -> int:
    for node in _walk(root):
        if node.type == "ERROR" or node.is_missing:
            return _line(node)
    return 0


class JavaSourceExtractor:
    """Extract ``SourceUnit`` models from Java source text.

    A tree-sitter parser is not safe to share between threads; give each
    thread its own extractor.
    """

    language = "java"

    def __init__(self) -> None:
        self._parser = Parser(JAVA_LANGUAGE)

    def extract(self, content: str, path: str) -> SourceUnit:
        """Model one file; syntax errors yield a failed unit instead of raising."""
        try:
            return self.parse(content, path)
        except ParsingError as e:
            logger.debug(f"Parse error in {path}: {e.reason}")
            return SourceUnit.failed(path, e.reason, content=content, language=self.language)

    def parse(self, content: str, path: str) -> SourceUnit:
        """Strict variant of ``extract``.

        Raises:
            ParsingError: If the source contains syntax errors
        """
        tree = self._parser.parse(content.encode("utf-8", errors="replace"))
        root = tree.root_node

        if root.has_error:
            line = _first_error_line(root)
            reason = f"syntax error near line {line}" if line else "syntax error"
            raise ParsingError(path, self.language, reason)

        imports = [imp for imp in (self._import_name(n) for n in root.children) if imp]
        classes = []
        for node in _walk(root):
            if node.type in _CLASS_NODES:
                classes.append(self._class_descriptor(node, _CLASS_NODES[node.type]))

        logger.debug(f"Extracted {len(classes)} class(es) and {len(imports)} import(s) from {path}")
        return SourceUnit(
            path=path,
            content=content,
            imports=frozenset(imports),
            classes=tuple(classes),
            language=self.language,
        )

    # ── Declarations ───────────────────────────────────────────

    @staticmethod
    def _import_name(node: Node) -> str:
        # "import static a.b.C.*;" -> "a.b.C"
        if node.type != "import_declaration":
            return ""
        for child in node.named_children:
            if child.type in _NAME_NODES:
                return _text(child)
        return ""

    def _class_descriptor(self, node: Node, is_interface: bool) -> ClassDescriptor:
        parents: set[str] = set()
        interfaces: set[str] = set()

        if is_interface:
            for child in node.children:
                if child.type == "extends_interfaces":
                    parents.update(self._type_list_names(child))
        else:
            superclass = node.child_by_field_name("superclass")
            if superclass is not None:
                parents.update(_simple_name(_text(t)) for t in superclass.named_children)
            implemented = node.child_by_field_name("interfaces")
            if implemented is not None:
                interfaces.update(self._type_list_names(implemented))

        fields: list[FieldDescriptor] = []
        methods: list[MethodDescriptor] = []
        body = node.child_by_field_name("body")
        for member in body.named_children if body is not None else ():
            if member.type in _FIELD_NODES:
                fields.extend(self._field_descriptors(member))
            elif member.type == "method_declaration":
                methods.append(self._method_descriptor(member))

        return ClassDescriptor(
            name=_text(node.child_by_field_name("name")),
            fields=tuple(fields),
            methods=tuple(methods),
            parent_classes=frozenset(parents),
            interfaces=frozenset(interfaces),
            is_interface=is_interface,
            line=_line(node),
        )

    @staticmethod
    def _type_list_names(node: Node) -> list[str]:
        names = []
        for child in node.named_children:
            if child.type == "type_list":
                names.extend(_simple_name(_text(t)) for t in child.named_children)
        return names

    @staticmethod
    def _field_descriptors(node: Node) -> list[FieldDescriptor]:
        mods = _modifiers(node)
        declared_type = _text(node.child_by_field_name("type"))
        return [
            FieldDescriptor(
                name=_text(declarator.child_by_field_name("name")),
                declared_type=declared_type,
                is_final="final" in mods,
                is_volatile="volatile" in mods,
                is_static="static" in mods,
                line=_line(node),
            )
            for declarator in node.children_by_field_name("declarator")
        ]

    @staticmethod
    def _method_descriptor(node: Node) -> MethodDescriptor:
        mods = _modifiers(node)
        parameter_types = []
        parameters = node.child_by_field_name("parameters")
        for param in parameters.named_children if parameters is not None else ():
            if param.type == "formal_parameter":
                parameter_types.append(_text(param.child_by_field_name("type")))
            elif param.type == "spread_parameter":
                declared = next(
                    (
                        c
                        for c in param.named_children
                        if c.type not in ("modifiers", "variable_declarator")
                    ),
                    None,
                )
                parameter_types.append(f"{_text(declared)}...")

        return MethodDescriptor(
            name=_text(node.child_by_field_name("name")),
            return_type=_text(node.child_by_field_name("type")) or "void",
            is_synchronized="synchronized" in mods,
            is_static="static" in mods,
            parameter_types=tuple(parameter_types),
            line=_line(node),
        )
