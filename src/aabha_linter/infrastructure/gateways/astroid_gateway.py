import logging
from pathlib import Path
from typing import Optional, Union

import astroid  # type: ignore[import-untyped]

from aabha_linter.domain.constants import EXPRESSION_PLACEHOLDER, MARKER_NAMES
from aabha_linter.domain.entities import DeclarationMarker, MetadataValue
from aabha_linter.domain.protocols import MarkerExtractorProtocol

logger = logging.getLogger(__name__)

# Returned by literal conversion for anything that is not a supported literal.
_OMITTED = object()


class AstroidGateway(MarkerExtractorProtocol):
    """
    Reads Aabha markers off astroid declarations.

    Purely syntactic: names and attribute access are captured as source text,
    never inferred. Nothing raises out of get_markers.
    """

    def parse_file(self, file_path: str) -> Optional[astroid.nodes.Module]:
        """Parse a file and return the astroid Module node."""
        try:
            file_path_obj = Path(file_path)
            if not file_path_obj.exists():
                return None
            with open(file_path_obj, encoding="utf-8") as f:
                source = f.read()
            return astroid.parse(source, path=str(file_path_obj))
        except (OSError, UnicodeDecodeError, astroid.AstroidSyntaxError):
            logger.debug("Could not parse %s", file_path, exc_info=True)
            return None

    def iter_declarations(self, module: astroid.nodes.Module) -> list[astroid.nodes.ClassDef]:
        """All class declarations of a module, nested ones included, in source order."""
        return list(module.nodes_of_class(astroid.nodes.ClassDef))

    def get_markers(self, node: astroid.nodes.NodeNG) -> list[DeclarationMarker]:
        """Recognized markers on a declaration, in decorator order."""
        decorators = getattr(node, "decorators", None)
        if decorators is None:
            return []
        markers: list[DeclarationMarker] = []
        for decorator in decorators.nodes:
            marker_name = self.get_marker_name(decorator)
            if marker_name is None:
                continue
            markers.append(self._build_marker(marker_name, decorator))
        return markers

    def get_marker_name(self, decorator: astroid.nodes.NodeNG) -> Optional[str]:
        """Marker name of a decorator expression, or None when it is not a marker."""
        target = decorator.func if isinstance(decorator, astroid.nodes.Call) else decorator
        if isinstance(target, astroid.nodes.Name):
            name = target.name
        elif isinstance(target, astroid.nodes.Attribute):
            name = target.attrname
        else:
            return None
        return name if name in MARKER_NAMES else None

    def _build_marker(
        self, marker_name: str, decorator: astroid.nodes.NodeNG
    ) -> DeclarationMarker:
        location = self.location_of(decorator)
        try:
            metadata = self._read_arguments(decorator)
        except Exception:  # pylint: disable=broad-exception-caught
            # JUSTIFICATION: a malformed tree must never break the lint run.
            logger.debug("Degrading %s marker at %s", marker_name, location, exc_info=True)
            metadata = None
        if metadata is None:
            return DeclarationMarker(marker_name, decorator, location, {}, parseable=False)
        return DeclarationMarker(marker_name, decorator, location, metadata)

    def _read_arguments(
        self, decorator: astroid.nodes.NodeNG
    ) -> Optional[dict[str, MetadataValue]]:
        """Metadata for a marker invocation, or None when it is not a readable literal."""
        if not isinstance(decorator, astroid.nodes.Call):
            return None
        args = decorator.args or []
        keywords = decorator.keywords or []

        if len(args) == 1 and not keywords:
            if not isinstance(args[0], astroid.nodes.Dict):
                return None
            return self._convert_dict(args[0])

        if not args and keywords:
            if any(kw.arg is None for kw in keywords):
                return None
            metadata: dict[str, MetadataValue] = {}
            for kw in keywords:
                value = self.literal_value(kw.value)
                if value is not _OMITTED:
                    metadata[kw.arg] = value
            return metadata

        return None

    def literal_value(self, node: astroid.nodes.NodeNG) -> Union[MetadataValue, object]:
        """Convert a literal expression to a metadata value; _OMITTED when unsupported."""
        if isinstance(node, astroid.nodes.Const):
            if node.value is None or isinstance(node.value, (str, bool, int, float)):
                return node.value
            return _OMITTED
        if isinstance(node, astroid.nodes.UnaryOp):
            return self._signed_number(node)
        if isinstance(node, (astroid.nodes.List, astroid.nodes.Tuple, astroid.nodes.Set)):
            items: list[MetadataValue] = []
            for elt in node.elts:
                value = self.literal_value(elt)
                if value is not _OMITTED:
                    items.append(value)
            return items
        if isinstance(node, astroid.nodes.Dict):
            return self._convert_dict(node)
        if isinstance(node, (astroid.nodes.Name, astroid.nodes.Attribute)):
            return node.as_string()
        if isinstance(node, astroid.nodes.JoinedStr):
            return self._render_fstring(node)
        return _OMITTED

    def _signed_number(self, node: astroid.nodes.UnaryOp) -> Union[int, float, object]:
        operand = node.operand
        if node.op not in ("-", "+") or not isinstance(operand, astroid.nodes.Const):
            return _OMITTED
        value = operand.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return _OMITTED
        return -value if node.op == "-" else value

    def _convert_dict(self, node: astroid.nodes.Dict) -> dict[str, MetadataValue]:
        result: dict[str, MetadataValue] = {}
        for key_node, value_node in node.items:
            if isinstance(key_node, astroid.nodes.DictUnpack):
                continue
            key = self._dict_key(key_node)
            if key is None:
                continue
            value = self.literal_value(value_node)
            if value is _OMITTED:
                continue
            result[key] = value
        return result

    @staticmethod
    def _dict_key(node: astroid.nodes.NodeNG) -> Optional[str]:
        if isinstance(node, astroid.nodes.Const) and isinstance(node.value, str):
            return node.value
        if isinstance(node, (astroid.nodes.Name, astroid.nodes.Attribute)):
            return node.as_string()
        return None

    @staticmethod
    def _render_fstring(node: astroid.nodes.JoinedStr) -> str:
        parts: list[str] = []
        for value in node.values:
            if isinstance(value, astroid.nodes.Const) and isinstance(value.value, str):
                parts.append(value.value)
            else:
                parts.append(EXPRESSION_PLACEHOLDER)
        return "".join(parts)

    @staticmethod
    def location_of(node: astroid.nodes.NodeNG) -> str:
        """path:line:col of a node."""
        root = node.root()
        path = getattr(root, "file", None) or getattr(root, "name", "") or ""
        return f"{path}:{getattr(node, 'lineno', 0)}:{getattr(node, 'col_offset', 0)}"
