"""Parser registry: detect the document type and dispatch to the right parser."""

from __future__ import annotations

from commit_network.ir.model import NetworkGraph
from commit_network.parsers.json_network import JsonNetworkParser


def detect_type(src: str) -> str:
    """Detect the document type from source text. Returns 'json' or 'unknown'."""
    stripped = src.lstrip()
    if stripped.startswith("{"):
        return "json"
    return "unknown"


_PARSERS = {
    "json": JsonNetworkParser,
}


def parse(src: str) -> NetworkGraph:
    """Auto-detect the document type and parse to a NetworkGraph."""
    if not src.strip():
        raise ValueError("empty input")
    doc_type = detect_type(src)
    parser_cls = _PARSERS.get(doc_type)
    if parser_cls is None:
        raise ValueError(f"Unsupported document type: {doc_type}")
    return parser_cls().parse(src)
