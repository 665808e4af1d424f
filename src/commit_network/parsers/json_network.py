"""Parser for the JSON network document served by the REST backend."""

from __future__ import annotations

import json

from commit_network.ir.model import NetworkGraph


class JsonNetworkParser:
    """Parses ``{"branches": [...], "commits": [...], "defaultBranch": "..."}``."""

    def parse(self, src: str) -> NetworkGraph:
        try:
            data = json.loads(src)
        except json.JSONDecodeError as e:
            raise ValueError(f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e
        return NetworkGraph.from_dict(data)
