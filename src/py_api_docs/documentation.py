"""Metadata of the unified document: info block and server list."""

from typing import Any, Dict, List, Sequence

import structlog

from .config import BuildSettings
from .models import SpecInput

logger = structlog.get_logger(__name__)


def build_info(inputs: Sequence[SpecInput], title: str, version: str) -> Dict[str, str]:
    """Info block listing the title of every input, one per line."""
    return {
        "title": title,
        "description": "\n".join(f"- {spec.title}" for spec in inputs),
        "version": version,
    }


def merge_servers(inputs: Sequence[SpecInput]) -> List[Dict[str, Any]]:
    """Concatenate the inputs' servers, keeping the first entry per URL."""
    seen_urls = set()
    servers = []
    for spec in inputs:
        for server in spec.servers:
            url = server.get("url")
            if url in seen_urls:
                continue
            seen_urls.add(url)
            servers.append(server)
    return servers


def apply_overrides(
    document: Dict[str, Any],
    inputs: Sequence[SpecInput],
    settings: BuildSettings,
) -> Dict[str, Any]:
    document["info"] = build_info(inputs, settings.title, settings.version)

    servers = merge_servers(inputs)
    total = sum(len(spec.servers) for spec in inputs)
    document["servers"] = servers
    logger.info(
        "servers_deduplicated",
        total=total,
        unique=len(servers),
        urls=[s.get("url") for s in servers],
    )
    return document
