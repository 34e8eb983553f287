#!/usr/bin/env python3
"""Regenerate the compiled-in catalog snapshot from the live source.

Usage:
    python -m ai_model_catalog.scripts.sync_snapshot [--url URL] [--output PATH] [--dry-run]
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from ..config_paths import get_catalog_url
from ..data_manager import DEFAULT_FETCH_TIMEOUT, CatalogDataManager
from ..errors import ModelCatalogError
from ..logging import get_logger
from ..schema import CatalogModelDefinition, ModelCatalog

logger = get_logger(__name__)

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / "snapshot.py"

_HEADER = '''"""Compiled-in model catalog snapshot.

This is the last fallback tier used when neither the network source nor the
disk cache can provide a catalog. The table uses the same raw document shape
as the live source so it goes through the same ingestion path.

Regenerate with ``python -m ai_model_catalog.scripts.sync_snapshot``.
"""

from typing import Any, Dict

'''


def _render_model(model: CatalogModelDefinition, indent: str) -> List[str]:
    lines = [f"{indent}{_quote(model.id)}: {{", f"{indent}    \"name\": {_quote(model.name)},"]
    if model.status:
        lines.append(f"{indent}    \"status\": {_quote(model.status)},")
    if model.release_date:
        lines.append(f"{indent}    \"release_date\": {_quote(model.release_date)},")
    if model.last_updated:
        lines.append(f"{indent}    \"last_updated\": {_quote(model.last_updated)},")
    lines.append(f"{indent}    \"reasoning\": {model.reasoning},")
    lines.append(f"{indent}    \"tool_call\": {model.tool_call},")
    lines.append(f"{indent}}},")
    return lines


def _quote(value: str) -> str:
    # An ASCII JSON string literal is also a valid single-line Python literal
    return json.dumps(value, ensure_ascii=True)


def render_snapshot_module(catalog: ModelCatalog) -> str:
    """Render a catalog as the source of ``snapshot.py``.

    Providers keep catalog order and models are sorted by id, so regenerating
    from unchanged data produces an identical file.
    """
    lines = ["SNAPSHOT_CATALOG_DATA: Dict[str, Dict[str, Any]] = {"]
    for provider_id, provider in catalog.providers.items():
        lines.append(f"    {_quote(provider_id)}: {{")
        lines.append('        "models": {')
        for model_id in sorted(provider.models):
            lines.extend(_render_model(provider.models[model_id], " " * 12))
        lines.append("        },")
        lines.append("    },")
    lines.append("}")
    return _HEADER + "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(description="Regenerate the compiled-in model catalog snapshot")
    parser.add_argument("--url", help="Catalog source URL (defaults to the configured catalog URL)")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="Snapshot module to write")
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_FETCH_TIMEOUT, help="Request timeout in seconds"
    )
    parser.add_argument("--dry-run", action="store_true", help="Print the module instead of writing it")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = create_parser().parse_args(argv)

    if args.verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG)

    url = args.url or get_catalog_url()
    try:
        catalog = CatalogDataManager().fetch_remote_catalog(url, timeout=args.timeout)
    except ModelCatalogError as e:
        logger.error(f"Failed to fetch catalog from {url}: {e}")
        return 1

    source = render_snapshot_module(catalog)
    if args.dry_run:
        sys.stdout.write(source)
        return 0

    args.output.write_text(source, encoding="utf-8")
    counts = ", ".join(f"{pid}={len(p.models)}" for pid, p in catalog.providers.items())
    print(f"✓ Wrote {args.output} ({counts})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
