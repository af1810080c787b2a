"""Regenerate the embedded component template snapshot.

Reads every file the registry declares from a checkout of the component
sources and writes src/chadcn/data/component-templates.json.
Run from repo root: python scripts/generate_templates.py ../chadcn/packages/ui/src/components
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
OUTPUT = REPO_ROOT / "src" / "chadcn" / "data" / "component-templates.json"

sys.path.insert(0, str(REPO_ROOT / "src"))

from chadcn.core.registry import build_registry  # noqa: E402


def collect(components_dir: Path) -> tuple[dict[str, dict[str, str]], list[str]]:
    """Snapshot mapping plus the declared files that were not found."""
    templates: dict[str, dict[str, str]] = {}
    missing: list[str] = []

    for component in build_registry().all():
        files: dict[str, str] = {}
        for path in component.files:
            source = components_dir / path
            if source.is_file():
                files[path] = source.read_text(encoding="utf-8")
            else:
                missing.append(path)
        templates[component.name] = files

    return templates, missing


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate the embedded template snapshot")
    parser.add_argument("components_dir", type=Path, help="Directory holding component sources")
    parser.add_argument("--output", type=Path, default=OUTPUT, help="JSON file to write")
    args = parser.parse_args()

    if not args.components_dir.is_dir():
        print(f"ERROR: not a directory: {args.components_dir}", file=sys.stderr)
        return 1

    templates, missing = collect(args.components_dir)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(json.dumps(templates, indent=2) + "\n", encoding="utf-8")

    count = sum(len(files) for files in templates.values())
    print(f"Wrote {count} file(s) for {len(templates)} component(s) to {args.output}")
    if missing:
        print(f"Missing {len(missing)} file(s) (served remotely or as placeholders):")
        for path in missing:
            print(f"  {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
