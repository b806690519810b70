import json
from pathlib import Path
from typing import Any

import yaml


def load_document(file_path: str | Path) -> Any:
    """Load a DSL, content or AST document from a JSON or YAML file."""
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        return json.loads(path.read_text(encoding="utf-8"))
    elif suffix in (".yaml", ".yml"):
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")


def save_document(text: str, output_path: str | Path) -> Path:
    """Save serialized output to file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
