"""JVMChaos document loader.

A path is either a single YAML file or a directory of ``*.yaml`` / ``*.yml``
files. Every document is classified by its ``kind`` field; only JVMChaos
documents are validated, the rest are returned as skipped.
"""

from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple

import yaml


# Kinds that are treated as JVM chaos experiment definitions
CHAOS_KINDS = {"JVMChaos"}


def load_chaos_documents(chaos_path: str) -> Dict[str, Any]:
    """Load JVMChaos documents from a directory or single YAML file.

    Args:
        chaos_path: Path to a directory or single YAML file.

    Returns:
        Dictionary with keys:
            - path: Absolute path to the containing directory
            - experiments: List of {file, spec} for JVMChaos documents
            - skipped: List of {file, spec} for documents of other kinds

    Raises:
        FileNotFoundError: If the path does not exist.
        ValueError: If no JVMChaos document is found or YAML is invalid.
    """
    path = Path(chaos_path)

    if not path.exists():
        raise FileNotFoundError(f"Path not found: {chaos_path}")

    if path.is_file():
        files = [path]
        base_dir = path.parent.resolve()
    elif path.is_dir():
        files = sorted(path.glob("*.yaml")) + sorted(path.glob("*.yml"))
        if not files:
            raise ValueError(f"No YAML files found in {path}")
        base_dir = path.resolve()
    else:
        raise ValueError(f"Invalid path: {chaos_path}")

    experiments: List[Dict] = []
    skipped: List[Dict] = []
    for filepath, doc in _iter_documents(files):
        entry = {"file": str(filepath.resolve()), "spec": doc}
        if isinstance(doc, dict) and doc.get("kind") in CHAOS_KINDS:
            experiments.append(entry)
        else:
            skipped.append(entry)

    if not experiments:
        raise ValueError(
            f"No JVMChaos found in {chaos_path}. "
            "Expected at least one document with kind: JVMChaos."
        )

    return {
        "path": str(base_dir),
        "experiments": experiments,
        "skipped": skipped,
    }


def _iter_documents(files: List[Path]) -> Iterator[Tuple[Path, Any]]:
    """Yield every non-empty YAML document with the file it came from."""
    for filepath in files:
        try:
            docs = list(yaml.safe_load_all(filepath.read_text()))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {filepath}: {e}") from e
        for doc in docs:
            if doc is not None:
                yield filepath, doc


def document_name(document: Any) -> str:
    """Return ``namespace/name`` for a document, or just the name.

    Malformed metadata falls back to ``<unnamed>`` so callers can name a
    document before it has passed the schema check.
    """
    metadata = document.get("metadata") if isinstance(document, dict) else None
    if not isinstance(metadata, dict):
        metadata = {}
    name = metadata.get("name")
    if not isinstance(name, str) or not name:
        name = "<unnamed>"
    namespace = metadata.get("namespace")
    if isinstance(namespace, str) and namespace:
        return f"{namespace}/{name}"
    return name
