"""
Result Store
============

Persists generated artifacts and keeps the generation index in sync.

Write order is artifact first, index second. Whatever fails, an artifact
file and its index entry exist together or not at all.
"""

import os
import random
import re
from contextlib import suppress
from pathlib import Path
from typing import Callable, Optional

from .categories import ArtifactRecord, GenerationIndex
from .errors import PersistenceError
from .utils import ensure_dir, read_json, write_json_atomic, write_text


MAX_NAME_LENGTH = 200
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def safe_file_name(name: str) -> str:
    """Single path component made of `[A-Za-z0-9._-]`, at most MAX_NAME_LENGTH long"""
    name = _UNSAFE_CHARS.sub("_", name)[:MAX_NAME_LENGTH]
    if name.strip(".") == "":
        name = "_" + name
    return name


def random_artifact_id(label: str) -> str:
    """`{128-bit random}_{label}`; uniqueness is best-effort, never checked"""
    return safe_file_name(f"{random.getrandbits(128)}_{label}")


class ResultStore:
    """Artifact files in `output_dir` plus one JSON index document"""

    def __init__(
        self,
        output_dir,
        index_path,
        id_factory: Optional[Callable[[str], str]] = None,
        debug: bool = False,
    ):
        self.output_dir = Path(output_dir)
        self.index_path = Path(index_path)
        self.id_factory = id_factory or random_artifact_id
        self.check_collisions = id_factory is not None
        self.debug = debug

    def load_index(self) -> GenerationIndex:
        """Read the index file, or start an empty index if there is none"""
        if not self.index_path.exists():
            return GenerationIndex()
        try:
            data = read_json(self.index_path)
            if not isinstance(data, list):
                raise ValueError("index must be a JSON array")
            return GenerationIndex.from_list(data)
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            raise PersistenceError(f"Cannot load index {self.index_path}: {e}") from e

    def artifact_path(self, artifact_id: str) -> Path:
        return self.output_dir / artifact_id

    def persist(self, label: str, artifact: str, query: str, index: GenerationIndex) -> str:
        """
        Store one generation and record it in the index.

        Args:
            label: Classification label (may be unknown or empty)
            artifact: Generated content, written verbatim
            query: The request that produced it
            index: Index to append to; rewritten in full on disk

        Returns:
            The artifact id

        Raises:
            PersistenceError: If the artifact or the index cannot be written
        """
        # The label is kept as-is in the record; only the file name is sanitised
        artifact_id = safe_file_name(self.id_factory(label))
        path = self.artifact_path(artifact_id)
        if self.check_collisions and path.exists():
            raise PersistenceError(f"Artifact {path} already exists")

        try:
            ensure_dir(self.output_dir)
            write_text(path, artifact)
        except OSError as e:
            raise PersistenceError(f"Cannot write artifact {path}: {e}") from e

        index.append(ArtifactRecord(id=artifact_id, query=query, label=label))
        try:
            write_json_atomic(self.index_path, index.to_list())
        except (OSError, TypeError) as e:
            index.records.pop()
            with suppress(OSError):
                os.remove(path)
            raise PersistenceError(f"Cannot write index {self.index_path}: {e}") from e

        if self.debug:
            print(f"  💾 {path} ({len(artifact)} chars), index now {len(index)} record(s)")
        return artifact_id
