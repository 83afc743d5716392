"""
Read-only video catalog for the Video Catalog service.
Loaded once from a JSON file at startup and shared by every request.
"""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, TypeAdapter

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """The catalog source could not be read or did not parse."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to load catalog from {source}: {reason}")
        self.source = source
        self.reason = reason


class Segment(BaseModel):
    """One playback chapter within a video."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    part: int = Field(0, alias="part", validation_alias=AliasChoices("part", "parte"))
    start_seconds: int = Field(
        0, alias="startSeconds", validation_alias=AliasChoices("startSeconds", "inicio_seg"),
    )
    duration_seconds: int = Field(
        0, alias="durationSeconds", validation_alias=AliasChoices("durationSeconds", "duracion_seg"),
    )


class VideoRecord(BaseModel):
    """One catalog entry. Frozen: segments are stored as a tuple."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str = Field(alias="title", validation_alias=AliasChoices("title", "titulo"))
    total_duration_seconds: int = Field(
        0,
        alias="totalDurationSeconds",
        validation_alias=AliasChoices("totalDurationSeconds", "duracion_total_seg"),
    )
    segments: tuple[Segment, ...] = Field(
        (), alias="segments", validation_alias=AliasChoices("segments", "partes"),
    )
    thumbnail_url: str = Field(
        "", alias="thumbnailURL", validation_alias=AliasChoices("thumbnailURL", "thumbnail"),
    )

    def to_dict(self) -> dict:
        """Serialize with the public wire field names."""
        return self.model_dump(by_alias=True)


_RECORDS_ADAPTER = TypeAdapter(list[VideoRecord])


class Catalog:
    """Immutable ordered sequence of VideoRecord.

    Built once at startup; exposes no mutators.
    """

    __slots__ = ("_records",)

    def __init__(self, records: tuple[VideoRecord, ...] = ()):
        self._records = tuple(records)

    @classmethod
    def from_records(cls, records: Iterable[VideoRecord | dict]) -> "Catalog":
        """Build a catalog from records or raw dicts (validated)."""
        items = [
            r if isinstance(r, VideoRecord) else VideoRecord.model_validate(r)
            for r in records
        ]
        return cls(tuple(items))

    @classmethod
    def from_file(cls, path: Path | str) -> "Catalog":
        """Load and validate a JSON array of video records.

        Raises CatalogLoadError if the file is unreadable or malformed.
        """
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogLoadError(str(path), str(e)) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(str(path), f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise CatalogLoadError(str(path), "expected a JSON array of videos")

        try:
            records = _RECORDS_ADAPTER.validate_python(data)
        except ValidationError as e:
            raise CatalogLoadError(str(path), f"invalid video record: {e}") from e

        catalog = cls(tuple(records))
        dupes = catalog.duplicate_ids()
        if dupes:
            logger.warning(
                "Catalog %s has %d duplicate ids (first match wins): %s",
                path, len(dupes), ", ".join(sorted(dupes)[:10]),
            )
        logger.info("Loaded catalog from %s: %d videos", path, len(catalog))
        return catalog

    def duplicate_ids(self) -> set[str]:
        """Ids that appear more than once (case-insensitive)."""
        counts = Counter(r.id.casefold() for r in self._records)
        return {vid for vid, n in counts.items() if n > 1}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VideoRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> VideoRecord:
        return self._records[index]

    def __repr__(self) -> str:
        return f"Catalog({len(self._records)} videos)"


def load_catalog(path: Path | str) -> Catalog:
    """Load the catalog file; thin alias used by main.py."""
    return Catalog.from_file(path)
