"""Data models for alignment segments, per-line changes, and comparison results"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class SegmentTag(str, Enum):
    """Alignment tags produced by the line aligner"""
    equal = "equal"
    inserted = "inserted"
    deleted = "deleted"


class ChangeType(str, Enum):
    """Final classification of a line in a comparison"""
    added = "added"
    removed = "removed"
    modified = "modified"
    unchanged = "unchanged"


class FileType(str, Enum):
    """Document formats accepted by ingestion"""
    txt = "txt"
    md = "md"
    docx = "docx"
    pdf = "pdf"


class Segment(BaseModel):
    """A contiguous run of whole lines sharing one alignment tag."""
    model_config = ConfigDict(frozen=True)

    tag: SegmentTag
    lines: tuple[str, ...]


# --- change variants ---
#
# Each variant stores only the fields valid for its kind; the remaining
# original_*/modified_* accessors are derived so every Change can be read
# through the same four attributes.
#
# Serialized output carries the derived fields too; on input they are
# dropped when they hold their derived value and rejected otherwise.

def _drop_derived(data, **derived):
    if not isinstance(data, dict):
        return data
    return {k: v for k, v in data.items() if k not in derived or v != derived[k]}


class Added(BaseModel):
    """A line present only in the modified document."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["added"] = "added"
    modified_line: int = Field(..., ge=1)
    modified_text: str

    @model_validator(mode="before")
    @classmethod
    def _accept_derived(cls, data):
        return _drop_derived(data, original_line=None, original_text="")

    @computed_field
    @property
    def original_line(self) -> Optional[int]:
        return None

    @computed_field
    @property
    def original_text(self) -> str:
        return ""


class Removed(BaseModel):
    """A line present only in the original document."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["removed"] = "removed"
    original_line: int = Field(..., ge=1)
    original_text: str

    @model_validator(mode="before")
    @classmethod
    def _accept_derived(cls, data):
        return _drop_derived(data, modified_line=None, modified_text="")

    @computed_field
    @property
    def modified_line(self) -> Optional[int]:
        return None

    @computed_field
    @property
    def modified_text(self) -> str:
        return ""


class Modified(BaseModel):
    """A removed line paired with the added line that replaced it."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["modified"] = "modified"
    original_line: int = Field(..., ge=1)
    modified_line: int = Field(..., ge=1)
    original_text: str
    modified_text: str


class Unchanged(BaseModel):
    """A line common to both documents."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["unchanged"] = "unchanged"
    original_line: int = Field(..., ge=1)
    modified_line: int = Field(..., ge=1)
    text: str

    @model_validator(mode="before")
    @classmethod
    def _accept_derived(cls, data):
        if not isinstance(data, dict):
            return data
        text = data.get("text")
        return _drop_derived(data, original_text=text, modified_text=text)

    @computed_field
    @property
    def original_text(self) -> str:
        return self.text

    @computed_field
    @property
    def modified_text(self) -> str:
        return self.text


Change = Annotated[Union[Added, Removed, Modified, Unchanged], Field(discriminator="kind")]


class DiffSummary(BaseModel):
    """Aggregate counts; unchanged lines are not part of total_changes."""
    model_config = ConfigDict(frozen=True)

    additions:     int = Field(default=0, ge=0)
    removals:      int = Field(default=0, ge=0)
    modifications: int = Field(default=0, ge=0)

    @computed_field
    @property
    def total_changes(self) -> int:
        return self.additions + self.removals + self.modifications


class DocumentFile(BaseModel):
    """An ingested document: normalized plain text plus upload metadata."""
    model_config = ConfigDict(frozen=True)

    id:          UUID = Field(default_factory=uuid4)
    name:        str
    content:     str
    file_type:   FileType
    size:        int = Field(..., ge=0, description="Size of the uploaded file in bytes")
    line_count:  int = Field(..., ge=0)
    uploaded_at: datetime = Field(default_factory=datetime.now)


class DiffResult(BaseModel):
    """Immutable result of one comparison; a new comparison builds a new result."""
    model_config = ConfigDict(frozen=True)

    changes:    tuple[Change, ...]
    summary:    DiffSummary
    created_at: datetime = Field(default_factory=datetime.now)
    original:   Optional[DocumentFile] = None
    modified:   Optional[DocumentFile] = None


@dataclass
class ParseResult:
    """Plain-text extraction result for a single file; not persisted."""
    content:    str
    line_count: int
