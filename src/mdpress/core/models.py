"""Data models shared by the front matter, conversion, and export steps"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


MetadataValue = Union[str, list[str]]


class ListKind(str, Enum):
    """Kind of an open list; the value is the HTML tag it renders as."""
    bulleted = "ul"
    numbered = "ol"


@dataclass
class ListFrame:
    """One open list on the nesting stack."""
    kind:      ListKind
    level:     int
    counter:   int = 0              # last item number seen (numbered lists)
    explicit:  bool = False         # render items with value="" once numbering skips
    item_line: Optional[int] = None  # output index of the open <li>, None when closed


class ConvertResult(BaseModel):
    """Output of one conversion: HTML body plus the front matter mapping."""
    html: str
    metadata: dict[str, MetadataValue] = Field(default_factory=dict)


class PostMetadata(BaseModel):
    """Front matter keys the publishing side understands; unknown keys pass through."""
    title:            Optional[str] = None
    categories:       list[str] = []
    tags:             list[str] = []
    hashtag:          Optional[str] = None
    meta_description: Optional[str] = None
    language:         Optional[str] = None
    slug:             Optional[str] = None
    status:           Optional[Literal["draft", "publish", "private"]] = None
    date:             Optional[str] = None

    model_config = ConfigDict(extra="allow")

    @field_validator("categories", "tags", mode="before")
    @classmethod
    def _as_list(cls, value):
        if isinstance(value, str):
            return [value] if value else []
        return value


class Post(BaseModel):
    """Payload handed to the content-publishing collaborator."""
    title:    str
    content:  str
    status:   Literal["draft", "publish", "private"]
    slug:     str
    metadata: PostMetadata
    featured_media: Optional[int] = None


@dataclass
class ParsedDoc:
    """A source file read from disk with its front matter split off."""
    path:         Path
    slug:         str
    raw_markdown: str          # full file content (includes front matter)
    markdown:     str          # body only
    hash:         str
    metadata:     dict[str, MetadataValue] = field(default_factory=dict)
