"""
Data models for the export pipeline.
All models use dataclasses for simplicity.

The Project tree is supplied fully hydrated by the persistence layer and is
never mutated here. Children are not assumed to be sorted.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class ExportFormat(str, Enum):
    """Supported export formats"""
    PDF = "pdf"
    DOCX = "docx"


@dataclass
class TextSegment:
    """A run of text sharing one style combination"""
    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False

    @classmethod
    def plain(cls, text: str) -> 'TextSegment':
        return cls(text=text)

    @property
    def has_style(self) -> bool:
        return self.bold or self.italic or self.underline or self.strikethrough


@dataclass
class Owner:
    """Project owner (author shown on the cover)"""
    firstname: str = ""
    lastname: str = ""
    email: str = ""

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.firstname, self.lastname) if p)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Owner':
        return cls(
            firstname=data.get('firstname') or "",
            lastname=data.get('lastname') or "",
            email=data.get('email') or "",
        )


@dataclass
class Notion:
    """Smallest content unit; its content is lightweight or rich markup"""
    name: str
    number: int
    content: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Notion':
        return cls(
            name=_pick(data, 'notion_name', 'name', default=""),
            number=int(_pick(data, 'notion_number', 'number', default=0)),
            content=_pick(data, 'notion_content', 'content', default="") or "",
        )


@dataclass
class Paragraph:
    """Group of notions rendered as one visual paragraph (no visible title)"""
    name: str
    number: int
    notions: List[Notion] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Paragraph':
        return cls(
            name=_pick(data, 'para_name', 'name', default=""),
            number=int(_pick(data, 'para_number', 'number', default=0)),
            notions=[Notion.from_dict(n) for n in data.get('notions') or []],
        )


@dataclass
class Chapter:
    """A chapter inside a part"""
    number: int
    title: str
    paragraphs: List[Paragraph] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Chapter':
        return cls(
            number=int(_pick(data, 'chapter_number', 'number', default=0)),
            title=_pick(data, 'chapter_title', 'title', default=""),
            paragraphs=[Paragraph.from_dict(p) for p in data.get('paragraphs') or []],
        )


@dataclass
class Part:
    """A top-level part of the project"""
    number: int
    title: str
    chapters: List[Chapter] = field(default_factory=list)
    intro: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Part':
        return cls(
            number=int(_pick(data, 'part_number', 'number', default=0)),
            title=_pick(data, 'part_title', 'title', default=""),
            intro=_pick(data, 'part_intro', 'intro', default=None) or None,
            chapters=[Chapter.from_dict(c) for c in data.get('chapters') or []],
        )


@dataclass
class Project:
    """
    Export root.
    This is the contract between the persistence layer and the renderers.
    """
    name: str
    owner: Owner = field(default_factory=Owner)
    created_at: datetime = field(default_factory=datetime.now)
    parts: List[Part] = field(default_factory=list)
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Project':
        """Build a Project from the persistence layer's JSON shape."""
        created_at = data.get('created_at')
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at.replace('Z', '+00:00'))
        elif not isinstance(created_at, datetime):
            created_at = datetime.now()

        return cls(
            name=_pick(data, 'pr_name', 'name', default="Untitled"),
            owner=Owner.from_dict(data.get('owner') or {}),
            created_at=created_at,
            parts=[Part.from_dict(p) for p in data.get('parts') or []],
            description=data.get('description'),
        )

    def total_notions(self) -> int:
        return sum(
            len(paragraph.notions)
            for part in self.parts
            for chapter in part.chapters
            for paragraph in chapter.paragraphs
        )


def _pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key (persistence names first, short names second)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default
