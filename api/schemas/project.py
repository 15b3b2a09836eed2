"""
Project export API schemas

Pydantic models mirroring the persistence layer's project JSON.
Short names (name, number, title, intro, content) are accepted as aliases.
"""

from pydantic import AliasChoices, BaseModel, Field
from typing import Optional, List
from datetime import datetime

from manuscript.models import Project


class OwnerSchema(BaseModel):
    firstname: str = ""
    lastname: str = ""
    email: str = ""


class NotionSchema(BaseModel):
    notion_name: str = Field("", validation_alias=AliasChoices("notion_name", "name"))
    notion_number: int = Field(..., validation_alias=AliasChoices("notion_number", "number"))
    notion_content: str = Field("", validation_alias=AliasChoices("notion_content", "content"))


class ParagraphSchema(BaseModel):
    para_name: str = Field("", validation_alias=AliasChoices("para_name", "name"))
    para_number: int = Field(..., validation_alias=AliasChoices("para_number", "number"))
    notions: List[NotionSchema] = Field(default_factory=list)


class ChapterSchema(BaseModel):
    chapter_number: int = Field(..., validation_alias=AliasChoices("chapter_number", "number"))
    chapter_title: str = Field("", validation_alias=AliasChoices("chapter_title", "title"))
    paragraphs: List[ParagraphSchema] = Field(default_factory=list)


class PartSchema(BaseModel):
    part_number: int = Field(..., validation_alias=AliasChoices("part_number", "number"))
    part_title: str = Field("", validation_alias=AliasChoices("part_title", "title"))
    part_intro: Optional[str] = Field(None, validation_alias=AliasChoices("part_intro", "intro"))
    chapters: List[ChapterSchema] = Field(default_factory=list)


class ProjectExportRequest(BaseModel):
    pr_name: str = Field(..., min_length=1, max_length=300,
                         validation_alias=AliasChoices("pr_name", "name"))
    description: Optional[str] = None
    owner: OwnerSchema = Field(default_factory=OwnerSchema)
    created_at: Optional[datetime] = None
    parts: List[PartSchema] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "pr_name": "Mon roman",
                "owner": {"firstname": "Ada", "lastname": "Martin", "email": "ada@example.com"},
                "created_at": "2024-03-05T10:00:00Z",
                "parts": [{
                    "part_number": 1,
                    "part_title": "Origines",
                    "part_intro": "Où tout commence.",
                    "chapters": [{
                        "chapter_number": 1,
                        "chapter_title": "Le départ",
                        "paragraphs": [{
                            "para_name": "Ouverture",
                            "para_number": 1,
                            "notions": [{
                                "notion_name": "Scène",
                                "notion_number": 1,
                                "notion_content": "Il **partit** à l'aube.",
                            }],
                        }],
                    }],
                }],
            }
        }

    def to_project(self) -> Project:
        """Domain tree for the export pipeline."""
        return Project.from_dict(self.model_dump(exclude_none=True))
