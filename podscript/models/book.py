"""Book generation Pydantic models."""

from typing import List, Optional

from pydantic import BaseModel


class Chapter(BaseModel):
    title: Optional[str] = None
    date: Optional[str] = None
    content: Optional[str] = None


class GenerateBookRequest(BaseModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    author: Optional[str] = None
    chapters: Optional[List[Chapter]] = None
    format: Optional[str] = None


class GenerateBookResponse(BaseModel):
    content: str
    format: str
