"""Payload models for the external quote APIs."""

from pydantic import BaseModel, Field


class QuotableQuote(BaseModel):
    """Single quote from quotable.io."""

    id: str = Field(alias="_id")
    content: str
    author: str
    tags: list[str] | None = None
    length: int | None = None


class QuotablePage(BaseModel):
    """Page of quotes from quotable.io /quotes."""

    results: list[QuotableQuote] = Field(default_factory=list)


class DummyJsonQuote(BaseModel):
    """Single quote from dummyjson.com."""

    id: int
    quote: str
    author: str


class DummyJsonPage(BaseModel):
    """Page of quotes from dummyjson.com /quotes."""

    quotes: list[DummyJsonQuote] = Field(default_factory=list)
