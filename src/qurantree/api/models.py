"""Pydantic models for API."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class TokenModel(BaseModel):
    """A whitespace-delimited word of a verse."""

    text: str = Field(..., description="Token text as stored")
    number: int = Field(..., description="1-based position in the verse")
    location: str = Field(..., description="chapter:verse:token")


class VerseModel(BaseModel):
    """A primary-text verse."""

    chapter: int
    verse: int
    location: str = Field(..., description="chapter:verse")
    text: str = Field(..., description="Uthmani verse text")
    bismillah: Optional[str] = Field(
        None, description="Leading formula when the verse carries one"
    )
    token_count: int
    tokens: Optional[List[TokenModel]] = Field(
        None, description="Tokens in order (verse lookups only)"
    )


class ChapterSummaryModel(BaseModel):
    """Chapter identity and size."""

    number: int
    name: str
    verse_count: int


class ChapterModel(BaseModel):
    """A chapter with its verses."""

    number: int
    name: str
    verse_count: int
    token_count: int
    bismillah: Optional[str] = None
    verses: List[VerseModel]


class StatsModel(BaseModel):
    """Aggregate corpus statistics."""

    chapter_count: int
    verse_count: int
    token_count: int
    longest_chapter: Optional[ChapterSummaryModel] = None
    shortest_chapter: Optional[ChapterSummaryModel] = None
    average_verses_per_chapter: int
    average_tokens_per_verse: int


class InfoModel(BaseModel):
    """Service and corpus information."""

    name: str
    version: str
    chapter_count: int
    verse_count: int
    token_count: int
    source: Dict[str, str] = Field(..., description="Text source and licence")
    features: List[str]
    translations: List[str] = Field(..., description="Loaded translation keys")


class MatchModel(BaseModel):
    """A primary-text search hit."""

    chapter: int
    chapter_name: str
    verse: int
    location: str
    text: str
    matching_tokens: List[TokenModel] = Field(
        ..., description="Tokens satisfying the match predicate"
    )


class SearchResponseModel(BaseModel):
    """Response for a primary-text search."""

    query: List[str] = Field(..., description="Query terms as received")
    type: str = Field(..., description="Match mode: substring or exact")
    normalize: bool
    case_sensitive: bool
    total: int = Field(..., description="Total matches before paging")
    offset: int
    limit: int
    has_more: bool
    results: List[MatchModel]


class TranslationMatchModel(BaseModel):
    """A translation search hit."""

    chapter: int
    chapter_name: str
    verse: int
    location: str
    text: str = Field(..., description="Translated verse text")
    arabic: Optional[str] = Field(
        None, description="Primary verse text (when include_arabic is set)"
    )


class TranslationSearchResponseModel(BaseModel):
    """Response for a search over one translation."""

    translation: str
    query: List[str]
    type: str
    normalize: bool
    case_sensitive: bool
    total: int
    offset: int
    limit: int
    has_more: bool
    results: List[TranslationMatchModel]


class TranslationInfoModel(BaseModel):
    """Metadata for a loaded translation."""

    key: str
    name: str
    translator: str
    language: str
    language_name: str
    source: str
    chapter_count: int
    verse_count: int


class TranslationsListResponse(BaseModel):
    """All loaded translations."""

    translations: List[TranslationInfoModel]
    count: int


class TranslationChapterSummaryModel(BaseModel):
    """Translated chapter identity and size."""

    number: int
    name: str
    name_arabic: str
    name_translation: str
    verse_count: int


class TranslationVerseTextModel(BaseModel):
    """Verse number and translated text."""

    number: int
    text: str


class TranslationChapterModel(BaseModel):
    """A translated chapter with its verses."""

    translation: str
    number: int
    name: str
    name_arabic: str
    name_translation: str
    verse_count: int
    verses: List[TranslationVerseTextModel]


class TranslationVerseModel(BaseModel):
    """A single translated verse."""

    translation: str
    chapter: int
    verse: int
    location: str
    text: str


class ComparedTextModel(BaseModel):
    """One translation's rendering of a compared verse."""

    text: str
    translator: str
    language: str
    language_name: str


class ComparisonModel(BaseModel):
    """Primary verse alongside every translation that has it."""

    chapter: int
    verse: int
    location: str
    arabic: str
    translations: Dict[str, ComparedTextModel] = Field(
        ..., description="Keyed by translation key; missing verses omitted"
    )
