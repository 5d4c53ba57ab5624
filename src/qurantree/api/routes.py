"""API route definitions."""

from __future__ import annotations

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from qurantree import __version__
from qurantree.api.models import (
    ChapterModel,
    ChapterSummaryModel,
    ComparedTextModel,
    ComparisonModel,
    InfoModel,
    MatchModel,
    SearchResponseModel,
    StatsModel,
    TokenModel,
    TranslationChapterModel,
    TranslationChapterSummaryModel,
    TranslationInfoModel,
    TranslationMatchModel,
    TranslationSearchResponseModel,
    TranslationsListResponse,
    TranslationVerseModel,
    TranslationVerseTextModel,
    VerseModel,
)
from qurantree.config import FEATURES, SOURCE_INFO, Settings
from qurantree.corpus.document import ChapterSummary
from qurantree.corpus.models import Location, Token, Verse
from qurantree.engine.search import MatchMode, ResultPage, SearchOptions
from qurantree.library import Library
from qurantree.translations.models import Translation
from qurantree.validation import (
    InvalidArgument,
    check_match_mode,
    check_query,
    check_translation_key,
    first_invalid,
)

router = APIRouter()


def get_library(request: Request) -> Library:
    return request.app.state.library


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _bad_request(invalid: InvalidArgument) -> HTTPException:
    return HTTPException(status_code=400, detail=invalid.to_dict())


def _not_found(message: str, available: list[str] | None = None) -> HTTPException:
    detail: dict = {"error": message}
    if available is not None:
        detail["available"] = available
    return HTTPException(status_code=404, detail=detail)


def _page_limit(limit: Optional[int], settings: Settings) -> int:
    if limit is None:
        return settings.default_limit
    return min(limit, settings.max_limit)


def _terms(q: Optional[List[str]]) -> list[str]:
    return [term for term in (q or []) if term.strip()]


def _require_translation(library: Library, key: str) -> Translation:
    translation = library.translations.get(key)
    if translation is None:
        raise _not_found(
            f"Translation not found: {key}",
            sorted(library.translations.list_keys()),
        )
    return translation


def token_model(token: Token) -> TokenModel:
    return TokenModel(text=token.text, number=token.number, location=str(token.location))


def verse_model(verse: Verse, include_tokens: bool = False) -> VerseModel:
    return VerseModel(
        chapter=verse.chapter_number,
        verse=verse.number,
        location=str(verse.location),
        text=verse.text,
        bismillah=verse.bismillah,
        token_count=verse.token_count,
        tokens=[token_model(t) for t in verse.tokens()] if include_tokens else None,
    )


def summary_model(summary: ChapterSummary | None) -> ChapterSummaryModel | None:
    if summary is None:
        return None
    return ChapterSummaryModel(
        number=summary.number, name=summary.name, verse_count=summary.verse_count
    )


def translation_info_model(translation: Translation) -> TranslationInfoModel:
    return TranslationInfoModel(
        key=translation.key,
        name=translation.name,
        translator=translation.translator,
        language=translation.language,
        language_name=translation.language_name,
        source=translation.source,
        chapter_count=translation.chapter_count,
        verse_count=translation.verse_count,
    )


def api_documentation() -> dict:
    """Self-description served at / and /api."""
    return {
        "name": "qurantree",
        "version": __version__,
        "description": "Quran text, translations and search over HTTP",
        "docs": "/docs",
        "endpoints": {
            "GET /api/info": "Service and corpus information",
            "GET /api/stats": "Corpus statistics",
            "GET /api/chapters": "List chapters",
            "GET /api/chapters/{n}": "Chapter with verses",
            "GET /api/verses/{chapter}/{verse}": "Verse with tokens",
            "GET /api/search": "Search the Arabic text",
            "GET /api/search/translation": "Search a translation",
            "GET /api/translations": "List loaded translations",
            "GET /api/translations/{key}": "Translation information",
            "GET /api/translations/{key}/chapters": "Translated chapter list",
            "GET /api/translations/{key}/chapters/{n}": "Translated chapter",
            "GET /api/translations/{key}/verses/{chapter}/{verse}": "Translated verse",
            "GET /api/compare/{chapter}/{verse}": "Arabic verse with all translations",
        },
        "search_parameters": {
            "q": "Query term; repeat for a batch search (required)",
            "type": "substring (default) or exact",
            "normalize": "Fold Arabic letter variants and strip diacritics",
            "case_sensitive": "Match case (ignored with normalize)",
            "limit": "Page size (default 50)",
            "offset": "Page start (default 0)",
            "translation": "Translation key (translation search only)",
            "include_arabic": "Attach the Arabic verse (translation search only)",
        },
        "examples": [
            "/api/search?q=الله",
            "/api/search?q=الرحمن&normalize=true",
            "/api/search?q=رب&type=exact",
            "/api/search/translation?translation=en.hilali&q=mercy",
            "/api/compare/1/1",
        ],
    }


@router.get("")
def documentation():
    """API documentation."""
    return api_documentation()


@router.get("/info", response_model=InfoModel)
def info(library: Library = Depends(get_library)):
    """Service and corpus information."""
    document = library.document
    return InfoModel(
        name=document.name,
        version=__version__,
        chapter_count=document.chapter_count,
        verse_count=document.verse_count,
        token_count=document.token_count,
        source=SOURCE_INFO,
        features=FEATURES,
        translations=sorted(library.translations.list_keys()),
    )


@router.get("/stats", response_model=StatsModel)
def stats(library: Library = Depends(get_library)):
    """Corpus statistics."""
    corpus_stats = library.document.stats
    return StatsModel(
        chapter_count=corpus_stats.chapter_count,
        verse_count=corpus_stats.verse_count,
        token_count=corpus_stats.token_count,
        longest_chapter=summary_model(corpus_stats.longest_chapter),
        shortest_chapter=summary_model(corpus_stats.shortest_chapter),
        average_verses_per_chapter=corpus_stats.average_verses_per_chapter,
        average_tokens_per_verse=corpus_stats.average_tokens_per_verse,
    )


@router.get("/chapters", response_model=List[ChapterSummaryModel])
def list_chapters(library: Library = Depends(get_library)):
    """List all chapters."""
    return [
        ChapterSummaryModel(
            number=chapter.number, name=chapter.name, verse_count=chapter.verse_count
        )
        for chapter in library.document.all_chapters()
    ]


@router.get("/chapters/{number}", response_model=ChapterModel)
def get_chapter(number: int, library: Library = Depends(get_library)):
    """Get a chapter with its verses."""
    chapter = library.document.get_chapter(number)
    if chapter is None:
        raise _not_found(f"Chapter not found: {number}")

    return ChapterModel(
        number=chapter.number,
        name=chapter.name,
        verse_count=chapter.verse_count,
        token_count=chapter.token_count,
        bismillah=chapter.bismillah,
        verses=[verse_model(verse) for verse in chapter.verses],
    )


@router.get("/verses/{chapter}/{verse}", response_model=VerseModel)
def get_verse(chapter: int, verse: int, library: Library = Depends(get_library)):
    """Get a verse with its tokens."""
    found = library.document.get_verse(chapter, verse)
    if found is None:
        raise _not_found(f"Verse not found: {Location(chapter, verse)}")
    return verse_model(found, include_tokens=True)


@router.get("/search", response_model=SearchResponseModel)
def search(
    q: Annotated[
        Optional[List[str]], Query(description="Query term; repeat for a batch search")
    ] = None,
    type: Annotated[str, Query(description="substring or exact")] = "substring",
    normalize: bool = False,
    case_sensitive: bool = False,
    limit: Annotated[Optional[int], Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    library: Library = Depends(get_library),
    settings: Settings = Depends(get_settings),
):
    """
    Search the Arabic text.

    Each matching verse appears once, with the tokens that matched.
    """
    invalid = first_invalid(check_query(q), check_match_mode(type))
    if invalid is not None:
        raise _bad_request(invalid)

    terms = _terms(q)
    options = SearchOptions(
        match_mode=MatchMode(type),
        normalize=normalize,
        case_sensitive=case_sensitive,
    )
    records = library.search(terms, options)
    page = ResultPage.from_records(records, _page_limit(limit, settings), offset)

    return SearchResponseModel(
        query=terms,
        type=type,
        normalize=normalize,
        case_sensitive=case_sensitive,
        total=page.total,
        offset=page.offset,
        limit=page.limit,
        has_more=page.has_more,
        results=[
            MatchModel(
                chapter=record.chapter_number,
                chapter_name=record.chapter_name,
                verse=record.verse_number,
                location=str(record.location),
                text=record.text,
                matching_tokens=[token_model(t) for t in record.matching_tokens],
            )
            for record in page.results
        ],
    )


@router.get("/search/translation", response_model=TranslationSearchResponseModel)
def search_translation(
    translation: Annotated[Optional[str], Query(description="Translation key")] = None,
    q: Annotated[Optional[List[str]], Query(description="Query term")] = None,
    type: str = "substring",
    normalize: bool = False,
    case_sensitive: bool = False,
    include_arabic: bool = True,
    limit: Annotated[Optional[int], Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    library: Library = Depends(get_library),
    settings: Settings = Depends(get_settings),
):
    """Search the text of one translation."""
    invalid = first_invalid(
        check_translation_key(translation, library.translations.list_keys()),
        check_query(q),
        check_match_mode(type),
    )
    if invalid is not None:
        raise _bad_request(invalid)

    terms = _terms(q)
    options = SearchOptions(
        match_mode=MatchMode(type),
        normalize=normalize,
        case_sensitive=case_sensitive,
        target=translation,
        include_primary=include_arabic,
    )
    records = library.search(terms, options)
    page = ResultPage.from_records(records, _page_limit(limit, settings), offset)

    return TranslationSearchResponseModel(
        translation=translation,
        query=terms,
        type=type,
        normalize=normalize,
        case_sensitive=case_sensitive,
        total=page.total,
        offset=page.offset,
        limit=page.limit,
        has_more=page.has_more,
        results=[
            TranslationMatchModel(
                chapter=record.chapter_number,
                chapter_name=record.chapter_name,
                verse=record.verse_number,
                location=str(record.location),
                text=record.text,
                arabic=record.primary_text,
            )
            for record in page.results
        ],
    )


@router.get("/translations", response_model=TranslationsListResponse)
def list_translations(library: Library = Depends(get_library)):
    """List loaded translations."""
    translations = [translation_info_model(t) for t in library.translations]
    return TranslationsListResponse(translations=translations, count=len(translations))


@router.get("/translations/{key}", response_model=TranslationInfoModel)
def get_translation(key: str, library: Library = Depends(get_library)):
    """Get translation metadata."""
    return translation_info_model(_require_translation(library, key))


@router.get(
    "/translations/{key}/chapters",
    response_model=List[TranslationChapterSummaryModel],
)
def list_translation_chapters(key: str, library: Library = Depends(get_library)):
    """List the chapters of a translation."""
    translation = _require_translation(library, key)
    return [
        TranslationChapterSummaryModel(
            number=chapter.number,
            name=chapter.name,
            name_arabic=chapter.name_arabic,
            name_translation=chapter.name_translation,
            verse_count=chapter.verse_count,
        )
        for chapter in translation.chapters
    ]


@router.get(
    "/translations/{key}/chapters/{number}", response_model=TranslationChapterModel
)
def get_translation_chapter(
    key: str, number: int, library: Library = Depends(get_library)
):
    """Get a translated chapter."""
    translation = _require_translation(library, key)
    chapter = translation.get_chapter(number)
    if chapter is None:
        raise _not_found(f"Chapter not found in {key}: {number}")

    return TranslationChapterModel(
        translation=key,
        number=chapter.number,
        name=chapter.name,
        name_arabic=chapter.name_arabic,
        name_translation=chapter.name_translation,
        verse_count=chapter.verse_count,
        verses=[
            TranslationVerseTextModel(number=verse.number, text=verse.text)
            for verse in chapter.verses
        ],
    )


@router.get(
    "/translations/{key}/verses/{chapter}/{verse}",
    response_model=TranslationVerseModel,
)
def get_translation_verse(
    key: str, chapter: int, verse: int, library: Library = Depends(get_library)
):
    """Get a translated verse."""
    _require_translation(library, key)
    found = library.get_translation_verse(key, chapter, verse)
    if found is None:
        raise _not_found(f"Verse not found in {key}: {Location(chapter, verse)}")

    return TranslationVerseModel(
        translation=key,
        chapter=chapter,
        verse=verse,
        location=str(Location(chapter, verse)),
        text=found.text,
    )


@router.get("/compare/{chapter}/{verse}", response_model=ComparisonModel)
def compare(chapter: int, verse: int, library: Library = Depends(get_library)):
    """Get the Arabic verse alongside every translation of it."""
    comparison = library.compare(chapter, verse)
    if comparison is None:
        raise _not_found(f"Verse not found: {Location(chapter, verse)}")

    return ComparisonModel(
        chapter=comparison.chapter_number,
        verse=comparison.verse_number,
        location=str(Location(chapter, verse)),
        arabic=comparison.primary,
        translations={
            key: ComparedTextModel(
                text=compared.text,
                translator=compared.translator,
                language=compared.language,
                language_name=compared.language_name,
            )
            for key, compared in comparison.translations.items()
        },
    )
