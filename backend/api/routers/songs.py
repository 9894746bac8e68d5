from dataclasses import dataclass
from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session
from typing import List, Optional
from infra.database.connection import get_session
from api.schemas.song import SongCreate, SongRead, SongUpdate
from app.services.song_app_service import SongAppService
from domain.constants import DEFAULT_PAGE, DEFAULT_PAGE_LIMIT, MAX_PAGE, MIN_PAGE_LIMIT, MAX_PAGE_LIMIT
from domain.services.song_details import PlaceholderDetailsProvider, SongDetailsProvider
from domain.services.song_patch import SongPatch

router = APIRouter()

@dataclass
class Pagination:
    page: int
    limit: int

def pagination_params(
    page: int = Query(DEFAULT_PAGE, le=MAX_PAGE, description="1-based page number"),
    limit: int = Query(DEFAULT_PAGE_LIMIT, description="Items per page"),
) -> Pagination:
    """
    page < 1 becomes 1 and page > MAX_PAGE is rejected (400);
    limit is clamped into [MIN_PAGE_LIMIT, MAX_PAGE_LIMIT].
    """
    return Pagination(
        page=max(page, DEFAULT_PAGE),
        limit=min(max(limit, MIN_PAGE_LIMIT), MAX_PAGE_LIMIT),
    )

def get_details_provider() -> SongDetailsProvider:
    return PlaceholderDetailsProvider()

def get_song_service(
    session: Session = Depends(get_session),
    details_provider: SongDetailsProvider = Depends(get_details_provider),
) -> SongAppService:
    return SongAppService(session, details_provider)

@router.get("/songs", response_model=List[SongRead])
def get_songs(
    group: Optional[str] = None,
    song_name: Optional[str] = None,
    pagination: Pagination = Depends(pagination_params),
    service: SongAppService = Depends(get_song_service)
):
    """
    List songs filtered by exact group / song name. Empty filters match everything.
    """
    songs = service.get_songs(group=group, song_name=song_name, page=pagination.page, limit=pagination.limit)
    return [SongRead.from_model(s) for s in songs]

@router.post("/songs", response_model=SongRead, status_code=status.HTTP_201_CREATED)
def add_song(request: SongCreate, service: SongAppService = Depends(get_song_service)):
    return SongRead.from_model(service.create_song(request.group, request.song))

@router.get("/songs/{song_id}", response_model=SongRead)
def get_song(song_id: int, service: SongAppService = Depends(get_song_service)):
    return SongRead.from_model(service.get_song(song_id))

@router.get("/songs/{song_id}/lyrics", response_model=List[str])
def get_lyrics(
    song_id: int,
    pagination: Pagination = Depends(pagination_params),
    service: SongAppService = Depends(get_song_service)
):
    """Verses of the song's lyrics, paged by blank-line separated verse."""
    return service.get_lyrics(song_id, pagination.page, pagination.limit)

@router.put("/songs/{song_id}", response_model=SongRead)
def update_song(song_id: int, request: SongUpdate, service: SongAppService = Depends(get_song_service)):
    # JSON null is treated like an omitted field
    patch = SongPatch.from_fields(request.model_dump(exclude_unset=True, exclude_none=True))
    return SongRead.from_model(service.update_song(song_id, patch))

@router.delete("/songs/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_song(song_id: int, service: SongAppService = Depends(get_song_service)):
    service.delete_song(song_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
