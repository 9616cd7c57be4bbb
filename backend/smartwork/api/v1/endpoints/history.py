from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from smartwork.api.v1.schemas.history import (
    ClassifyRequest,
    Comment,
    CommentCreate,
    CommentDeleted,
    CommentUpdate,
    CommentUpdated,
    DuplicateCheckRequest,
    DuplicateCheckResponse,
    NoteCreate,
    NoteCreatedResponse,
    NoteUpdate,
    SuccessResponse,
)
from smartwork.core.errors import ValidationError
from smartwork.core.models.note import Note, NoteStatus
from smartwork.core.schemas.auth import AuthUser  # noqa: TCH001
from smartwork.core.schemas.note_filters import NoteFilters
from smartwork.core.services.classifier import ClassificationResult, classify
from smartwork.core.services.duplicate_guard import DuplicateGuard  # noqa: TCH001
from smartwork.core.services.note_service import NoteService  # noqa: TCH001
from smartwork.core.services.settings_service import SettingsService  # noqa: TCH001
from smartwork.dependencies import (
    get_current_user,
    get_duplicate_guard,
    get_note_service,
    get_settings_service,
    resolve_user_id,
)

router = APIRouter()


@router.get("", response_model=list[Note])
async def list_history(
    user_id: str | None = Query(default=None, alias="userId"),
    status_filter: str | None = Query(default=None, alias="status"),
    menu_id: str | None = Query(default=None, alias="menuId"),
    label: str | None = None,
    sub_menu_id: str | None = Query(default=None, alias="subMenuId"),
    limit: int | None = Query(default=None, ge=1, le=1000),
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    owner = resolve_user_id(current_user, user_id)
    note_status = None
    if status_filter and status_filter != "all":
        try:
            note_status = NoteStatus(status_filter)
        except ValueError:
            raise ValidationError(f"Unknown status: {status_filter}") from None
    filters = NoteFilters(
        status=note_status,
        category=menu_id or None,
        label=label or None,
        sub_tag=sub_menu_id or None,
        limit=limit,
    )
    return list(await service.list_notes(owner, filters))


@router.post("", response_model=NoteCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_history_item(
    payload: NoteCreate,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    owner = resolve_user_id(current_user, payload.user_id)
    note = await service.create_note(payload, user_id=owner)
    return NoteCreatedResponse.model_validate(note.model_dump())


@router.post("/check-duplicate", response_model=DuplicateCheckResponse)
async def check_duplicate(
    payload: DuplicateCheckRequest,
    current_user: AuthUser = Depends(get_current_user),
    guard: DuplicateGuard = Depends(get_duplicate_guard),
):
    """Report recent notes that nearly duplicate the submitted text.

    Purely informational: the client decides whether to save anyway.
    """
    duplicates = await guard.check(user_id=current_user.id, content=payload.content)
    return DuplicateCheckResponse(is_duplicate=bool(duplicates), duplicates=duplicates)


@router.post("/classify", response_model=ClassificationResult)
async def preview_classification(
    payload: ClassifyRequest,
    current_user: AuthUser = Depends(get_current_user),
    settings_service: SettingsService = Depends(get_settings_service),
):
    """Labels and subTag the note would receive if saved now."""
    snapshot = await settings_service.get_settings(current_user.id)
    return classify(
        payload.content,
        payload.category,
        snapshot.category_keywords,
        existing_labels=payload.labels,
        summary=payload.summary,
    )


@router.get("/{note_id}", response_model=Note)
async def get_history_item(
    note_id: str,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    return await service.get_note(note_id, user_id=current_user.id)


@router.put("/{note_id}", response_model=SuccessResponse)
async def update_history_item(
    note_id: str,
    payload: NoteUpdate,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    await service.update_note(note_id, payload, user_id=current_user.id)
    return SuccessResponse(message="Item updated")


@router.delete("/{note_id}", response_model=SuccessResponse)
async def delete_history_item(
    note_id: str,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    await service.delete_note(note_id, user_id=current_user.id)
    return SuccessResponse(message="Item deleted")


@router.post("/{note_id}/comments", response_model=Comment)
async def add_comment(
    note_id: str,
    payload: CommentCreate,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    owner = resolve_user_id(current_user, payload.user_id)
    return await service.add_comment(note_id, owner, payload.content)


@router.put("/{note_id}/comments", response_model=CommentUpdated)
async def update_comment(
    note_id: str,
    payload: CommentUpdate,
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    comment = await service.update_comment(note_id, current_user.id, payload.comment_id, payload.content)
    return CommentUpdated(comment_id=comment.id, content=comment.content)


@router.delete("/{note_id}/comments", response_model=CommentDeleted)
async def delete_comment(
    note_id: str,
    comment_id: str | None = Query(default=None, alias="commentId"),
    current_user: AuthUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
):
    if not comment_id:
        raise ValidationError("commentId is required")
    await service.delete_comment(note_id, current_user.id, comment_id)
    return CommentDeleted(comment_id=comment_id)
