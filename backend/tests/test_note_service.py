"""Service-level tests for note ingestion, updates and comments."""

import pytest

from smartwork.api.v1.schemas.history import NoteCreate, NoteUpdate
from smartwork.core.errors import NotFoundError, ValidationError
from smartwork.core.models.note import NotePriority, NoteStatus


@pytest.fixture
async def dev_keywords(settings_service):
    await settings_service.replace_category_keywords("user-a", {"dev": ["React", "API", "배포"]})


class TestCreateNote:
    async def test_classifies_with_the_users_keywords(self, note_service, dev_keywords):
        note = await note_service.create_note(
            NoteCreate(category="dev", content="에러 발생: React 컴포넌트에서 API 호출 실패"),
            user_id="user-a",
        )

        assert note.status == NoteStatus.PENDING
        assert note.priority == NotePriority.NORMAL
        assert set(note.labels) == {"issue", "React", "API"}
        assert note.sub_tag == "React"
        assert note.category_name == "개발 노트"
        assert note.created_at == note.updated_at

    async def test_other_users_keywords_do_not_apply(self, note_service, dev_keywords):
        note = await note_service.create_note(
            NoteCreate(category="dev", content="React 컴포넌트 정리"),
            user_id="user-b",
        )
        assert note.labels == []
        assert note.sub_tag is None

    async def test_client_labels_are_kept(self, note_service, dev_keywords):
        note = await note_service.create_note(
            NoteCreate(category="dev", content="API 문서 업데이트", labels=["update"]),
            user_id="user-a",
        )
        assert note.labels == ["update", "API"]
        assert note.sub_tag == "API"

    async def test_classification_overrides_client_sub_tag(self, note_service, dev_keywords):
        note = await note_service.create_note(
            NoteCreate(category="dev", content="API 문서 업데이트", subTag="문서"),
            user_id="user-a",
        )
        assert note.sub_tag == "API"

    async def test_manual_sub_tag_must_be_a_configured_keyword(self, note_service, dev_keywords):
        note = await note_service.create_note(
            NoteCreate(category="dev", content="배포 체크리스트", subTag="배포", autoClassify=False),
            user_id="user-a",
        )
        assert note.sub_tag == "배포"

        with pytest.raises(ValidationError, match="subTag"):
            await note_service.create_note(
                NoteCreate(category="dev", content="배포 체크리스트", subTag="문서", autoClassify=False),
                user_id="user-a",
            )

    async def test_auto_classify_can_be_disabled(self, note_service, dev_keywords):
        note = await note_service.create_note(
            NoteCreate(category="dev", content="React 에러", autoClassify=False),
            user_id="user-a",
        )
        assert note.labels == []
        assert note.sub_tag is None

    async def test_summary_widens_label_detection(self, note_service, dev_keywords):
        note = await note_service.create_note(
            NoteCreate(category="dev", content="오늘 작업 정리", summary="배포 준비 완료"),
            user_id="user-a",
        )
        assert note.labels == ["배포"]
        assert note.sub_tag is None

    async def test_blank_content_is_rejected_by_schema(self):
        with pytest.raises(ValueError):
            NoteCreate(category="work", content="   ")


class TestUpdateNote:
    async def test_completing_stamps_completed_at(self, note_service):
        note = await note_service.create_note(NoteCreate(content="write report"), user_id="user-a")

        done = await note_service.update_note(note.id, NoteUpdate(status="completed"), user_id="user-a")
        assert done.status == NoteStatus.COMPLETED
        assert done.completed_at is not None

        reopened = await note_service.update_note(note.id, NoteUpdate(status="in-progress"), user_id="user-a")
        assert reopened.completed_at is None

    async def test_empty_content_update_is_rejected(self, note_service):
        note = await note_service.create_note(NoteCreate(content="write report"), user_id="user-a")
        with pytest.raises(ValidationError):
            await note_service.update_note(note.id, NoteUpdate(content="  "), user_id="user-a")

    async def test_other_users_note_reads_as_missing(self, note_service):
        note = await note_service.create_note(NoteCreate(content="private"), user_id="user-a")
        with pytest.raises(NotFoundError):
            await note_service.update_note(note.id, NoteUpdate(priority="high"), user_id="user-b")

    async def test_delete_then_update_or_delete_is_not_found(self, note_service):
        note = await note_service.create_note(NoteCreate(content="temporary"), user_id="user-a")
        await note_service.delete_note(note.id, user_id="user-a")

        with pytest.raises(NotFoundError):
            await note_service.update_note(note.id, NoteUpdate(priority="high"), user_id="user-a")
        with pytest.raises(NotFoundError):
            await note_service.delete_note(note.id, user_id="user-a")


    @pytest.mark.parametrize("field", ["status", "priority", "labels", "attachmentURLs", "category", "content"])
    async def test_null_for_required_field_is_rejected_before_writing(self, note_service, note_repo, field):
        note = await note_service.create_note(NoteCreate(content="write report"), user_id="user-a")

        with pytest.raises(ValidationError, match="cannot be null"):
            await note_service.update_note(note.id, NoteUpdate.model_validate({field: None}), user_id="user-a")

        stored = await note_repo.get(note.id)
        assert stored == note

    async def test_nullable_fields_can_be_cleared(self, note_service):
        note = await note_service.create_note(
            NoteCreate(content="write report", summary="draft", calendarEventId="evt-1"),
            user_id="user-a",
        )
        cleared = await note_service.update_note(
            note.id, NoteUpdate(summary=None, calendarEventId=None, subTag=None), user_id="user-a"
        )
        assert cleared.summary is None
        assert cleared.calendar_event_id is None
        assert cleared.sub_tag is None

    async def test_sub_tag_update_is_checked_against_keywords(self, note_service, dev_keywords):
        note = await note_service.create_note(NoteCreate(category="dev", content="정리"), user_id="user-a")

        updated = await note_service.update_note(note.id, NoteUpdate(subTag=" React "), user_id="user-a")
        assert updated.sub_tag == "React"

        with pytest.raises(ValidationError):
            await note_service.update_note(note.id, NoteUpdate(subTag="Vue"), user_id="user-a")
        with pytest.raises(ValidationError):
            await note_service.update_note(
                note.id, NoteUpdate(category="work", subTag="React"), user_id="user-a"
            )

class TestComments:
    async def test_add_edit_delete_comment(self, note_service):
        note = await note_service.create_note(NoteCreate(content="needs review"), user_id="user-a")

        comment = await note_service.add_comment(note.id, "user-a", "looks good")
        edited = await note_service.update_comment(note.id, "user-a", comment.id, "looks great")
        assert edited.content == "looks great"
        assert edited.updated_at is not None

        stored = await note_service.get_note(note.id, "user-a")
        assert [c.content for c in stored.comments] == ["looks great"]

        await note_service.delete_comment(note.id, "user-a", comment.id)
        stored = await note_service.get_note(note.id, "user-a")
        assert stored.comments == []

    async def test_unknown_comment_is_not_found(self, note_service):
        note = await note_service.create_note(NoteCreate(content="needs review"), user_id="user-a")
        with pytest.raises(NotFoundError, match="Comment not found"):
            await note_service.update_comment(note.id, "user-a", "missing", "text")
        with pytest.raises(NotFoundError, match="Comment not found"):
            await note_service.delete_comment(note.id, "user-a", "missing")

    async def test_comment_on_missing_note(self, note_service):
        with pytest.raises(NotFoundError, match="History item not found"):
            await note_service.add_comment("nope", "user-a", "hello")
