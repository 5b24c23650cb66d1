import pytest
from pydantic import ValidationError

from ranking_service.models import RankRequest, RelatedVideosRequest, UserPreferences, VideoRecord


def test_video_record_accepts_front_end_payload():
    video = VideoRecord.model_validate({
        "id": 7,
        "userId": 3,
        "categoryId": 2,
        "title": "Cooking pasta",
        "thumbnailUrl": "/thumbs/7.jpg",
        "views": 1200,
        "likes": 30,
        "duration": 245,
        "createdAt": "2026-02-20T08:30:00.000Z",
        "user": {"id": 3, "username": "chef"},
    })
    assert video.category_id == 2
    assert video.user_id == 3
    assert video.created_at == "2026-02-20T08:30:00.000Z"
    # unknown fields ride along
    assert video.model_dump(by_alias=True)["user"] == {"id": 3, "username": "chef"}


def test_video_record_serializes_camel_case():
    dumped = VideoRecord(id="abc", category_id=1, created_at="2026-01-01").model_dump(by_alias=True)
    assert dumped["categoryId"] == 1
    assert dumped["createdAt"] == "2026-01-01"


def test_video_record_requires_id():
    with pytest.raises(ValidationError):
        VideoRecord.model_validate({"views": 10})


def test_user_preferences_ignores_unknown_fields():
    prefs = UserPreferences.model_validate({"preferredDevice": "mobile", "language": "en"})
    assert prefs.preferred_device == "mobile"
    assert not hasattr(prefs, "language")


def test_user_preferences_drops_non_string_device():
    assert UserPreferences.model_validate({"preferredDevice": 12}).preferred_device is None


@pytest.mark.parametrize("preferences", ["mobile", 5, ["mobile"]])
def test_rank_request_treats_malformed_preferences_as_absent(preferences):
    request = RankRequest.model_validate({"candidates": [{"id": 1}], "preferences": preferences})
    assert request.preferences is None


def test_rank_request_defaults():
    request = RankRequest()
    assert request.candidates == []
    assert request.history == []
    assert request.preferences is None


def test_rank_request_rejects_non_positive_top_k():
    with pytest.raises(ValidationError):
        RankRequest(top_k=0)


def test_related_request_defaults_to_short_list():
    request = RelatedVideosRequest(current_video_id=4)
    assert request.top_k == 6
