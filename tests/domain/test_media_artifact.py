import uuid

import pytest

from photoshare.domain.entities.media_artifact import Comment, Rating, mean_rating

MID = uuid.uuid4()
UID = uuid.uuid4()


def test_comment_text_trimmed():
    assert Comment(media_item_id=MID, user_id=UID, text="  ok \n").text == "ok"


@pytest.mark.parametrize("text", ["", "   ", "x" * 501])
def test_comment_text_bounds(text):
    with pytest.raises(ValueError):
        Comment(media_item_id=MID, user_id=UID, text=text)


def test_comment_at_max_length():
    assert len(Comment(media_item_id=MID, user_id=UID, text="x" * 500).text) == 500


def test_comment_requires_ids():
    with pytest.raises(ValueError):
        Comment(user_id=UID, text="hi")


@pytest.mark.parametrize("value", [1, 3, 5])
def test_rating_accepts_one_to_five(value):
    assert Rating(media_item_id=MID, user_id=UID, value=value).value == value


@pytest.mark.parametrize("value", [0, 6, -1, 2.5, "4", False])
def test_rating_rejects_everything_else(value):
    with pytest.raises(ValueError):
        Rating(media_item_id=MID, user_id=UID, value=value)


def test_mean_rating():
    assert mean_rating([]) == 0.0
    assert mean_rating([4]) == 4.0
    assert mean_rating([5, 2, 4]) == pytest.approx(11 / 3)
