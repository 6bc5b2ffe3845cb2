from __future__ import annotations

import pytest

from photoshare.database.repos.comment_repo import SqlAlchemyCommentRepo
from photoshare.database.repos.media_repo import SqlAlchemyMediaRepo
from photoshare.database.repos.rating_repo import SqlAlchemyRatingRepo
from photoshare.domain.enums.media_kind import MediaKind
from photoshare.domain.errors import NotAuthorized, NotFound


def test_create_media_item_defaults(db, make_user):
    owner = make_user(db)
    item = SqlAlchemyMediaRepo(db).create_media_item(
        user_id=owner.id,
        title="  Harbour  ",
        image_url="https://cdn.example.com/h.jpg",
        storage_id="photoshare/h",
        people=["Ann", "Bo"],
    )

    assert item.id is not None
    assert item.title == "Harbour"
    assert item.media_type == MediaKind.image
    assert item.average_rating == 0.0
    assert item.people == ["Ann", "Bo"]
    assert item.date_created is not None


def test_delete_cascades_to_comments_and_ratings(db, make_user, make_media):
    owner = make_user(db)
    fan = make_user(db)
    item = make_media(db, owner)
    comment = SqlAlchemyCommentRepo(db).add_comment(media_item_id=item.id, user_id=fan.id, text="nice")
    rating, _ = SqlAlchemyRatingRepo(db).add_rating(media_item_id=item.id, user_id=fan.id, value=5)
    comment_id, rating_id, item_id = comment.id, rating.id, item.id

    SqlAlchemyMediaRepo(db).delete_media_item(item_id, requested_by=owner.id)
    db.commit()

    with pytest.raises(NotFound):
        SqlAlchemyMediaRepo(db).get_or_404(item_id)
    with pytest.raises(NotFound):
        SqlAlchemyCommentRepo(db).get_or_404(comment_id)
    with pytest.raises(NotFound):
        SqlAlchemyRatingRepo(db).get_or_404(rating_id)


def test_only_owner_may_delete(db, make_user, make_media):
    owner = make_user(db)
    stranger = make_user(db)
    item = make_media(db, owner)

    with pytest.raises(NotAuthorized):
        SqlAlchemyMediaRepo(db).delete_media_item(item.id, requested_by=stranger.id)
    assert SqlAlchemyMediaRepo(db).get(item.id) is not None


def test_list_comments_newest_first(db, make_user, make_media):
    owner = make_user(db)
    item = make_media(db, owner)
    repo = SqlAlchemyCommentRepo(db)
    first = repo.add_comment(media_item_id=item.id, user_id=owner.id, text="first")
    second = repo.add_comment(media_item_id=item.id, user_id=owner.id, text="second")
    first.date_created = second.date_created.replace(year=second.date_created.year - 1)
    db.flush()

    listed = SqlAlchemyMediaRepo(db).list_comments(item.id)

    assert [c.id for c in listed] == [second.id, first.id]
