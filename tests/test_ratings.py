"""
Tests for rating posts and the averaged rating kept on each post.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from blogapp import crud, schemas
from blogapp.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from blogapp.core.security import CallerIdentity
from blogapp.models.rating import Rating
from tests.utils import API


def _rate(client, headers, post_id, value, comment=None):
    payload = {"value": value}
    if comment is not None:
        payload["comment"] = comment
    return client.post(f"{API}/ratings/{post_id}", headers=headers, json=payload)


def _average(client, post_id):
    response = client.get(f"{API}/ratings/{post_id}/average")
    assert response.status_code == 200
    return response.json()["average_rating"]


def test_rating_walkthrough(client, make_user):
    _, alice = make_user("a@x.com", password="pwpwpw")
    _, bob = make_user("b@x.com")
    post = client.post(f"{API}/blogs/", headers=alice,
                       json={"title": "Title", "brief": "Brief", "content": "Body"}).json()

    assert _rate(client, alice, post["id"], 5).status_code == 201
    assert _average(client, post["id"]) == 5

    assert _rate(client, bob, post["id"], 3).status_code == 201
    assert _average(client, post["id"]) == 4.0

    assert _rate(client, alice, post["id"], 1).status_code == 409
    assert client.delete(f"{API}/blogs/{post['id']}", headers=bob).status_code == 403
    assert client.delete(f"{API}/blogs/{post['id']}", headers=alice).status_code == 200
    assert client.get(f"{API}/blogs/{post['id']}").status_code == 404


def test_rating_payload(client, make_user, make_post):
    _, alice = make_user("a@x.com")
    post = make_post(alice)
    response = _rate(client, alice, post["id"], 4, comment="solid")
    assert response.status_code == 201
    body = response.json()
    assert body["value"] == 4
    assert body["comment"] == "solid"
    assert body["author_email"] == "a@x.com"
    assert body["post_id"] == post["id"]


@pytest.mark.parametrize("value", [0, 6, -1, 4.5, "5"])
def test_out_of_range_or_non_integer_rejected(client, make_user, make_post, value):
    _, alice = make_user("a@x.com")
    post = make_post(alice)
    assert _rate(client, alice, post["id"], value).status_code == 422
    assert client.get(f"{API}/ratings/{post['id']}").json() == []


def test_rating_requires_auth_and_existing_post(client, make_user):
    _, alice = make_user("a@x.com")
    assert client.post(f"{API}/ratings/1", json={"value": 3}).status_code == 401
    assert _rate(client, alice, 1, 3).status_code == 404
    assert client.get(f"{API}/ratings/1").status_code == 404
    assert client.get(f"{API}/ratings/1/average").status_code == 404


def test_duplicate_rating_leaves_state_untouched(client, make_user, make_post):
    _, alice = make_user("a@x.com")
    post = make_post(alice)
    _rate(client, alice, post["id"], 2)
    assert _rate(client, alice, post["id"], 5).status_code == 409

    ratings = client.get(f"{API}/ratings/{post['id']}").json()
    assert [r["value"] for r in ratings] == [2]
    assert client.get(f"{API}/blogs/{post['id']}").json()["average_rating"] == 2


def test_average_matches_rows_and_stored_value(client, make_user, make_post):
    _, owner = make_user("owner@x.com")
    post = make_post(owner)
    values = [5, 4, 4, 1, 2, 5]
    for i, value in enumerate(values):
        _, headers = make_user(f"rater{i}@x.com")
        assert _rate(client, headers, post["id"], value).status_code == 201

    expected = round(sum(values) / len(values), 2)
    assert _average(client, post["id"]) == expected
    assert client.get(f"{API}/blogs/{post['id']}").json()["average_rating"] == expected


def test_average_is_rounded_to_two_places(client, make_user, make_post):
    _, owner = make_user("owner@x.com")
    post = make_post(owner)
    for i, value in enumerate([5, 4, 4]):
        _, headers = make_user(f"rater{i}@x.com")
        _rate(client, headers, post["id"], value)
    assert _average(client, post["id"]) == 4.33


def test_unrated_post_average_is_zero(client, make_user, make_post):
    _, owner = make_user("owner@x.com")
    post = make_post(owner)
    assert _average(client, post["id"]) == 0
    assert client.get(f"{API}/ratings/{post['id']}").json() == []


def test_reads_are_idempotent(client, make_user, make_post):
    _, owner = make_user("owner@x.com")
    post = make_post(owner)
    _rate(client, owner, post["id"], 3)

    assert client.get(f"{API}/ratings/{post['id']}").json() == client.get(f"{API}/ratings/{post['id']}").json()
    assert _average(client, post["id"]) == _average(client, post["id"])


def _seed(db_session):
    user = crud.create_user(db_session, schemas.UserCreate(email="a@x.com", name="A", password="secret123"))
    post = crud.create_blog_post(db_session, schemas.BlogPostCreate(title="T", brief="B", content="C"), user.id)
    return user, post


def test_unique_constraint_enforced_by_database(db_session):
    user, post = _seed(db_session)
    db_session.add(Rating(value=3, post_id=post.id, user_id=user.id, author_email=user.email))
    db_session.commit()

    db_session.add(Rating(value=4, post_id=post.id, user_id=user.id, author_email=user.email))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_create_rating_crud_errors(db_session):
    user, post = _seed(db_session)
    caller = CallerIdentity(user_id=user.id, email=user.email)

    crud.create_rating(db_session, caller, post.id, schemas.RatingCreate(value=5))
    with pytest.raises(ConflictError):
        crud.create_rating(db_session, caller, post.id, schemas.RatingCreate(value=1))
    with pytest.raises(NotFoundError):
        crud.create_rating(db_session, caller, post.id + 1, schemas.RatingCreate(value=1))
    with pytest.raises(UnauthorizedError):
        crud.create_rating(db_session, CallerIdentity(user_id=999, email="ghost@x.com"),
                           post.id, schemas.RatingCreate(value=1))

    assert crud.get_average_rating(db_session, post.id) == crud.compute_average(db_session, post.id) == 5.0
    assert len(crud.get_ratings_by_post(db_session, post.id)) == 1


def test_non_duplicate_integrity_error_is_not_a_conflict(db_session, monkeypatch):
    """A foreign key failure on insert propagates instead of being reported as a second rating."""
    from types import SimpleNamespace
    from blogapp.crud import crud_rating

    _, post = _seed(db_session)
    # the rater vanishes between the identity check and the insert
    monkeypatch.setattr(crud_rating, "get_user", lambda db, user_id: SimpleNamespace(id=user_id))
    ghost = CallerIdentity(user_id=999, email="ghost@x.com")

    with pytest.raises(IntegrityError):
        crud.create_rating(db_session, ghost, post.id, schemas.RatingCreate(value=3))
    assert crud.get_ratings_by_post(db_session, post.id) == []
    assert crud.get_blog_post(db_session, post.id).average_rating == 0
