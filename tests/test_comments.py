"""Tests for comments, which are authorized by the author's email."""

from blogapp import crud, schemas
from blogapp.core.exceptions import UnauthorizedError
from blogapp.core.security import create_access_token
from blogapp.core.config import settings
from tests.utils import API

import pytest


def _comment(client, headers, post_id, content="Great post", author_name="Reader"):
    return client.post(f"{API}/comments/{post_id}", headers=headers,
                       json={"author_name": author_name, "content": content})


def test_create_and_list(client, make_user, make_post):
    _, alice = make_user("a@x.com")
    _, bob = make_user("b@x.com")
    post = make_post(alice)

    response = _comment(client, bob, post["id"], author_name="Bob")
    assert response.status_code == 201
    body = response.json()
    assert body["author_email"] == "b@x.com"
    assert body["author_name"] == "Bob"
    assert body["post_id"] == post["id"]

    listed = client.get(f"{API}/comments/post/{post['id']}")
    assert listed.status_code == 200
    assert [c["id"] for c in listed.json()] == [body["id"]]


def test_comment_on_missing_post(client, make_user):
    _, headers = make_user("a@x.com")
    assert _comment(client, headers, 404).status_code == 404


def test_comment_requires_known_identity(client, make_user, make_post):
    _, alice = make_user("a@x.com")
    post = make_post(alice)
    # a validly signed token for an email nobody registered
    token = create_access_token(999, "ghost@x.com", settings)
    response = _comment(client, {"Authorization": f"Bearer {token}"}, post["id"])
    assert response.status_code == 401


def test_only_author_can_update_or_delete(client, make_user, make_post):
    _, alice = make_user("a@x.com")
    _, bob = make_user("b@x.com")
    post = make_post(alice)
    comment = _comment(client, bob, post["id"]).json()

    # the post owner is not the comment author
    assert client.patch(f"{API}/comments/{comment['id']}", headers=alice, json={"content": "x"}).status_code == 401
    assert client.delete(f"{API}/comments/{comment['id']}", headers=alice).status_code == 401

    response = client.patch(f"{API}/comments/{comment['id']}", headers=bob, json={"content": "Edited"})
    assert response.status_code == 200
    assert response.json()["content"] == "Edited"

    assert client.delete(f"{API}/comments/{comment['id']}", headers=bob).status_code == 200
    assert client.get(f"{API}/comments/post/{post['id']}").json() == []


def test_update_missing_comment(client, make_user):
    _, headers = make_user("a@x.com")
    assert client.patch(f"{API}/comments/77", headers=headers, json={"content": "x"}).status_code == 404
    assert client.delete(f"{API}/comments/77", headers=headers).status_code == 404


def test_delete_all_for_post_by_author(client, make_user, make_post):
    _, alice = make_user("a@x.com")
    _, bob = make_user("b@x.com")
    post = make_post(alice)
    other_post = make_post(alice, title="Other")
    _comment(client, bob, post["id"], content="one")
    _comment(client, bob, post["id"], content="two")
    kept_on_other = _comment(client, bob, other_post["id"]).json()
    kept_by_alice = _comment(client, alice, post["id"]).json()

    assert client.delete(f"{API}/comments/post/{post['id']}", headers=bob).status_code == 200

    assert [c["id"] for c in client.get(f"{API}/comments/post/{post['id']}").json()] == [kept_by_alice["id"]]
    assert [c["id"] for c in client.get(f"{API}/comments/post/{other_post['id']}").json()] == [kept_on_other["id"]]


def test_bulk_delete_unknown_identity(db_session):
    with pytest.raises(UnauthorizedError):
        crud.delete_comments_by_author(db_session, post_id=1, author_email="ghost@x.com")


def test_create_comment_crud_level(db_session):
    user = crud.create_user(db_session, schemas.UserCreate(email="a@x.com", name="A", password="secret123"))
    post = crud.create_blog_post(db_session, schemas.BlogPostCreate(title="T", brief="B", content="C"), user.id)
    comment = crud.create_comment(db_session, schemas.CommentCreate(author_name="A", content="hi"),
                                  post.id, "a@x.com")
    assert crud.get_comments_by_post(db_session, post.id)[0].id == comment.id
