"""Tests for media attached to posts."""

from tests.utils import API


def _attach(client, headers, post_id, items):
    return client.post(f"{API}/media/post/{post_id}/multiple", headers=headers, json=items)


def test_attach_list_get(client, make_user, make_post):
    _, alice = make_user("a@x.com")
    post = make_post(alice)
    response = _attach(client, alice, post["id"], [
        {"url": "http://cdn/a.png", "media_kind": "image"},
        {"url": "http://cdn/b.mp3", "media_kind": "audio"},
    ])
    assert response.status_code == 201
    created = response.json()
    assert [m["media_kind"] for m in created] == ["image", "audio"]

    listed = client.get(f"{API}/media/post/{post['id']}").json()
    assert [m["id"] for m in listed] == [m["id"] for m in created]
    assert client.get(f"{API}/media/{created[0]['id']}").json()["url"] == "http://cdn/a.png"
    assert client.get(f"{API}/media/999").status_code == 404


def test_only_post_owner_modifies_media(client, make_user, make_post):
    _, alice = make_user("a@x.com")
    _, bob = make_user("b@x.com")
    post = make_post(alice)

    assert _attach(client, bob, post["id"], [{"url": "u", "media_kind": "image"}]).status_code == 403
    media = _attach(client, alice, post["id"], [{"url": "u", "media_kind": "image"}]).json()[0]

    assert client.patch(f"{API}/media/{media['id']}", headers=bob, json={"url": "evil"}).status_code == 403
    assert client.delete(f"{API}/media/{media['id']}", headers=bob).status_code == 403

    response = client.patch(f"{API}/media/{media['id']}", headers=alice, json={"media_kind": "video"})
    assert response.status_code == 200
    assert response.json()["media_kind"] == "video"
    assert response.json()["url"] == "u"

    assert client.delete(f"{API}/media/{media['id']}", headers=alice).status_code == 200
    assert client.get(f"{API}/media/{media['id']}").status_code == 404


def test_delete_all_media_of_post(client, make_user, make_post):
    _, alice = make_user("a@x.com")
    post = make_post(alice)
    _attach(client, alice, post["id"], [{"url": "1", "media_kind": "image"}, {"url": "2", "media_kind": "video"}])

    assert client.delete(f"{API}/media/post/{post['id']}", headers=alice).status_code == 200
    assert client.get(f"{API}/media/post/{post['id']}").json() == []


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "X-Request-ID" in response.headers


def test_attach_single_item(client, make_user, make_post):
    _, alice = make_user("a@x.com")
    _, bob = make_user("b@x.com")
    post = make_post(alice)

    response = client.post(f"{API}/media/post/{post['id']}", headers=alice,
                           json={"url": "http://cdn/c.mp4", "media_kind": "video"})
    assert response.status_code == 201
    body = response.json()
    assert body["post_id"] == post["id"]
    assert body["media_kind"] == "video"

    response = client.post(f"{API}/media/post/{post['id']}", headers=bob,
                           json={"url": "x", "media_kind": "image"})
    assert response.status_code == 403
    assert [m["id"] for m in client.get(f"{API}/media/post/{post['id']}").json()] == [body["id"]]
