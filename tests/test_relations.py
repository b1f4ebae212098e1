"""Tests for relation fields computed over the store."""

from services import relations


def test_friends_of_is_outward_only(store):
    alice = store.find_user("1")
    bob = store.find_user("2")

    assert [u.id for u in relations.friends_of(store, alice)] == ["2", "3"]
    # Bob does not list Alice even though Alice lists Bob
    assert relations.friends_of(store, bob) == []


def test_friends_of_ignores_dangling_ids(store):
    assert relations.friends_of(store, store.find_user("4")) == []


def test_posts_of_matches_author(store):
    for user in store.users:
        expected = [p.id for p in store.posts if p.author_id == user.id]
        assert [p.id for p in relations.posts_of(store, user)] == expected


def test_author_of(store):
    assert relations.author_of(store, store.find_post("p1")).name == "Bob"
    assert relations.author_of(store, store.find_post("p5")) is None


def test_likers_of(store):
    assert [u.id for u in relations.likers_of(store, store.find_post("p2"))] == ["2"]
    # unknown liker ids are skipped
    assert relations.likers_of(store, store.find_post("p5")) == []


def test_comments_of_matches_post(store):
    for post in store.posts:
        expected = [c.id for c in store.comments if c.post_id == post.id]
        assert [c.id for c in relations.comments_of(store, post)] == expected


def test_comment_author_uses_author_id(store):
    comment = store.comments[1]  # c2, written by Carol

    assert relations.comment_author(store, comment).name == "Carol"
    assert relations.comment_author(store, store.comments[3]) is None


def test_feed_for_returns_friends_posts_in_storage_order(store):
    alice = store.find_user("1")

    assert [p.id for p in relations.feed_for(store, alice)] == ["p1", "p2", "p4"]


def test_feed_for_user_without_friends_is_empty(store):
    assert relations.feed_for(store, store.find_user("2")) == []
