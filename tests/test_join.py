from bson import ObjectId

from mongo_demo.services.join import attach_posts, attach_user


def test_attach_posts_groups_by_user():
    alice, bob = {"_id": ObjectId(), "name": "Alice"}, {"_id": ObjectId(), "name": "Bob"}
    posts = [
        {"_id": ObjectId(), "title": "a1", "userId": alice["_id"]},
        {"_id": ObjectId(), "title": "none", "userId": None},
        {"_id": ObjectId(), "title": "a2", "userId": alice["_id"]},
    ]

    joined = attach_posts([alice, bob], posts)

    assert [p["title"] for p in joined[0]["posts"]] == ["a1", "a2"]
    assert joined[1]["posts"] == []
    assert "posts" not in alice


def test_attach_user_handles_dangling_reference():
    alice = {"_id": ObjectId(), "name": "Alice"}
    posts = [
        {"_id": ObjectId(), "title": "mine", "userId": alice["_id"]},
        {"_id": ObjectId(), "title": "ghost", "userId": ObjectId()},
        {"_id": ObjectId(), "title": "unassigned"},
    ]

    joined = attach_user(posts, [alice])

    assert joined[0]["user"] is alice
    assert joined[1]["user"] is None
    assert joined[2]["user"] is None
