"""
users ↔ posts 애플리케이션 레벨 조인

두 컬렉션을 전체 조회한 뒤 _id 기준 딕셔너리로 한 번만 인덱싱해서 붙입니다.
"""
from collections import defaultdict
from typing import Any, Dict, List


def attach_posts(users: List[Dict[str, Any]], posts: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """각 사용자 문서에 posts 목록을 추가한 새 문서 리스트를 반환"""
    posts_by_user: Dict[Any, List[Dict[str, Any]]] = defaultdict(list)
    for post in posts:
        if post.get("userId") is not None:
            posts_by_user[post["userId"]].append(post)

    return [{**user, "posts": posts_by_user.get(user.get("_id"), [])} for user in users]


def attach_user(posts: List[Dict[str, Any]], users: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """각 게시글 문서에 작성자(user, 없으면 None)를 추가한 새 문서 리스트를 반환"""
    users_by_id = {user["_id"]: user for user in users if user.get("_id") is not None}
    return [{**post, "user": users_by_id.get(post.get("userId"))} for post in posts]
