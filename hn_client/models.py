"""
Data models for posts, comments and vote links.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional
import json


class VoteDirection(str, Enum):
    """Which way a vote link casts."""
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class VoteAction:
    """
    A one-shot vote link scraped from a page.

    The URL embeds a session-scoped auth token, so it only works for the
    session that fetched the page and only until that page expires.
    """
    direction: VoteDirection
    url: str

    @classmethod
    def upvote(cls, url: str) -> "VoteAction":
        return cls(VoteDirection.UP, url)

    @classmethod
    def downvote(cls, url: str) -> "VoteAction":
        return cls(VoteDirection.DOWN, url)

    @property
    def is_upvote(self) -> bool:
        return self.direction is VoteDirection.UP

    def to_dict(self) -> dict:
        return {'direction': self.direction.value, 'url': self.url}

    @classmethod
    def from_dict(cls, data: dict) -> "VoteAction":
        return cls(VoteDirection(data['direction']), data['url'])


def _vote_to_dict(vote: Optional[VoteAction]) -> Optional[dict]:
    return vote.to_dict() if vote else None


def _vote_from_dict(data: Optional[dict]) -> Optional[VoteAction]:
    return VoteAction.from_dict(data) if data else None


@dataclass
class Comment:
    """Represents a single comment in a submission thread."""
    id: str
    depth: int
    age: str  # relative, e.g. "3 hours ago"
    username: str
    content_html: str
    children: List["Comment"] = field(default_factory=list)
    upvote: Optional[VoteAction] = None
    downvote: Optional[VoteAction] = None

    def walk(self) -> Iterator["Comment"]:
        """Yield this comment and all of its replies in page order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'depth': self.depth,
            'age': self.age,
            'username': self.username,
            'content_html': self.content_html,
            'children': [c.to_dict() for c in self.children],
            'upvote': _vote_to_dict(self.upvote),
            'downvote': _vote_to_dict(self.downvote),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Comment":
        data = data.copy()
        data['children'] = [cls.from_dict(c) for c in data.get('children', [])]
        data['upvote'] = _vote_from_dict(data.get('upvote'))
        data['downvote'] = _vote_from_dict(data.get('downvote'))
        return cls(**data)


@dataclass
class Post:
    """Represents a story from a listing or submission page."""
    id: str
    title: str
    url: str
    username: str
    score: int = 0
    comment_count: int = 0
    comments: List[Comment] = field(default_factory=list)
    vote: Optional[VoteAction] = None

    def iter_comments(self) -> Iterator[Comment]:
        """Flatten the comment forest back into page order."""
        for root in self.comments:
            yield from root.walk()

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'url': self.url,
            'username': self.username,
            'score': self.score,
            'comment_count': self.comment_count,
            'comments': [c.to_dict() for c in self.comments],
            'vote': _vote_to_dict(self.vote),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Post":
        data = data.copy()
        data['comments'] = [Comment.from_dict(c) for c in data.get('comments', [])]
        data['vote'] = _vote_from_dict(data.get('vote'))
        return cls(**data)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


@dataclass(frozen=True)
class Ack:
    """Acknowledgement that a state-changing request went through."""
    url: str
    status_code: int
