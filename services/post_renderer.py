"""
Post Renderer Module

Sorting and display formatting for timeline posts.
"""

from datetime import tzinfo
from operator import attrgetter
from typing import Iterable, Iterator, List, Optional

from config import settings
from data.models import TimelinePost


def sort_posts(posts: Iterable[TimelinePost]) -> List[TimelinePost]:
    """Return the posts oldest first. Posts with equal timestamps keep their order."""
    return sorted(posts, key=attrgetter("timestamp"))


def render_post(post: TimelinePost, tz: Optional[tzinfo] = None) -> str:
    """
    Format a post as "MM/DD/YYYY hh:mm AM|PM - message".

    Args:
        post: The post to format.
        tz: Time zone to display in, defaults to the local time zone.

    Returns:
        str: The output line, without a trailing newline.
    """
    local_time = post.timestamp.astimezone(tz)
    return f"{local_time.strftime(settings.DISPLAY_DATE_FORMAT)} - {post.message}"


def render_posts(posts: Iterable[TimelinePost], tz: Optional[tzinfo] = None) -> Iterator[str]:
    for post in posts:
        yield render_post(post, tz)
