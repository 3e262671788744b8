# -*- coding: utf-8 -*-

# Copyright (c) 2012-2022 Andrey Vlasovskikh
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.  IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


"""Posts, tags and tag index pages."""

import os
import posixpath
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import quote

# Characters that cannot appear in a directory name on common file systems
UNSAFE_CHARS = frozenset('/\\%<>:"|?*')


def _as_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    else:
        return None


def _as_tags(value: Any) -> FrozenSet[str]:
    if not value:
        return frozenset()
    if isinstance(value, str):
        value = value.split()
    return frozenset(str(tag).strip() for tag in value if str(tag).strip())


def _escape(c: str) -> str:
    return "".join(f"%{b:02X}" for b in c.encode("UTF-8"))


@dataclass(frozen=True)
class Post:
    """A blog post as seen by the tag pages.

    `path` identifies the post within the host site, `name` is what posts are
    sorted by. Aware dates are converted to naive UTC. `data` keeps the
    host's original post mapping for templates and does not take part in
    equality or hashing.
    """

    name: str
    date: Optional[datetime] = None
    tags: FrozenSet[str] = frozenset()
    path: str = ""
    data: Mapping[str, Any] = field(
        default_factory=dict, compare=False, hash=False, repr=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", _as_datetime(self.date))
        object.__setattr__(self, "tags", frozenset(t for t in self.tags if t))

    def to_dict(self) -> Dict[str, Any]:
        d = dict(self.data)
        d.update({"name": self.name, "date": self.date, "tags": sorted(self.tags)})
        return d


@dataclass(frozen=True)
class Tag:
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Tag name must not be empty")

    @property
    def dir(self) -> str:
        """Directory name of the tag page, different for every tag name.

        Characters unsafe in file names and `%` itself are percent-escaped.
        Names of only dots or spaces are escaped completely.
        """
        if not self.name.strip(". "):
            return "".join(_escape(c) for c in self.name)
        return "".join(
            _escape(c) if c in UNSAFE_CHARS or ord(c) < 32 else c for c in self.name
        )

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TagIndexPage:
    route: str
    title: str
    tag: Tag
    posts: Tuple[Post, ...]
    layout: str

    @property
    def output_path(self) -> str:
        return f"{self.route}.html"

    @property
    def url(self) -> str:
        path = posixpath.dirname(self.route)
        return quote(f"/{path}/" if path else "/")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "route": self.route,
            "title": self.title,
            "tag": self.tag.name,
            "posts": [post.to_dict() for post in self.posts],
            "layout": self.layout,
        }


def post_from_dict(page: Mapping[str, Any]) -> Post:
    """Convert an Obraz/Jekyll post dict into a post."""
    path = page.get("path") or page.get("id") or page.get("url") or ""
    if page.get("path"):
        name = os.path.basename(page["path"])
    else:
        name = page.get("id") or page.get("title") or ""
    return Post(
        name=str(name),
        date=_as_datetime(page.get("date")),
        tags=_as_tags(page.get("tags")),
        path=str(path),
        data=page,
    )


def posts_from_site(site: Mapping[str, Any]) -> List[Post]:
    return [post_from_dict(page) for page in site.get("posts", [])]


def sorted_tags(tags: Iterable[Tag]) -> List[Tag]:
    return sorted(tags, key=lambda tag: tag.name)
