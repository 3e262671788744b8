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


import posixpath
from datetime import datetime
from typing import Any, Callable, Container, Iterable, List

from tagpages.config import TagPageConfig
from tagpages.model import Post, Tag, TagIndexPage


class MissingLayout(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(f"Layout '{name}' is not registered")
        self.name = name


def require_layout(layouts: Container[str], name: str) -> None:
    if name not in layouts:
        raise MissingLayout(name)


def by_name(post: Post) -> Any:
    return (post.name, post.path)


def by_date(post: Post) -> Any:
    # Undated posts go first
    return (post.date is not None, post.date or datetime.min, post.name, post.path)


_sort_keys: dict[str, Callable[[Post], Any]] = {
    "name": by_name,
    "date": by_date,
}


def sort_posts(posts: Iterable[Post], key: str = "name") -> List[Post]:
    return sorted(posts, key=_sort_keys[key])


def build(tag: Tag, posts: Iterable[Post], config: TagPageConfig) -> TagIndexPage:
    """Build the index page descriptor for a single tag.

    The result depends only on the arguments. Rendering and writing the page
    are left to the caller.
    """
    route = posixpath.join(config.tag_page_dir.strip("/"), tag.dir, "index")
    title = f"{config.tag_title_prefix}{tag.name}{config.tag_title_suffix}"
    return TagIndexPage(
        route=route,
        title=title,
        tag=tag,
        posts=tuple(sort_posts(posts, config.tag_page_sort)),
        layout=config.tag_page_layout,
    )
