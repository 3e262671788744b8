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


from typing import Any, Callable, Container, Dict, Iterable, List, Mapping, Optional

from tagpages.builder import MissingLayout, build, require_layout
from tagpages.collector import collect
from tagpages.config import TagPageConfig
from tagpages.layouts import Layouts
from tagpages.log import info, progress
from tagpages.model import Post, TagIndexPage, sorted_tags


def generate_tag_pages(
    posts: Iterable[Post],
    config: TagPageConfig,
    layouts: Container[str],
    emit: Optional[Callable[[TagIndexPage], None]] = None,
) -> List[TagIndexPage]:
    """Generate an index page for every tag of the posts.

    Nothing is generated unless both the tag index and the tag page layouts
    are registered.
    """
    tags = collect(posts)
    try:
        require_layout(layouts, config.tag_index_layout)
        require_layout(layouts, config.tag_page_layout)
    except MissingLayout as e:
        info(f"Skipping tag pages: {e}")
        return []
    pages = []
    for tag in progress("Generating tag pages", sorted_tags(tags)):
        page = build(tag, tags[tag], config)
        if emit:
            emit(page)
        pages.append(page)
    return pages


def render_tag_pages(
    posts: Iterable[Post],
    config: TagPageConfig,
    layouts: Layouts,
    site: Mapping[str, Any],
) -> Dict[str, bytes]:
    """Render tag pages to a mapping from output path to page contents."""
    rendered: Dict[str, bytes] = {}

    def emit(page: TagIndexPage) -> None:
        rendered[page.output_path] = layouts.render(page, site)

    generate_tag_pages(posts, config, layouts, emit)
    return rendered
