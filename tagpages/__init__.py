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


"""Tag index pages for Jekyll-style static site generators.

Posts are grouped by tag and every tag gets an index page that lists its
posts, rendered with the site layouts:

    from tagpages import Layouts, load_config, posts_from_site, render_tag_pages

    config = load_config("_config.yml")
    pages = render_tag_pages(posts_from_site(site), config, Layouts("."), site)

Tag pages are generated only if the site has both the `tag_index` and the
`tag-page` layouts (see `tagpages.config` for the settings).
"""

from tagpages.builder import MissingLayout, build, require_layout, sort_posts
from tagpages.collector import collect
from tagpages.config import TagPageConfig, load_config
from tagpages.generator import generate_tag_pages, render_tag_pages
from tagpages.layouts import Layouts
from tagpages.log import set_quiet
from tagpages.model import Post, Tag, TagIndexPage, post_from_dict, posts_from_site

__version__ = "0.1"
__all__ = [
    "Layouts",
    "MissingLayout",
    "Post",
    "Tag",
    "TagIndexPage",
    "TagPageConfig",
    "build",
    "collect",
    "generate_tag_pages",
    "load_config",
    "post_from_dict",
    "posts_from_site",
    "render_tag_pages",
    "require_layout",
    "set_quiet",
    "sort_posts",
]
