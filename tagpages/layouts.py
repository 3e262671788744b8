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


"""Layout lookup and rendering of tag pages with Jinja2.

Layouts are `_layouts/*.html` files of the site source, optionally starting
with YAML front matter. A layout may name a parent in its `layout` key, the
rendered page is then passed to the parent as `content`.
"""

import os
import re
from glob import glob
from io import BytesIO
from typing import Any, Dict, List, Mapping

import yaml
from jinja2 import Environment, FileSystemLoader
from markdown import markdown

from tagpages.builder import MissingLayout
from tagpages.model import TagIndexPage

PAGE_ENCODING = "UTF-8"


def read_template(path: str) -> Dict[str, Any]:
    with open(path, "rb") as fd:
        if fd.read(3) != b"---":
            fd.seek(0)
            return {"content": fd.read().decode(PAGE_ENCODING)}
        lines = []
        while True:
            line = fd.readline()
            if re.match(b"^---\r?\n", line):
                break
            elif line == b"":
                raise Exception(f"Unterminated front matter in '{path}'")
            lines.append(line)
        front_matter = BytesIO(b"".join(lines))
        front_matter.name = path
        page = yaml.safe_load(front_matter)
        if not page:
            page = {}
        page["content"] = fd.read().decode(PAGE_ENCODING)
        return page


class Layouts:
    def __init__(self, source: str) -> None:
        self.source = source
        self._paths: Dict[str, str] = {}
        for path in sorted(glob(os.path.join(source, "_layouts", "*.html"))):
            name, _ = os.path.splitext(os.path.basename(path))
            self._paths[name] = path
        includes = os.path.join(source, "_includes")
        self.env = Environment(loader=FileSystemLoader(includes))
        self.env.filters["markdownify"] = markdown

    def __contains__(self, name: object) -> bool:
        return name in self._paths

    def names(self) -> List[str]:
        return list(self._paths)

    def read(self, name: str) -> Dict[str, Any]:
        if name not in self._paths:
            raise MissingLayout(name)
        return read_template(self._paths[name])

    def render_string(self, string: str, context: Dict[str, Any]) -> str:
        return self.env.from_string(string).render(**context)

    def render_layout(
        self, content: str, page: Dict[str, Any], site: Mapping[str, Any]
    ) -> str:
        name = page.get("layout", "nil")
        if name == "nil" or not name:
            return content
        layout = self.read(name)
        page_copy = page.copy()
        page_copy.pop("layout", None)
        page_copy.pop("content", None)
        layout.update(page_copy)
        context = {
            "site": site,
            "page": layout,
            "content": content,
        }
        content = self.render_string(layout["content"], context)
        return self.render_layout(content, layout, site)

    def render(self, page: TagIndexPage, site: Mapping[str, Any]) -> bytes:
        """Render a tag page, the tag page layout being its body."""
        data = self.read(page.layout)
        parent = data.get("layout", "nil")
        data.update(page.to_dict())
        data["layout"] = parent
        try:
            content = self.render_string(data["content"], {"site": site, "page": data})
            rendered = self.render_layout(content, data, site)
        except Exception as e:
            raise Exception(f"Cannot render '{page.route}': {e}")
        return rendered.encode(PAGE_ENCODING)
