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


"""Tag page settings read from the site configuration.

The recognized keys of `_config.yml` are:

    tag_page_dir: tags
    tag_page_layout: tag-page
    tag_index_layout: tag_index
    tag_title_prefix: 'Posts Tagged "'
    tag_title_suffix: '"'
    tag_page_sort: name

Tag pages are generated only when both `tag_index_layout` and
`tag_page_layout` exist in `_layouts`. `tag_page_sort` is either `name` or
`date`.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

import yaml

SORT_KEYS = ("name", "date")


@dataclass(frozen=True)
class TagPageConfig:
    tag_page_dir: str = "tags"
    tag_page_layout: str = "tag-page"
    tag_index_layout: str = "tag_index"
    tag_title_prefix: str = 'Posts Tagged "'
    tag_title_suffix: str = '"'
    tag_page_sort: str = "name"

    def __post_init__(self) -> None:
        if self.tag_page_sort not in SORT_KEYS:
            raise ValueError(
                f"Unknown tag_page_sort '{self.tag_page_sort}', "
                f"expected one of: {', '.join(SORT_KEYS)}"
            )

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "TagPageConfig":
        """Pick the tag page settings out of a site config mapping."""
        kwargs: Dict[str, str] = {}
        for f in fields(cls):
            value = config.get(f.name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ValueError(f"Expected a string for '{f.name}', got {value!r}")
            kwargs[f.name] = value
        return cls(**kwargs)


def load_yaml_mapping(path: str) -> dict:
    try:
        with open(path, "rb") as fd:
            mapping = yaml.safe_load(fd)
    except FileNotFoundError:
        return {}
    if not mapping:
        return {}
    if not isinstance(mapping, dict):
        raise ValueError(f"Config file '{path}' is not a mapping")
    return mapping


def load_config(path: str) -> TagPageConfig:
    return TagPageConfig.from_mapping(load_yaml_mapping(path))
