from datetime import datetime
from unittest import TestCase

from tagpages import Post, Tag, collect


class CollectTest(TestCase):
    def setUp(self):
        self.a = Post("a.md", datetime(2013, 1, 1), frozenset(["python", "jekyll"]))
        self.b = Post("b.md", datetime(2013, 2, 1), frozenset(["python"]))
        self.c = Post("c.md", datetime(2013, 3, 1), frozenset())

    def test_collect_by_tag(self):
        tags = collect([self.a, self.b, self.c])
        self.assertEqual(tags, {
            Tag("python"): {self.a, self.b},
            Tag("jekyll"): {self.a},
        })

    def test_collect_every_post_in_each_of_its_tags(self):
        posts = [self.a, self.b, self.c]
        tags = collect(posts)
        self.assertEqual(set(tags), {Tag(t) for p in posts for t in p.tags})
        for post in posts:
            buckets = [t for t, ps in tags.items() if post in ps]
            self.assertEqual(len(buckets), len(post.tags))

    def test_collect_order_independent(self):
        self.assertEqual(collect([self.a, self.b, self.c]),
                         collect([self.c, self.b, self.a]))

    def test_collect_independent_sets(self):
        tags = collect([self.a])
        tags[Tag("python")].add(self.b)
        self.assertEqual(tags[Tag("jekyll")], {self.a})

    def test_collect_empty(self):
        self.assertEqual(collect([]), {})
        self.assertEqual(collect([self.c]), {})
