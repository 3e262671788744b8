from datetime import date, datetime, timedelta, timezone
from unittest import TestCase

from tagpages import Post, Tag, collect, post_from_dict, posts_from_site


class PostFromDictTest(TestCase):
    def test_obraz_post(self):
        page = {
            "path": "_posts/2013-05-01-hello.md",
            "url": "/2013/05/01/hello.html",
            "title": "Hello",
            "date": datetime(2013, 5, 1),
            "tags": ["python", "  ", "obraz"],
        }
        post = post_from_dict(page)
        self.assertEqual(post, Post("2013-05-01-hello.md", datetime(2013, 5, 1),
                                    frozenset(["python", "obraz"]),
                                    "_posts/2013-05-01-hello.md"))
        self.assertEqual(post.data["title"], "Hello")
        self.assertEqual(post.to_dict()["tags"], ["obraz", "python"])

    def test_tags_string_and_plain_date(self):
        post = post_from_dict({"title": "Hi", "date": date(2013, 5, 1),
                               "tags": "python jekyll"})
        self.assertEqual(post.name, "Hi")
        self.assertEqual(post.date, datetime(2013, 5, 1))
        self.assertEqual(post.tags, frozenset(["python", "jekyll"]))

    def test_no_tags_no_date(self):
        post = post_from_dict({"id": "/2013/05/01/hi"})
        self.assertEqual(post.name, "/2013/05/01/hi")
        self.assertIsNone(post.date)
        self.assertEqual(post.tags, frozenset())

    def test_posts_from_site(self):
        site = {"posts": [{"title": "a"}, {"title": "b", "tags": ["x"]}]}
        self.assertEqual([p.name for p in posts_from_site(site)], ["a", "b"])
        self.assertEqual(posts_from_site({}), [])

    def test_same_file_name_in_different_dirs(self):
        posts = posts_from_site({"posts": [
            {"path": "_posts/a/2013-01-01-x.md", "date": date(2013, 1, 1),
             "tags": ["ruby"]},
            {"path": "_posts/b/2013-01-01-x.md", "date": date(2013, 1, 1),
             "tags": ["ruby"]},
        ]})
        self.assertEqual([p.name for p in posts], ["2013-01-01-x.md"] * 2)
        self.assertNotEqual(posts[0], posts[1])
        self.assertEqual(len(collect(posts)[Tag("ruby")]), 2)

    def test_aware_date(self):
        post = post_from_dict({"title": "a", "date": datetime(
            2013, 5, 1, 12, tzinfo=timezone(timedelta(hours=-5)))})
        self.assertEqual(post.date, datetime(2013, 5, 1, 17))


class PostTest(TestCase):
    def test_plain_set_and_list_tags(self):
        a = Post("a", None, {"ruby"})
        b = Post("b", None, ["ruby", "python"])
        self.assertEqual(a.tags, frozenset(["ruby"]))
        self.assertEqual(b.tags, frozenset(["ruby", "python"]))
        self.assertEqual(collect([a, b]), {
            Tag("ruby"): {a, b},
            Tag("python"): {b},
        })

    def test_empty_tag_dropped(self):
        self.assertEqual(Post("a", None, ["", "ruby"]).tags, frozenset(["ruby"]))
