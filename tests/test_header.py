"""Tests for header title derivation and navigation filtering."""

from blog_view.core.header import header_title, visible_nav_links
from blog_view.core.types import NavLink


NAV = [
    NavLink(title="Home", href="/"),
    NavLink(title="Blog", href="/blog"),
    NavLink(title="Tags", href="/tags"),
    NavLink(title="About", href="/about"),
]


def test_root_path_has_empty_title():
    assert header_title("/") == ""


def test_empty_path_has_empty_title():
    assert header_title("") == ""


def test_title_from_first_segment():
    assert header_title("/blog/my-post") == "Blog"
    assert header_title("/tags") == "Tags"


def test_title_only_capitalizes_first_character():
    assert header_title("/projects/myApp") == "Projects"
    assert header_title("/aBOUT") == "ABOUT"


def test_home_link_is_filtered_and_order_kept():
    links = visible_nav_links(NAV)
    assert [link.href for link in links] == ["/blog", "/tags", "/about"]


def test_only_exact_root_href_is_filtered():
    links = visible_nav_links([NavLink(title="Index", href="/index"), NavLink(title="Home", href="/")])
    assert links == [NavLink(title="Index", href="/index")]
