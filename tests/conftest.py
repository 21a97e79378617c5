"""
Shared fixtures: trending page markup in the shape GitHub renders it.
"""

import pytest
from bs4 import BeautifulSoup


def make_row(
    href="/octocat/hello-world",
    stars="\n      1,234\n    ",
    language="Python",
    description="\n      A friendly repository.\n    ",
    heading="h2",
):
    """Render one ``article.Box-row``; pass None to leave a part out."""
    title = ""
    if href is not None:
        title = (
            f'<{heading} class="h3 lh-condensed">'
            f'<a href="{href}" data-view-component="true" class="Link">'
            f'<span class="text-normal">{href.strip("/")}</span>'
            f'</a></{heading}>'
        )
    desc = f'<p class="col-9 color-fg-muted my-1 pr-4">{description}</p>' if description is not None else ""
    lang = ""
    if language is not None:
        lang = (
            '<span class="d-inline-block ml-0 mr-3">'
            '<span class="repo-language-color"></span>'
            f'<span itemprop="programmingLanguage">{language}</span>'
            '</span>'
        )
    star_link = ""
    if stars is not None and href is not None:
        star_link = (
            f'<a href="{href}/stargazers" class="Link Link--muted d-inline-block mr-3">'
            f'<svg class="octicon octicon-star"></svg>{stars}</a>'
        )
    fork_link = ""
    if href is not None:
        fork_link = f'<a href="{href}/forks" class="Link Link--muted d-inline-block mr-3">87</a>'
    return (
        '<article class="Box-row">'
        f'{title}{desc}'
        f'<div class="f6 color-fg-muted mt-2">{lang}{star_link}{fork_link}'
        '<span class="d-inline-block float-sm-right">12 stars today</span>'
        '</div></article>'
    )


def make_page(*rows):
    return (
        '<html><body><div class="application-main"><div class="Box">'
        + "".join(rows)
        + "</div></div></body></html>"
    )


@pytest.fixture
def trending_html():
    """Fixture providing a trending page with three well-formed rows."""
    return make_page(
        make_row(href="/zeta/alpha", stars="3", language="Go"),
        make_row(href="/alpha/zulu", stars="100", language="Rust"),
        make_row(href="/mike/bravo", stars="1", language=None, description=None),
    )


@pytest.fixture
def trending_document(trending_html):
    """Fixture providing the parsed trending page."""
    return BeautifulSoup(trending_html, "html.parser")


@pytest.fixture
def row_factory():
    """Fixture providing the row markup builder."""
    return make_row


@pytest.fixture
def page_factory():
    """Fixture providing the page markup builder."""
    return make_page
