import pytest

from food_review.domain import Review
from food_review.web.templates import TemplateError, TemplateRenderer


@pytest.fixture
def renderer():
    return TemplateRenderer()


def test_default_template_names(renderer):
    assert renderer.template_names == ["edit.html", "review.html", "reviews.html", "reviews_keyword.html"]


def test_reviews_page(renderer):
    page = renderer.render("reviews.html", [Review(555, "overrated"), Review(666, "underrated")])

    assert 'href="/reviews/555"' in page
    assert "underrated" in page
    assert "All Reviews (2)" in page


def test_reviews_page_empty(renderer):
    assert "No reviews yet." in renderer.render("reviews.html", [])


def test_review_text_is_escaped(renderer):
    page = renderer.render("review.html", Review(1, "<script>alert(1)</script> & more"))

    assert "<script>alert(1)</script>" not in page
    assert "&lt;script&gt;alert(1)&lt;/script&gt; &amp; more" in page


def test_keyword_page_highlights_matches(renderer):
    page = renderer.render(
        "reviews_keyword.html",
        [Review(8888, "the foie gras was sublime", keyword="foie gras")],
    )
    assert "the <mark>foie gras</mark> was sublime" in page
    assert "1 match(es)" in page


@pytest.mark.parametrize(
    "content, keyword, expected",
    [
        ("amp & co", "amp", "<mark>amp</mark> &amp; co"),
        ("fish & chips", "&", "fish <mark>&amp;</mark> chips"),
        ('say "quote" twice', "quot", 'say &quot;<mark>quot</mark>e&quot; twice'),
    ],
)
def test_keyword_highlight_keeps_entities_intact(renderer, content, keyword, expected):
    page = renderer.render("reviews_keyword.html", [Review(1, content, keyword=keyword)])

    assert f"<p>{expected}</p>" in page
    assert "&<mark>" not in page


def test_explicit_none_uses_default_templates():
    assert TemplateRenderer(templates=None).template_names == TemplateRenderer().template_names


def test_edit_page_issues_put(renderer):
    page = renderer.render("edit.html", Review(42, "needs salt"))

    assert "fetch('/reviews/42'" in page
    assert "method: 'PUT'" in page
    assert ">needs salt</textarea>" in page


def test_unknown_template(renderer):
    with pytest.raises(TemplateError, match="missing.html"):
        renderer.render("missing.html", [])


@pytest.mark.parametrize(
    "template, data",
    [("review.html", [Review(1, "x")]), ("reviews.html", Review(1, "x")), ("edit.html", None), ("reviews.html", ["x"])],
)
def test_wrong_data_shape(renderer, template, data):
    with pytest.raises(TemplateError):
        renderer.render(template, data)


def test_custom_template_failure_is_wrapped():
    def broken(data):
        raise KeyError("title")

    renderer = TemplateRenderer({"broken.html": broken})
    with pytest.raises(TemplateError, match="broken.html") as exc_info:
        renderer.render("broken.html", None)
    assert isinstance(exc_info.value.__cause__, KeyError)
