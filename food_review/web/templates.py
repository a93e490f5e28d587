"""
HTML Template Renderer
======================

Turns a template name plus a data value into an HTML page. One instance
is built at startup and handed to create_app(); routes never reach for a
module-level renderer.

Templates:
    reviews.html          list of Review
    reviews_keyword.html  list of Review annotated with the search keyword
    review.html           single Review
    edit.html             single Review, with an edit form
"""

import html
import logging
from typing import Callable, Dict, List, Optional

from ..domain import Review

logger = logging.getLogger(__name__)


class TemplateError(Exception):
    """Rendering failed: unknown template or data of the wrong shape."""
    pass


SHARED_CSS = """
    :root {
        --bg: #fafaf7;
        --card: #ffffff;
        --border: #e5e2da;
        --text: #2d2a26;
        --muted: #8a857c;
        --accent: #b5562b;
    }
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
        background: var(--bg);
        color: var(--text);
        max-width: 760px;
        margin: 0 auto;
        padding: 32px 20px;
    }
    h1 { font-size: 26px; margin-bottom: 20px; }
    a { color: var(--accent); text-decoration: none; }
    .card {
        background: var(--card);
        border: 1px solid var(--border);
        border-radius: 10px;
        padding: 18px 22px;
        margin-bottom: 12px;
    }
    .meta { color: var(--muted); font-size: 12px; margin-bottom: 6px; }
    mark { background: #fde6c8; padding: 0 2px; }
    textarea {
        width: 100%; min-height: 140px; padding: 12px;
        border: 1px solid var(--border); border-radius: 8px;
        font: inherit;
    }
    .btn {
        background: var(--accent); color: #fff; border: none;
        padding: 10px 22px; border-radius: 8px; cursor: pointer;
        margin-top: 10px; font: inherit;
    }
    .status { margin-top: 10px; font-size: 13px; color: var(--muted); }
"""


def _page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html.escape(title)} - Food Review</title>
    <style>{SHARED_CSS}</style>
</head>
<body>
{body}
</body>
</html>"""


def _review_card(review: Review, link: bool = True) -> str:
    if review.keyword:
        # Match on the raw text so a keyword never lands inside an entity
        marked = f"<mark>{html.escape(review.keyword)}</mark>"
        content = marked.join(html.escape(part) for part in review.content.split(review.keyword))
    else:
        content = html.escape(review.content)

    header = f"Review #{review.id}"
    if link:
        header = f'<a href="/reviews/{review.id}">{header}</a>'

    return f"""    <div class="card">
        <div class="meta">{header}</div>
        <p>{content}</p>
    </div>"""


def _expect_review(template: str, data) -> Review:
    if not isinstance(data, Review):
        raise TemplateError(f"{template}: expected a Review, got {type(data).__name__}")
    return data


def _expect_reviews(template: str, data) -> List[Review]:
    if not isinstance(data, (list, tuple)) or not all(isinstance(r, Review) for r in data):
        raise TemplateError(f"{template}: expected a list of Review, got {type(data).__name__}")
    return list(data)


# ══════════════════════════════════════════════════════════════════
#  HTML TEMPLATE RENDERERS
# ══════════════════════════════════════════════════════════════════

def render_reviews_page(data) -> str:
    reviews = _expect_reviews("reviews.html", data)
    if reviews:
        cards = "\n".join(_review_card(r) for r in reviews)
    else:
        cards = '    <p class="meta">No reviews yet.</p>'
    return _page("All Reviews", f"    <h1>All Reviews ({len(reviews)})</h1>\n{cards}")


def render_keyword_page(data) -> str:
    reviews = _expect_reviews("reviews_keyword.html", data)
    keyword = reviews[0].keyword if reviews else ""
    cards = "\n".join(_review_card(r) for r in reviews)
    title = f"Reviews mentioning “{keyword}”"
    return _page(
        title,
        f"""    <h1>{html.escape(title)}</h1>
    <p class="meta">{len(reviews)} match(es) &middot; <a href="/reviews">all reviews</a></p>
{cards}""",
    )


def render_review_page(data) -> str:
    review = _expect_review("review.html", data)
    return _page(
        f"Review #{review.id}",
        f"""    <h1>Review #{review.id}</h1>
{_review_card(review, link=False)}
    <p><a href="/reviews/{review.id}/edit">Edit</a> &middot; <a href="/reviews">All reviews</a></p>""",
    )


def render_edit_page(data) -> str:
    review = _expect_review("edit.html", data)
    return _page(
        f"Edit Review #{review.id}",
        f"""    <h1>Edit Review #{review.id}</h1>
    <form id="edit-form" class="card">
        <textarea name="review" id="review">{html.escape(review.content)}</textarea>
        <button type="submit" class="btn">Save</button>
        <div class="status" id="status"></div>
    </form>
    <p><a href="/reviews/{review.id}">Back</a></p>
    <script>
        document.getElementById('edit-form').addEventListener('submit', async (e) => {{
            e.preventDefault();
            const status = document.getElementById('status');
            const resp = await fetch('/reviews/{review.id}', {{
                method: 'PUT',
                headers: {{'Content-Type': 'application/json'}},
                body: JSON.stringify({{review: document.getElementById('review').value}})
            }});
            status.textContent = resp.ok ? 'Saved.' : 'Error: ' + await resp.text();
        }});
    </script>""",
    )


DEFAULT_TEMPLATES: Dict[str, Callable[[object], str]] = {
    "reviews.html": render_reviews_page,
    "reviews_keyword.html": render_keyword_page,
    "review.html": render_review_page,
    "edit.html": render_edit_page,
}


class TemplateRenderer:
    """
    Named HTML templates.

    Usage:
        renderer = TemplateRenderer()
        page = renderer.render("review.html", review)
    """

    def __init__(self, templates: Optional[Dict[str, Callable[[object], str]]] = None):
        self._templates = dict(DEFAULT_TEMPLATES if templates is None else templates)

    @property
    def template_names(self) -> List[str]:
        return sorted(self._templates)

    def render(self, template: str, data) -> str:
        """
        Render template with data.

        Raises:
            TemplateError: unknown template name or rendering failure.
        """
        render_fn = self._templates.get(template)
        if render_fn is None:
            raise TemplateError(f'template: no template "{template}" is defined')
        try:
            return render_fn(data)
        except TemplateError:
            raise
        except Exception as e:
            raise TemplateError(f"{template}: {e}") from e
