"""HTML rendering adapter for the feed. All article text is escaped."""

import html

from feedboard.presentation.web.view import Card, FeedView

NO_RESULTS_MESSAGE = "No results."


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def render_card(card: Card) -> str:
    """One ``<article>`` element, tagged with its title for search matching."""
    article = card.article
    hidden = " hidden" if card.hidden else ""
    pressed = "true" if card.pressed else "false"
    return (
        f'<article class="card" data-id="{_attr(article.id)}" data-title="{_attr(article.title)}"{hidden}>'
        f'<h2 class="card-title">{html.escape(article.title)}</h2>'
        f'<p class="card-desc">{html.escape(article.description)}</p>'
        f'<footer class="card-meta">'
        f'<span class="card-author">{html.escape(article.author)}</span>'
        f'<span class="card-views">{article.views:,} views</span>'
        f'<time datetime="{_attr(article.created_at.isoformat())}"></time>'
        f'<button type="button" class="icon-like" aria-pressed="{pressed}">'
        f'<span class="like-count">{card.likes:,}</span>'
        f"</button>"
        f"</footer>"
        f"</article>"
    )


def render_feed(view: FeedView) -> str:
    """The feed section plus its placeholders, reflecting the current view-state."""
    if view.error is not None:
        body = f'<p class="feed-error">{html.escape(view.error)}</p>'
    else:
        body = "".join(render_card(card) for card in view.cards)

    no_results_hidden = "" if view.no_results else " hidden"
    return (
        f'<section id="feed" class="feed">{body}</section>'
        f'<p id="noResults" class="no-results"{no_results_hidden}>{NO_RESULTS_MESSAGE}</p>'
    )


def render_shell(view: FeedView, title: str = "Feedboard") -> str:
    """Single-page app entry point with the initial feed already rendered."""
    return f"""<!doctype html>
<html lang="es">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{html.escape(title)}</title>
</head>
<body>
<header>
<h1>{html.escape(title)}</h1>
<input id="search" type="search" placeholder="Search" autocomplete="off" value="{_attr(view.query)}">
</header>
<main>
<form id="articleForm">
<input name="title" required minlength="2" placeholder="Title">
<textarea name="description" placeholder="Description"></textarea>
<input name="author" placeholder="Author">
<input name="views" type="number" min="0" placeholder="Views">
<button type="submit">Publish</button>
<p id="formError" class="form-error" hidden></p>
</form>
{render_feed(view)}
</main>
<script src="/static/app.js" defer></script>
</body>
</html>
"""
