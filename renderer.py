from enum import Enum
from typing import Iterable, Optional

from jinja2 import DictLoader, Environment, StrictUndefined
from markupsafe import Markup, escape

from schema import Project
from theme import CardTheme, TAILWIND_THEME


class ViewState(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    ERROR = "error"
    LOADED = "loaded"


# ========================================
# 1) TEMPLATES
# Everything goes through autoescape; None renders as "".
# ========================================
MESSAGE_TEMPLATE = '<p class="{{ css }}">{{ text }}</p>'

CARD_TEMPLATE = """\
<div class="{{ theme.card_class }}">
    <div class="{{ theme.header_class }}">
        <h3 class="{{ theme.title_class }}">{{ project.name }}</h3>
        <span class="{{ theme.language_class }}">{{ project.language or theme.language_placeholder }}</span>
    </div>
    <p class="{{ theme.description_class }}">{{ project.description or theme.description_placeholder }}</p>
    <div class="{{ theme.stats_class }}">
        <span>⭐ {{ project.stargazers_count }}</span>
        <span>🍴 {{ project.forks_count }}</span>
        {% if project.updated_at %}
        <time datetime="{{ project.updated_at }}">Updated {{ project.updated_at[:10] }}</time>
        {% endif %}
    </div>
    <a href="{{ project.html_url }}" target="_blank" rel="noopener noreferrer" class="{{ theme.link_class }}">{{ theme.link_text }}</a>
</div>
"""

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Projects</title>
</head>
<body>
    <main>
        <h1>Projects</h1>
        {% if notification %}
        <div class="notification" role="alert">{{ notification }}</div>
        {% endif %}
        <form method="get" action="{{ base_path }}/projects">
            <input type="text" id="githubUsername" name="username" value="{{ username }}" placeholder="GitHub username" autofocus>
            <button type="submit">Load projects</button>
        </form>
        <div id="projectsGrid" class="{{ theme.grid_class }}">{{ grid }}</div>
    </main>
</body>
</html>
"""


def escape_html(text) -> Markup:
    if text is None:
        return Markup("")
    return escape(text)


env = Environment(
    loader=DictLoader({
        "message.html": MESSAGE_TEMPLATE,
        "card.html": CARD_TEMPLATE,
        "page.html": PAGE_TEMPLATE,
    }),
    autoescape=True,
    finalize=escape_html,
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)


# ========================================
# 2) RENDERING
# ========================================
def render_card(project: Project, theme: CardTheme = TAILWIND_THEME) -> str:
    return env.get_template("card.html").render(project=project, theme=theme)


def render_view(
    state: ViewState,
    projects: Iterable[Project] = (),
    theme: CardTheme = TAILWIND_THEME,
) -> str:
    """Render the content of the projects grid for one view state.

    LOADED joins one card per project in the given order; the other
    states render a single themed message.
    """
    if state is ViewState.LOADED:
        return "".join(render_card(p, theme) for p in projects)

    message = env.get_template("message.html")
    if state is ViewState.LOADING:
        return message.render(css=theme.message_class, text=theme.loading_text)
    if state is ViewState.EMPTY:
        return message.render(css=theme.message_class, text=theme.empty_text)
    return message.render(css=theme.error_class, text=theme.error_text)


def render_page(
    grid: str = "",
    username: str = "",
    notification: Optional[str] = None,
    base_path: str = "",
    theme: CardTheme = TAILWIND_THEME,
) -> str:
    # grid is output of render_view and already escaped
    return env.get_template("page.html").render(
        grid=Markup(grid),
        username=username,
        notification=notification,
        base_path=base_path,
        theme=theme,
    )
