import logging
from functools import partial
from typing import Callable, List, Optional

import anyio
import requests

from errors import EmptyInput, ProjectLoadError
from projects_fetcher import fetch_projects
from renderer import ViewState, render_view
from schema import Project
from theme import CardTheme, TAILWIND_THEME

logger = logging.getLogger("projects-loader")

DEFAULT_ENDPOINT = "http://localhost:8000/api/projects"
ACTIVATION_KEY = "Enter"


class TextInput:
    """The username field. Owned by the page, read by the loader."""

    def __init__(self, value: str = ""):
        self.value = value


class RenderTarget:
    """The projects grid. Its content is always replaced wholesale."""

    def __init__(self, content: str = ""):
        self.content = content

    def replace(self, html: str):
        self.content = html


class ProjectLoader:
    """Loads a user's repositories into a render target.

    Reads the username from `username_input`, shows the loading message,
    fetches `endpoint?username=...` in a worker thread and replaces the
    target with the cards, the empty message or the failure message.
    Load failures are logged and never raised to the caller.
    """

    def __init__(
        self,
        username_input: TextInput,
        target: RenderTarget,
        notify: Callable[[str], None],
        endpoint: str = DEFAULT_ENDPOINT,
        theme: CardTheme = TAILWIND_THEME,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        fetch: Callable[..., List[Project]] = fetch_projects,
    ):
        self.username_input = username_input
        self.target = target
        self.notify = notify
        self.endpoint = endpoint
        self.theme = theme
        self.session = session
        self.timeout = timeout
        self.fetch = fetch

    def _read_username(self) -> str:
        username = (self.username_input.value or "").strip()
        if not username:
            raise EmptyInput()
        return username

    async def handle_key(self, key: str) -> bool:
        if key != ACTIVATION_KEY:
            return False
        await self.load_projects()
        return True

    async def load_projects(self) -> Optional[ViewState]:
        try:
            username = self._read_username()
        except EmptyInput as e:
            self.notify(str(e))
            return None

        self.target.replace(render_view(ViewState.LOADING, theme=self.theme))

        try:
            projects = await anyio.to_thread.run_sync(
                partial(
                    self.fetch,
                    username,
                    self.endpoint,
                    session=self.session,
                    timeout=self.timeout,
                )
            )
        except ProjectLoadError:
            logger.exception("Error loading projects for %r", username)
            self.target.replace(render_view(ViewState.ERROR, theme=self.theme))
            return ViewState.ERROR

        state = ViewState.LOADED if projects else ViewState.EMPTY
        self.target.replace(render_view(state, projects, theme=self.theme))
        logger.info("Rendered %d projects for %s", len(projects), username)
        return state
