import os
import logging
from typing import List, Optional, Tuple

import requests
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse
from fastapi.middleware.cors import CORSMiddleware
from project_loader import DEFAULT_ENDPOINT, ProjectLoader, RenderTarget, TextInput
from renderer import ViewState, render_page
from theme import get_theme
from dotenv import load_dotenv

load_dotenv()

# -----------------------------
# Config via ENV (with sane defaults)
# -----------------------------
PROJECTS_API_URL = os.getenv("PROJECTS_API_URL", DEFAULT_ENDPOINT)
_timeout = os.getenv("PROJECTS_REQUEST_TIMEOUT_SEC", "").strip()
PROJECTS_REQUEST_TIMEOUT_SEC: Optional[float] = float(_timeout) if _timeout else None   # unset = wait forever
PROJECTS_THEME = os.getenv("PROJECTS_THEME", "tailwind")
DESCRIPTION_PLACEHOLDER = os.getenv("PROJECTS_DESCRIPTION_PLACEHOLDER")
BASE_PATH = os.getenv("BASE_PATH", "").rstrip("/")
PROJECTS_DEFAULT_USERNAME = os.getenv("PROJECTS_DEFAULT_USERNAME", "").strip()   # shown when no username is given
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*")

THEME = get_theme(PROJECTS_THEME, DESCRIPTION_PLACEHOLDER)

print("=== ENVIRONMENT CHECK ===")
print("PROJECTS_API_URL:", PROJECTS_API_URL)
print("PROJECTS_REQUEST_TIMEOUT_SEC:", PROJECTS_REQUEST_TIMEOUT_SEC)
print("PROJECTS_THEME:", PROJECTS_THEME)
print("PROJECTS_DEFAULT_USERNAME:", PROJECTS_DEFAULT_USERNAME or "(none)")
print("BASE_PATH:", BASE_PATH or "/")
print("================================")

# -----------------------------
# Logging
# -----------------------------
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger("projects-api")

# -----------------------------
# App + CORS
# -----------------------------
ENV = os.getenv("ENVIRONMENT", "dev")

app = FastAPI(
    docs_url=None if ENV == "prod" else "/docs",
    redoc_url=None if ENV == "prod" else "/redoc",
    openapi_url=None if ENV == "prod" else "/openapi.json"
)

# ALLOWED_ORIGINS can be "*", or "https://a.com,https://b.com"
if ALLOWED_ORIGINS.strip() == "*":
    origins = ["*"]
else:
    origins = [o.strip() for o in ALLOWED_ORIGINS.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# One pooled session for every outgoing call to the projects endpoint
session = requests.Session()


# -----------------------------
# Helpers
# -----------------------------
async def _load_grid(username: str) -> Tuple[str, Optional[ViewState], List[str]]:
    """
    Run a ProjectLoader against a fresh input/target pair for this request.
    Returns the grid html, the rendered state and any user notifications.
    """
    notifications: List[str] = []
    target = RenderTarget()
    loader = ProjectLoader(
        TextInput(username),
        target,
        notify=notifications.append,
        endpoint=PROJECTS_API_URL,
        theme=THEME,
        session=session,
        timeout=PROJECTS_REQUEST_TIMEOUT_SEC,
    )
    state = await loader.load_projects()
    return target.content, state, notifications


async def _render_showcase(username: str) -> str:
    grid, state, notifications = await _load_grid(username)
    if state is ViewState.ERROR:
        logger.warning("Showcase rendered with load failure for %r", username)

    return render_page(
        grid=grid,
        username=username,
        notification=notifications[0] if notifications else None,
        base_path=BASE_PATH,
        theme=THEME,
    )


# -----------------------------
# Routes
# -----------------------------
@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def home():
    if not PROJECTS_DEFAULT_USERNAME:
        return render_page(base_path=BASE_PATH, theme=THEME)
    return await _render_showcase(PROJECTS_DEFAULT_USERNAME)


@app.get("/projects", response_class=HTMLResponse)
async def projects_page(username: str = Query("")):
    return await _render_showcase(username.strip() or PROJECTS_DEFAULT_USERNAME)


@app.get("/projects/grid", response_class=HTMLResponse)
async def projects_grid(username: str = Query("")):
    grid, state, notifications = await _load_grid(username)
    if state is None:
        raise HTTPException(status_code=400, detail=notifications[0])
    return grid
