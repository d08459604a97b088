from typing import Dict, Optional

from pydantic import BaseModel


class CardTheme(BaseModel):
    """Class names and texts used when rendering the projects grid."""

    model_config = {
        "frozen": True,
    }

    grid_class: str
    message_class: str
    error_class: str
    card_class: str
    header_class: str
    title_class: str
    language_class: str
    description_class: str
    stats_class: str
    link_class: str

    loading_text: str = "Loading projects..."
    empty_text: str = "No public repositories found."
    error_text: str = "Failed to load projects. Please try again."
    description_placeholder: str = "No description"
    language_placeholder: str = "N/A"
    link_text: str = "View on GitHub →"


TAILWIND_THEME = CardTheme(
    grid_class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-6",
    message_class="col-span-full text-center text-gray-400 py-8",
    error_class="col-span-full text-center text-red-400 py-8",
    card_class=(
        "bg-dark-700 border border-dark-600 rounded-xl p-6 hover:border-indigo-500 "
        "hover:-translate-y-1 hover:shadow-xl transition-all"
    ),
    header_class="flex justify-between items-start mb-3",
    title_class="text-lg font-semibold",
    language_class="px-2 py-1 bg-indigo-500/15 text-indigo-400 rounded text-xs font-mono",
    description_class="text-gray-400 text-sm mb-4 line-clamp-2",
    stats_class="flex gap-4 text-gray-500 text-sm mb-4",
    link_class="text-indigo-400 hover:text-indigo-300 font-medium text-sm",
)

CLASSIC_THEME = CardTheme(
    grid_class="projects-grid",
    message_class="projects-message",
    error_class="projects-message projects-message--error",
    card_class="project-card",
    header_class="project-card__header",
    title_class="project-card__title",
    language_class="project-card__language",
    description_class="project-card__description",
    stats_class="project-card__stats",
    link_class="project-card__link",
    description_placeholder="No description available",
)

THEMES: Dict[str, CardTheme] = {
    "tailwind": TAILWIND_THEME,
    "classic": CLASSIC_THEME,
}


def get_theme(name: str, description_placeholder: Optional[str] = None) -> CardTheme:
    key = (name or "").strip().lower()
    if key not in THEMES:
        raise ValueError(f"Unknown theme '{name}' (expected one of: {', '.join(THEMES)})")

    theme = THEMES[key]
    if description_placeholder:
        theme = theme.model_copy(update={"description_placeholder": description_placeholder})
    return theme
