"""
Card Renderer - builds the HTML card for an approved submission
"""
import random
from typing import Tuple

from config.settings import (
    CATEGORY_APP,
    CATEGORY_GAME,
    CATEGORY_OTHER,
    CATEGORY_TOOL,
    CATEGORY_VISUALIZER,
    CATEGORY_WEBSITE,
)
from models.submission import Submission
from utils.security_utils import escape_html

CATEGORY_LABELS = {
    CATEGORY_VISUALIZER: "Visualizer",
    CATEGORY_GAME: "Game",
    CATEGORY_TOOL: "Tool",
    CATEGORY_WEBSITE: "Website",
    CATEGORY_APP: "App",
    CATEGORY_OTHER: "Project",
}
DEFAULT_CATEGORY_LABEL = "Project"

DEFAULT_LINK_TEXT = "View Project →"

PLACEHOLDER_GRADIENTS = (1, 2, 3, 4, 5)

REDDIT_BADGE = """<span class="source-badge">
                            <svg width="14" height="14" viewBox="0 0 24 24" fill="currentColor"><path d="M12 0A12 12 0 0 0 0 12a12 12 0 0 0 12 12 12 12 0 0 0 12-12A12 12 0 0 0 12 0zm5.01 4.744c.688 0 1.25.561 1.25 1.249a1.25 1.25 0 0 1-2.498.056l-2.597-.547-.8 3.747c1.824.07 3.48.632 4.674 1.488.308-.309.73-.491 1.207-.491.968 0 1.754.786 1.754 1.754 0 .716-.435 1.333-1.01 1.614a3.111 3.111 0 0 1 .042.52c0 2.694-3.13 4.87-7.004 4.87-3.874 0-7.004-2.176-7.004-4.87 0-.183.015-.366.043-.534A1.748 1.748 0 0 1 4.028 12c0-.968.786-1.754 1.754-1.754.463 0 .898.196 1.207.49 1.207-.883 2.878-1.43 4.744-1.487l.885-4.182a.342.342 0 0 1 .14-.197.35.35 0 0 1 .238-.042l2.906.617a1.214 1.214 0 0 1 1.108-.701zM9.25 12C8.561 12 8 12.562 8 13.25c0 .687.561 1.248 1.25 1.248.687 0 1.248-.561 1.248-1.249 0-.688-.561-1.249-1.249-1.249zm5.5 0c-.687 0-1.248.561-1.248 1.25 0 .687.561 1.248 1.249 1.248.688 0 1.249-.561 1.249-1.249 0-.687-.562-1.249-1.25-1.249zm-5.466 3.99a.327.327 0 0 0-.231.094.33.33 0 0 0 0 .463c.842.842 2.484.913 2.961.913.477 0 2.105-.056 2.961-.913a.361.361 0 0 0 .029-.463.33.33 0 0 0-.464 0c-.547.533-1.684.73-2.512.73-.828 0-1.979-.196-2.512-.73a.326.326 0 0 0-.232-.095z"/></svg>
                        </span>"""

X_BADGE = """<span class="source-badge">
                            <svg width="14" height="14" viewBox="0 0 24 24" fill="currentColor"><path d="M18.244 2.25h3.308l-7.227 8.26 8.502 11.24H16.17l-5.214-6.817L4.99 21.75H1.68l7.73-8.835L1.254 2.25H8.08l4.713 6.231zm-1.161 17.52h1.833L7.084 4.126H5.117z"/></svg>
                        </span>"""

FIRST_PROJECT_BADGE = """
                        <span class="experience-badge">
                            <span class="badge-icon">✨</span>
                            First project ever
                        </span>"""

# (domain substrings, link text, badge markup), checked in order
SOURCE_RULES = [
    (("github.com",), "View on GitHub →", ""),
    (("reddit.com",), "View on Reddit →", REDDIT_BADGE),
    (("x.com", "twitter.com"), "View on X →", X_BADGE),
    (("youtube.com", "youtu.be"), "Watch on YouTube →", ""),
]


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, DEFAULT_CATEGORY_LABEL)


def link_style(project_url: str) -> Tuple[str, str]:
    """Pick link wording and an optional source badge from the project URL's host."""
    if project_url:
        for domains, text, badge in SOURCE_RULES:
            if any(domain in project_url for domain in domains):
                return text, badge
    return DEFAULT_LINK_TEXT, ""


def render_image_section(submission: Submission, rng=random) -> str:
    if submission.image_url and submission.image_url.strip():
        return (
            f'<img src="{escape_html(submission.image_url)}" '
            f'alt="{escape_html(submission.project_name)}" class="card-img">'
        )

    gradient = rng.choice(PLACEHOLDER_GRADIENTS)
    return f"""<div class="image-placeholder gradient-{gradient}">
                            <span class="placeholder-icon">✦</span>
                        </div>"""


def render_project_card(submission: Submission, rng=random) -> str:
    """
    Render the showcase card for an approved submission.

    Output is deterministic except for the placeholder gradient, which is drawn
    from `rng` when no image URL was supplied.

    Args:
        submission: The approved submission
        rng: Random source exposing `choice` (the `random` module by default)

    Returns:
        str: HTML fragment ready to be spliced into the projects grid
    """
    link_text, source_badge = link_style(submission.project_url or "")
    first_project_badge = FIRST_PROJECT_BADGE if submission.first_project else ""
    image_section = render_image_section(submission, rng)
    project_url = escape_html(submission.project_url or "#")
    project_name = escape_html(submission.project_name)
    author = escape_html(f"by {submission.creator_name}")

    return f"""<!-- Project Card - {project_name} (Community Submitted) -->
            <article class="project-card" data-category="{escape_html(submission.category)}">
                <a href="{project_url}" target="_blank" rel="noopener" class="card-image-link">
                    <div class="card-image">
                        {image_section}
                        {source_badge}
                    </div>
                </a>
                <div class="card-content">
                    <div class="card-meta">
                        <span class="meta-tag">{category_label(submission.category)}</span>
                        <span class="meta-dot">·</span>
                        <span class="meta-author">{author}</span>
                    </div>
                    <h3 class="card-title">{project_name}</h3>
                    <p class="card-desc">{escape_html(submission.description)}</p>
                    <div class="card-footer">{first_project_badge}
                        <a href="{project_url}" target="_blank" rel="noopener" class="card-link">{link_text}</a>
                    </div>
                </div>
            </article>"""
