"""Default learning paths seeded into a fresh database."""


def _module(module_id: str, title: str, description: str, content: str) -> dict:
    """Helper to build a stored module dict."""
    return {
        "moduleId": module_id,
        "title": title,
        "description": description,
        "content": content,
    }


# ─── Web development ──────────────────────────────────────────

INTRO_WEB_DEVELOPMENT = {
    "path_id": "intro-web-development",
    "title": "Introduction to Web Development",
    "description": (
        "A beginner-friendly path to learn the fundamentals of web development, "
        "from HTML and CSS to basic JavaScript."
    ),
    "duration": "4 Weeks",
    "category": "Web Development",
    "is_locked": False,
    "modules": [
        _module(
            "intro-web-development-html-css",
            "HTML & CSS Basics",
            "Learn the building blocks of web pages, including structure and styling.",
            "HTML tags, CSS selectors and the box model.",
        ),
        _module(
            "intro-web-development-javascript",
            "JavaScript Fundamentals",
            "Get started with the language of the web to create interactive experiences.",
            "Variables, data types, functions and DOM manipulation.",
        ),
        _module(
            "intro-web-development-first-page",
            "Building a Simple Web Page",
            "Apply your knowledge to build a complete, simple web page from scratch.",
            "A step-by-step guide to creating a personal portfolio page.",
        ),
    ],
}

# ─── Design ───────────────────────────────────────────────────

UX_FOR_DEVELOPERS = {
    "path_id": "ux-for-developers",
    "title": "User Experience (UX) for Developers",
    "description": "Learn the principles of UX design to build more intuitive and user-friendly applications.",
    "duration": "3 Weeks",
    "category": "Design",
    "is_locked": False,
    "modules": [
        _module(
            "ux-for-developers-principles",
            "Intro to UX Principles",
            "Understand core UX concepts like usability, accessibility, and user-centered design.",
            "Usability heuristics, accessibility guidelines and user-centered design.",
        ),
        _module(
            "ux-for-developers-research",
            "User Research and Personas",
            "Find out who your users are and what they need.",
            "Interviews, surveys and turning findings into personas.",
        ),
    ],
}

# ─── Collaboration ────────────────────────────────────────────

OPEN_COLLABORATION = {
    "path_id": "open-collaboration",
    "title": "Running an Open Collaborative Project",
    "description": "How to lead a project in the open: roles, governance splits and keeping contributors engaged.",
    "duration": "2 Weeks",
    "category": "Community",
    "is_locked": True,
    "modules": [
        _module(
            "open-collaboration-roles",
            "Leads, Contributors and Participants",
            "What each project role is responsible for.",
            "Defining roles and reviewing role applications.",
        ),
        _module(
            "open-collaboration-governance",
            "Sharing Value Fairly",
            "Set up a governance split between contributors, community and sustainability.",
            "Choosing shares that add up to 100% and revisiting them as the project grows.",
        ),
    ],
}

DEFAULT_LEARNING_PATHS = [INTRO_WEB_DEVELOPMENT, UX_FOR_DEVELOPERS, OPEN_COLLABORATION]


async def seed_default_learning_paths(session) -> int:
    """Seed default learning paths (idempotent).

    Returns the number of paths created (0 if already exist).
    """
    from projecthub.repositories.learning_repo import LearningPathRepository

    repo = LearningPathRepository(session)
    created = 0

    for path_def in DEFAULT_LEARNING_PATHS:
        existing = await repo.get(path_def["path_id"])
        if not existing:
            await repo.create(**{**path_def, "modules": [dict(m) for m in path_def["modules"]]})
            created += 1

    return created
