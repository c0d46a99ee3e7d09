"""
Content shared by all interview variants.
"""

from __future__ import annotations


# Skills "extracted" from an uploaded resume. Resume parsing is simulated,
# so every technical interview is built from this list.
DEFAULT_SKILLS: tuple[str, ...] = (
    "Java",
    "JavaScript",
    "React.js",
    "Node.js",
    "SQL",
    "MongoDB",
    "Python",
    "Spring Boot",
    "REST API",
    "Git",
    "Docker",
    "AWS",
    "HTML",
    "CSS",
    "TypeScript",
    "Express.js",
)

