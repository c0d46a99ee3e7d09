"""
Technical variant plugin.
"""

from __future__ import annotations

import logging
from typing import Iterable

from interview_prep.models import InterviewType, Question
from variants.base import QUESTIONS_PER_INTERVIEW, BaseVariantPlugin, VariantUiConfig
from variants.shared_content import DEFAULT_SKILLS


logger = logging.getLogger(__name__)


def _q(id: int, question: str, category: str, difficulty: str) -> Question:
    return Question(id=id, question=question, category=category, difficulty=difficulty)


TECHNICAL_QUESTIONS: tuple[Question, ...] = (
    # Java
    _q(1, "What is Java and what are its key features?", "Java", "Easy"),
    _q(2, "Explain the difference between JDK, JRE, and JVM in Java.", "Java", "Medium"),
    _q(3, "What is Object-Oriented Programming and how does Java implement it?", "Java", "Medium"),
    # JavaScript
    _q(4, "What is JavaScript and how does it differ from Java?", "JavaScript", "Easy"),
    _q(5, "Explain closures in JavaScript with an example.", "JavaScript", "Hard"),
    _q(6, "What are Promises in JavaScript and how do they work?", "JavaScript", "Medium"),
    # React.js
    _q(7, "What is React.js and what problems does it solve?", "React.js", "Easy"),
    _q(8, "Explain the difference between state and props in React.", "React.js", "Medium"),
    _q(9, "What are React Hooks and why were they introduced?", "React.js", "Medium"),
    _q(10, "How does Virtual DOM work in React?", "React.js", "Hard"),
    # SQL
    _q(11, "What is SQL and what are its main components?", "SQL", "Easy"),
    _q(12, "Explain the difference between INNER JOIN and LEFT JOIN.", "SQL", "Medium"),
    _q(13, "What is database normalization and why is it important?", "SQL", "Hard"),
    # Node.js
    _q(
        14,
        "What is Node.js and what makes it different from traditional server-side technologies?",
        "Node.js",
        "Medium",
    ),
    _q(15, "Explain the event loop in Node.js.", "Node.js", "Hard"),
    # General programming
    _q(16, "What is the difference between synchronous and asynchronous programming?", "General", "Medium"),
    _q(17, "Explain what REST API is and its key principles.", "REST API", "Medium"),
    _q(18, "What is version control and why is Git important?", "Git", "Easy"),
    _q(19, "What is Docker and how does containerization work?", "Docker", "Hard"),
    _q(20, "Explain the basics of cloud computing and AWS services.", "AWS", "Medium"),
)


def matches_skill(question: Question, skills: Iterable[str]) -> bool:
    """True when any skill and the question category contain one another."""
    category = question.category.lower()
    return any(
        skill.lower() in category or category in skill.lower()
        for skill in skills
        if skill
    )


class TechnicalVariantPlugin(BaseVariantPlugin):
    """Skill-driven technical questions."""

    variant_id = "technical"
    interview_type = InterviewType.TECHNICAL
    display_name = "Technical Interview"
    ui = VariantUiConfig(
        title="Technical Interview",
        icon="💻",
        analyzing_message="Our AI is extracting technical skills from your resume...",
    )
    analysis_delay = 3.0
    question_bank = TECHNICAL_QUESTIONS
    keywords = (
        "algorithm",
        "data structure",
        "performance",
        "scalability",
        "testing",
        "debugging",
    )
    strength_pool = (
        "Clear technical explanation",
        "Good understanding of concepts",
        "Practical implementation details",
        "Performance considerations mentioned",
        "Best practices included",
    )
    improvement_pool = (
        "Add more specific technical details",
        "Include performance metrics",
        "Discuss edge cases and error handling",
        "Mention testing strategies",
        "Consider scalability aspects",
    )
    suggested_answer = (
        "A comprehensive technical answer should include: 1) Clear explanation of the concept, "
        "2) Practical implementation details, 3) Performance considerations, 4) Best practices, "
        "and 5) Real-world examples."
    )

    def select_questions(self, skills: Iterable[str] | None = None) -> list[Question]:
        """
        Pick questions whose category overlaps the candidate's skills.

        Falls back to the start of the bank when fewer than
        ``QUESTIONS_PER_INTERVIEW`` questions match. Question ids stay unique.
        """
        skill_list = list(skills) if skills is not None else list(DEFAULT_SKILLS)
        relevant = [q for q in self.question_bank if matches_skill(q, skill_list)]
        selected = relevant[:QUESTIONS_PER_INTERVIEW]

        if len(selected) < QUESTIONS_PER_INTERVIEW:
            chosen_ids = {q.id for q in selected}
            for question in self.question_bank:
                if len(selected) >= QUESTIONS_PER_INTERVIEW:
                    break
                if question.id not in chosen_ids:
                    selected.append(question)
                    chosen_ids.add(question.id)

        logger.debug(
            "Selected %d technical questions (%d matched %d skills)",
            len(selected),
            len(relevant),
            len(skill_list),
        )
        return selected
