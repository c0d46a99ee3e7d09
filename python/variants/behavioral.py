"""
Behavioral variant plugin.
"""

from __future__ import annotations

from interview_prep.models import InterviewType, Question
from variants.base import BaseVariantPlugin, VariantUiConfig


def _q(id: int, question: str, category: str, type: str, tip: str) -> Question:
    return Question(id=id, question=question, category=category, type=type, tip=tip)


BEHAVIORAL_QUESTIONS: tuple[Question, ...] = (
    # Soft skills
    _q(
        1,
        "Tell me about a time when you had to work with a difficult team member. How did you handle the situation?",
        "Teamwork",
        "Soft Skills",
        "Use the STAR method: Situation, Task, Action, Result. Focus on your communication and conflict resolution skills.",
    ),
    _q(
        2,
        "Describe a situation where you had to communicate complex technical information to non-technical stakeholders.",
        "Communication",
        "Soft Skills",
        "Highlight your ability to simplify complex concepts and adapt your communication style to your audience.",
    ),
    _q(
        3,
        "Give me an example of a time when you had to learn a new skill quickly to complete a project.",
        "Adaptability",
        "Soft Skills",
        "Show your learning agility and how you approach acquiring new knowledge under pressure.",
    ),
    _q(
        4,
        "Tell me about a time when you had to give constructive feedback to a colleague or team member.",
        "Communication",
        "Soft Skills",
        "Demonstrate your emotional intelligence and ability to provide feedback diplomatically.",
    ),
    _q(
        5,
        "Describe a situation where you had to manage multiple priorities with tight deadlines.",
        "Time Management",
        "Soft Skills",
        "Show your organizational skills and ability to prioritize effectively under pressure.",
    ),
    # Project experience
    _q(
        6,
        "Walk me through a challenging project you worked on. What made it challenging and how did you overcome those challenges?",
        "Project Management",
        "Project Experience",
        "Choose a project that showcases your problem-solving abilities and technical skills.",
    ),
    _q(
        7,
        "Tell me about a project where you had to work with limited resources or budget constraints.",
        "Resource Management",
        "Project Experience",
        "Highlight your creativity and ability to deliver results despite limitations.",
    ),
    _q(
        8,
        "Describe a project that didn't go as planned. What went wrong and what did you learn from it?",
        "Failure & Learning",
        "Project Experience",
        "Show accountability, learning mindset, and how you apply lessons learned to future projects.",
    ),
    _q(
        9,
        "Tell me about a time when you had to collaborate with cross-functional teams on a project.",
        "Collaboration",
        "Project Experience",
        "Demonstrate your ability to work across different departments and coordinate diverse skill sets.",
    ),
    _q(
        10,
        "Describe a project where you had to implement a solution that improved efficiency or solved a business problem.",
        "Innovation",
        "Project Experience",
        "Focus on the business impact and measurable results of your solution.",
    ),
    # Leadership
    _q(
        11,
        "Tell me about a time when you had to lead a team or take initiative on a project without being formally assigned as the leader.",
        "Leadership",
        "Leadership",
        "Show your natural leadership qualities and ability to influence without authority.",
    ),
    _q(
        12,
        "Describe a situation where you had to motivate a team member who was underperforming or disengaged.",
        "Team Management",
        "Leadership",
        "Demonstrate your coaching abilities and emotional intelligence in handling team dynamics.",
    ),
    _q(
        13,
        "Give me an example of a time when you had to make a difficult decision that affected your team or project.",
        "Decision Making",
        "Leadership",
        "Show your decision-making process and how you consider the impact on all stakeholders.",
    ),
    # Problem solving
    _q(
        14,
        "Tell me about a time when you identified a problem that others had overlooked. How did you approach solving it?",
        "Critical Thinking",
        "Problem Solving",
        "Highlight your analytical skills and proactive approach to identifying issues.",
    ),
    _q(
        15,
        "Describe a situation where you had to solve a problem with incomplete information or unclear requirements.",
        "Analytical Thinking",
        "Problem Solving",
        "Show how you gather information, make assumptions, and validate your approach.",
    ),
    _q(
        16,
        "Tell me about a time when you had to think outside the box to solve a challenging problem.",
        "Creative Problem Solving",
        "Problem Solving",
        "Demonstrate your creativity and ability to find innovative solutions.",
    ),
    _q(
        17,
        "Describe a situation where you had to handle a crisis or urgent problem under pressure.",
        "Crisis Management",
        "Problem Solving",
        "Show your ability to stay calm, think clearly, and take decisive action under pressure.",
    ),
    # Additional soft skills
    _q(
        18,
        "Tell me about a time when you had to adapt to a significant change in your work environment or project requirements.",
        "Change Management",
        "Soft Skills",
        "Demonstrate your flexibility and positive attitude toward change.",
    ),
    _q(
        19,
        "Describe a situation where you went above and beyond what was expected of you.",
        "Initiative",
        "Soft Skills",
        "Show your proactive nature and commitment to excellence.",
    ),
    _q(
        20,
        "Tell me about a time when you had to build relationships with new stakeholders or clients.",
        "Relationship Building",
        "Soft Skills",
        "Highlight your interpersonal skills and ability to establish trust and rapport.",
    ),
)


class BehavioralVariantPlugin(BaseVariantPlugin):
    """STAR-method behavioral questions with answering tips."""

    variant_id = "behavioral"
    interview_type = InterviewType.BEHAVIORAL
    display_name = "Behavioral Interview"
    ui = VariantUiConfig(
        title="Behavioral Interview",
        icon="🤝",
        analyzing_message="Preparing behavioral questions based on your experience...",
        show_tips=True,
    )
    analysis_delay = 2.5
    question_bank = BEHAVIORAL_QUESTIONS
    keywords = ("situation", "task", "action", "result", "team", "challenge", "learned")
    structure_cues = ("situation", "example")
    strength_pool = (
        "Clear situation description",
        "Good use of STAR method",
        "Demonstrates leadership skills",
        "Shows problem-solving ability",
        "Reflects on lessons learned",
    )
    improvement_pool = (
        "Use more specific examples",
        "Quantify results and impact",
        "Elaborate on lessons learned",
        "Describe team dynamics better",
        "Include more context about challenges",
    )
    suggested_answer = (
        "An effective behavioral answer should follow the STAR method: 1) Situation - provide context, "
        "2) Task - explain your responsibility, 3) Action - describe what you did, "
        "4) Result - share the outcome and lessons learned."
    )
