"""
Managerial (executive) variant plugin.
"""

from __future__ import annotations

from interview_prep.models import InterviewType, Question
from variants.base import BaseVariantPlugin, VariantUiConfig


def _q(id: int, question: str, category: str, type: str, tip: str, level: str = "C-Level") -> Question:
    return Question(id=id, question=question, category=category, type=type, level=level, tip=tip)


MANAGERIAL_QUESTIONS: tuple[Question, ...] = (
    # Strategic leadership
    _q(
        1,
        "As a CEO/CTO, how would you develop and communicate a 5-year technology vision for a company transitioning to digital transformation?",
        "Vision & Strategy",
        "Strategic Leadership",
        "Focus on strategic thinking, stakeholder alignment, and long-term planning. Discuss how you'd balance innovation with business objectives.",
    ),
    _q(
        2,
        "Describe how you would lead an organization through a major strategic pivot. What steps would you take to ensure buy-in from all stakeholders?",
        "Change Leadership",
        "Strategic Leadership",
        "Emphasize change management, communication strategy, and stakeholder engagement. Show how you'd minimize resistance and maximize adoption.",
    ),
    _q(
        3,
        "How would you approach building and scaling a technology organization from 50 to 500 employees while maintaining culture and innovation?",
        "Organizational Growth",
        "Strategic Leadership",
        "Discuss scaling challenges, culture preservation, hiring strategies, and maintaining innovation velocity during rapid growth.",
    ),
    _q(
        4,
        "As a senior leader, how would you balance short-term business pressures with long-term strategic investments in technology and innovation?",
        "Strategic Balance",
        "Strategic Leadership",
        "Show your ability to think strategically while managing immediate business needs. Discuss ROI, risk management, and stakeholder expectations.",
    ),
    # Team management
    _q(
        5,
        "How would you build and lead a high-performing executive team? What qualities would you look for and how would you foster collaboration?",
        "Executive Team Building",
        "Team Management",
        "Focus on leadership qualities, team dynamics, diversity, and creating an environment for executive-level collaboration and decision-making.",
    ),
    _q(
        6,
        "Describe your approach to managing and developing senior leaders who may have more domain expertise than you in certain areas.",
        "Senior Leadership",
        "Team Management",
        "Demonstrate humility, emotional intelligence, and your ability to lead experts. Show how you'd leverage their expertise while providing strategic direction.",
    ),
    _q(
        7,
        "How would you handle a situation where two of your direct reports (VPs) have a fundamental disagreement that's affecting team performance?",
        "Conflict Resolution",
        "Team Management",
        "Show your conflict resolution skills, ability to mediate at senior levels, and how you'd turn conflict into productive outcomes.",
    ),
    _q(
        8,
        "What's your philosophy on delegation at the executive level? How do you ensure accountability while empowering your leadership team?",
        "Delegation & Accountability",
        "Team Management",
        "Discuss the balance between empowerment and oversight, setting clear expectations, and creating accountability systems for senior leaders.",
    ),
    # Business acumen
    _q(
        9,
        "How would you evaluate and present a major technology investment proposal to the board of directors? Walk me through your decision-making framework.",
        "Board Relations",
        "Business Acumen",
        "Show your ability to communicate with boards, present business cases, manage stakeholder expectations, and make data-driven decisions.",
    ),
    _q(
        10,
        "As a CTO, how would you work with the CEO and other C-suite executives to align technology strategy with overall business strategy?",
        "C-Suite Collaboration",
        "Business Acumen",
        "Demonstrate cross-functional leadership, strategic alignment, and your ability to translate technology into business value.",
    ),
    _q(
        11,
        "How would you approach mergers and acquisitions from a technology and people integration perspective?",
        "M&A Leadership",
        "Business Acumen",
        "Discuss due diligence, integration planning, cultural alignment, technology stack consolidation, and people management during M&A.",
    ),
    _q(
        12,
        "Describe how you would build and manage relationships with key external stakeholders including investors, partners, and major clients.",
        "Stakeholder Management",
        "Business Acumen",
        "Show your external relationship management skills, communication abilities, and how you'd represent the company at the highest levels.",
    ),
    # Executive decision making
    _q(
        13,
        "Walk me through a time when you had to make a critical decision with incomplete information and significant consequences. How did you approach it?",
        "Crisis Decision Making",
        "Executive Decision Making",
        "Demonstrate your decision-making process under pressure, risk assessment abilities, and how you'd communicate difficult decisions.",
    ),
    _q(
        14,
        "How would you handle a situation where you need to make layoffs or significant budget cuts while maintaining team morale and productivity?",
        "Difficult Decisions",
        "Executive Decision Making",
        "Show empathy, strategic thinking, communication skills, and your ability to make tough decisions while preserving organizational health.",
    ),
    _q(
        15,
        "Describe your approach to ethical decision-making when business pressures conflict with your values or company principles.",
        "Ethical Leadership",
        "Executive Decision Making",
        "Demonstrate moral leadership, principled decision-making, and how you'd navigate ethical dilemmas while considering all stakeholders.",
    ),
    # Additional strategic questions
    _q(
        16,
        "How would you lead a company through a major crisis (economic downturn, security breach, or market disruption)?",
        "Crisis Leadership",
        "Strategic Leadership",
        "Show crisis management skills, communication strategy, stakeholder management, and your ability to lead through uncertainty.",
    ),
    _q(
        17,
        "What's your approach to innovation at scale? How would you foster innovation while managing operational excellence?",
        "Innovation Leadership",
        "Strategic Leadership",
        "Discuss balancing innovation with operations, creating innovation culture, resource allocation, and measuring innovation success.",
    ),
    _q(
        18,
        "How would you approach building a diverse and inclusive leadership team, and what impact would you expect this to have on business outcomes?",
        "Diversity & Inclusion",
        "Team Management",
        "Show commitment to D&I, understanding of business benefits, and concrete strategies for building inclusive leadership teams.",
    ),
    _q(
        19,
        "Describe how you would establish and maintain a strong company culture while scaling rapidly or during remote/hybrid work transitions.",
        "Culture Leadership",
        "Team Management",
        "Discuss culture definition, communication strategies, remote leadership, and maintaining culture during organizational changes.",
    ),
    _q(
        20,
        "How would you measure and communicate your success as a CEO/CTO to different stakeholders (board, employees, customers, investors)?",
        "Performance & Communication",
        "Business Acumen",
        "Show understanding of different stakeholder needs, KPI selection, communication strategies, and accountability at the executive level.",
    ),
)


class ManagerialVariantPlugin(BaseVariantPlugin):
    """Executive-level strategy and leadership questions."""

    variant_id = "managerial"
    interview_type = InterviewType.MANAGERIAL
    display_name = "Managerial Interview"
    ui = VariantUiConfig(
        title="Managerial Interview",
        icon="👔",
        analyzing_message="Preparing executive-level questions for your leadership profile...",
        show_tips=True,
    )
    analysis_delay = 3.0
    question_bank = MANAGERIAL_QUESTIONS
    keywords = ("strategy", "vision", "stakeholder", "decision", "leadership", "impact", "business")
    structure_cues = ("strategy", "approach")
    strength_pool = (
        "Strategic thinking demonstrated",
        "Stakeholder consideration",
        "Business impact awareness",
        "Leadership approach outlined",
        "Long-term vision articulated",
    )
    improvement_pool = (
        "Provide more strategic context",
        "Discuss stakeholder impact",
        "Include business metrics",
        "Elaborate on change management",
        "Address risk considerations",
    )
    suggested_answer = (
        "A strong executive response should cover: 1) Strategic vision and approach, "
        "2) Stakeholder considerations, 3) Business impact and metrics, 4) Implementation plan, "
        "and 5) Risk management and mitigation strategies."
    )
