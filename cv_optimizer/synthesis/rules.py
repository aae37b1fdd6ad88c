"""Ordered rule tables for the offline CV synthesizer.

Every table is a tuple of rules evaluated top to bottom against the request
``Signals``. Suggestion and default-section tables are first-match; summary
addenda apply every matching rule in order.
"""

from collections.abc import Callable
from dataclasses import dataclass

from cv_optimizer.synthesis import sections
from cv_optimizer.synthesis.models import CompositeInput

FINANCE = "finance"
POST_ISSUANCE = "post_issuance"
AUDIT = "audit"
CLIMATE = "climate"

KEYWORD_CLUSTERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (FINANCE, ("finance", "financial", "banking", "investment", "accounting", "fiscal")),
    (POST_ISSUANCE, ("post-issuance", "post issuance")),
    (AUDIT, ("audit", "compliance", "regulatory")),
    (CLIMATE, ("climate", "carbon", "resilience", "adaptation", "green bond", "blue economy")),
)


@dataclass(frozen=True)
class Signals:
    """What keyword inspection found in one request."""

    has_tor: bool
    has_competencies: bool
    clusters: frozenset[str] = frozenset()

    def has(self, cluster: str) -> bool:
        return cluster in self.clusters


Predicate = Callable[[Signals], bool]


def detect_signals(composite: CompositeInput) -> Signals:
    """Inspect the TOR when present, otherwise the CV and competencies."""
    if composite.has_tor:
        source = composite.tor or ""
    else:
        source = f"{composite.cv}\n{composite.competencies or ''}"
    lowered = source.lower()
    clusters = frozenset(
        name for name, keywords in KEYWORD_CLUSTERS if any(k in lowered for k in keywords)
    )
    return Signals(
        has_tor=composite.has_tor,
        has_competencies=composite.has_competencies,
        clusters=clusters,
    )


def _always(_: Signals) -> bool:
    return True


def _with_tor(signals: Signals) -> bool:
    return signals.has_tor


def _without_tor(signals: Signals) -> bool:
    return not signals.has_tor


def _tor_and(cluster: str) -> Predicate:
    return lambda signals: signals.has_tor and signals.has(cluster)


def _with_competencies(signals: Signals) -> bool:
    return signals.has_competencies


# ----------------------------------------------------------------------
# Suggestions
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class SuggestionRule:
    applies: Predicate
    suggestion: str
    suggested_copy: str | None = None
    rationale: str | None = None


SECTION_SUGGESTION_RULES: tuple[tuple[str, tuple[SuggestionRule, ...]], ...] = (
    ("Professional Summary", (
        SuggestionRule(
            _tor_and(FINANCE),
            "Align your professional summary with the TOR requirements, highlighting "
            "specific expertise in financial analysis and regulatory review.",
            suggested_copy=(
                "Finance professional with a record of rigorous financial analysis and "
                "regulatory review for multilateral and private-sector clients."
            ),
            rationale="The Terms of Reference centre on financial analysis and review work.",
        ),
        SuggestionRule(
            _tor_and(CLIMATE),
            "Open your summary with your climate finance track record and the "
            "resilience outcomes the TOR is looking for.",
            suggested_copy=(
                "Climate finance specialist who has helped governments and funds "
                "design bankable adaptation and resilience projects."
            ),
            rationale="The Terms of Reference prioritise climate finance and resilience expertise.",
        ),
        SuggestionRule(
            _with_tor,
            "Align your professional summary with the TOR requirements and name the "
            "expertise the assignment asks for in the first sentence.",
            rationale="Reviewers screen summaries against the Terms of Reference first.",
        ),
        SuggestionRule(
            _always,
            "Add quantifiable achievements to highlight your impact. Include specific "
            "metrics that demonstrate your expertise and the value you've brought to "
            "previous roles.",
            suggested_copy=(
                "Professional with 8+ years of experience who delivered a 20% efficiency "
                "gain across a portfolio of 12 projects."
            ),
        ),
    )),
    ("Experience", (
        SuggestionRule(
            _tor_and(POST_ISSUANCE),
            "Emphasize experience related to post-issuance reviews, financial auditing "
            "and compliance checks mentioned in the TOR.",
            suggested_copy=(
                "- Conducted post-issuance reviews for 15 bond issuances, confirming "
                "compliance with allocation and reporting commitments"
            ),
            rationale="Post-issuance review is the core deliverable in the Terms of Reference.",
        ),
        SuggestionRule(
            _tor_and(AUDIT),
            "Emphasize experience related to financial auditing and compliance review "
            "mentioned in the TOR.",
            suggested_copy=(
                "- Led compliance reviews of financial documentation and reported findings "
                "to senior management and regulators"
            ),
            rationale="The Terms of Reference ask for demonstrated audit and compliance work.",
        ),
        SuggestionRule(
            _with_tor,
            "Reorder your roles so the experience closest to the TOR scope of work comes "
            "first, and describe it in the TOR's own vocabulary.",
            rationale="Evaluators score experience against the scope of work in the Terms of Reference.",
        ),
        SuggestionRule(
            _always,
            "Include specific metrics and outcomes for each role. Quantify your "
            "achievements with percentages, dollar amounts, or other measurable results.",
            suggested_copy=(
                "- Led a team of 4 on a cost reduction project, resulting in $2.5M annual savings"
            ),
        ),
    )),
    ("Skills", (
        SuggestionRule(
            _tor_and(FINANCE),
            "Highlight skills in financial analysis, regulatory compliance, and audit "
            "methodologies that match the TOR requirements.",
            suggested_copy="- Financial Analysis and Reporting\n- Financial Regulatory Compliance",
            rationale="Matching the TOR's skill vocabulary helps screening against its qualifications.",
        ),
        SuggestionRule(
            _tor_and(CLIMATE),
            "List climate finance instruments and frameworks you have worked with, "
            "using the terms that appear in the TOR.",
            suggested_copy="- Climate Finance & Policy Development\n- Blended Finance Structuring",
            rationale="The Terms of Reference name specific climate finance competencies.",
        ),
        SuggestionRule(
            _with_tor,
            "Put the skills the TOR lists as required at the top of your skills section.",
            rationale="Required qualifications in the Terms of Reference are checked first.",
        ),
        SuggestionRule(
            _always,
            "Organize your skills into categories (technical, soft skills, domain "
            "expertise) and prioritize those most relevant to your target positions.",
        ),
    )),
    ("Education", (
        SuggestionRule(
            _tor_and(FINANCE),
            "Emphasize qualifications relevant to financial review and compliance as "
            "specified in the TOR.",
            rationale="The Terms of Reference set minimum academic qualifications in finance.",
        ),
        SuggestionRule(
            _with_tor,
            "Emphasize the degrees and certifications the TOR lists as required.",
            rationale="Academic requirements in the Terms of Reference are usually pass/fail.",
        ),
        SuggestionRule(
            _always,
            "Include relevant coursework, research projects, or thesis topics that align "
            "with your career goals and demonstrate specialized knowledge.",
        ),
    )),
)


@dataclass(frozen=True)
class ExtraSuggestionRule:
    applies: Predicate
    section: str
    suggestion: str


EXTRA_SUGGESTION_RULES: tuple[ExtraSuggestionRule, ...] = (
    ExtraSuggestionRule(
        _with_tor,
        "TOR Alignment",
        "Add a section that explicitly addresses how your experience meets the "
        "specific requirements outlined in the Terms of Reference.",
    ),
    ExtraSuggestionRule(
        _without_tor,
        "Project Highlights",
        "Add a dedicated section for 2-3 signature projects with detailed outcomes and "
        "your specific contributions to each.",
    ),
    ExtraSuggestionRule(
        _with_competencies,
        "Additional Competencies",
        "Highlight the additional competencies you've provided throughout your CV, "
        "especially in your professional summary and experience sections.",
    ),
)


def model_suggestion_text(model_id: str) -> str:
    return (
        f"Based on {model_id} analysis: Consider restructuring your experience section "
        "to highlight leadership roles and strategic initiatives more prominently."
    )


# ----------------------------------------------------------------------
# Summary addenda
# ----------------------------------------------------------------------


SUMMARY_ADDENDA: tuple[tuple[Predicate, str], ...] = (
    (_tor_and(FINANCE), "Specialized expertise in financial analysis and regulatory frameworks."),
    (_tor_and(POST_ISSUANCE), "Experienced in post-issuance review processes and compliance requirements."),
    (
        _tor_and(AUDIT),
        "Skilled in conducting thorough assessments and delivering detailed reports "
        "aligned with industry standards.",
    ),
    (_tor_and(CLIMATE), "Proven track record in climate finance and resilience planning."),
)


# ----------------------------------------------------------------------
# Default section content
# ----------------------------------------------------------------------

Template = Callable[[Signals], str]


def _pick(signals: Signals, cluster: str, matched: str, fallback: str) -> str:
    return matched if signals.has(cluster) else fallback


def _tailored_experience(s: Signals) -> str:
    return "\n".join([
        "### Technical Consultant | Independent Practice | Current",
        "- " + _pick(
            s, POST_ISSUANCE,
            "Conducted comprehensive reviews for multiple projects, ensuring compliance with regulatory standards",
            "Led strategic initiatives for multiple high-profile projects, ensuring successful outcomes",
        ),
        "- " + _pick(
            s, AUDIT,
            "Performed detailed documentation reviews and identified potential compliance issues",
            "Analyzed complex requirements and identified potential optimization opportunities",
        ),
        "- " + _pick(
            s, FINANCE,
            "Developed standardized methodologies that improved efficiency and increased detection of compliance issues",
            "Developed standardized frameworks that improved project efficiency and quality",
        ),
        "- Collaborated with stakeholders to ensure alignment with evolving requirements",
        "",
        "### Previous Experience",
        "- " + _pick(
            s, FINANCE,
            "Performed detailed reviews of documentation for compliance with industry regulations",
            "Delivered comprehensive analysis of project requirements and implementation strategies",
        ),
        "- Prepared detailed reports with findings and recommendations",
        "- Advised clients on best practices for maintaining compliance with regulations",
    ])


def _generic_experience(_: Signals) -> str:
    return "\n".join([
        "### Senior Professional | Current Organization | Current",
        "- Led strategic initiatives resulting in significant improvements to operational efficiency",
        "- Managed cross-functional teams to deliver complex projects on time and within budget",
        "- Developed and implemented innovative solutions to address business challenges",
        "",
        "### Previous Role | Previous Organization | Past",
        "- Executed key responsibilities with a focus on quality and attention to detail",
        "- Identified opportunities for process improvement and implemented solutions",
    ])


def _tailored_education(_: Signals) -> str:
    return "- Advanced Degree in relevant field\n- Professional certifications in specialized areas"


def _generic_education(_: Signals) -> str:
    return "\n".join([
        "- Advanced Degree | University Name | Year",
        "- Undergraduate Degree | University Name | Year",
        "- Relevant Certifications and Professional Development",
    ])


def _tailored_skills(s: Signals) -> str:
    return "\n".join([
        "- " + _pick(s, POST_ISSUANCE, "Post-Issuance Review Methodologies", "Project Review Methodologies"),
        "- " + _pick(s, FINANCE, "Financial Regulatory Compliance", "Regulatory Compliance"),
        "- " + _pick(s, AUDIT, "Audit Procedures and Documentation", "Documentation and Reporting"),
        "- " + _pick(s, CLIMATE, "Climate Finance & Policy Development", "Risk Assessment and Mitigation"),
        "- Stakeholder Communication and Reporting",
        "- Project Management and Implementation",
    ])


def _generic_skills(_: Signals) -> str:
    return "\n".join([
        "- Strategic Planning and Analysis",
        "- Project Management and Implementation",
        "- Team Leadership and Collaboration",
        "- Stakeholder Engagement and Communication",
        "- Problem Solving and Decision Making",
    ])


def _tailored_projects(s: Signals) -> str:
    return "\n".join([
        "### " + _pick(s, CLIMATE, "Climate Finance Initiative", "Comprehensive Review Framework"),
        "- " + _pick(
            s, CLIMATE,
            "Designed and implemented financing mechanisms for climate resilience",
            "Developed a structured framework for conducting thorough reviews",
        ),
        "- Implemented the approach across multiple client engagements with measurable results",
        "",
        "### Training and Knowledge Transfer",
        "- Created and delivered training on requirements and methodologies",
        "- Programs adopted by multiple organizations as part of their protocols",
    ])


DEFAULT_SUMMARY = (
    "Experienced professional with a proven track record of delivering results. "
    "Skilled in strategic planning, project management, and stakeholder engagement."
)

DEFAULT_SECTION_RULES: dict[str, tuple[tuple[Predicate, Template], ...]] = {
    sections.SUMMARY: ((_always, lambda _: DEFAULT_SUMMARY),),
    sections.EXPERIENCE: ((_with_tor, _tailored_experience), (_always, _generic_experience)),
    sections.EDUCATION: ((_with_tor, _tailored_education), (_always, _generic_education)),
    sections.SKILLS: ((_with_tor, _tailored_skills), (_always, _generic_skills)),
    sections.PROJECTS: ((_with_tor, _tailored_projects),),
}


def default_section(key: str, signals: Signals) -> str | None:
    """Filler for a section absent from the CV, or None when it is optional."""
    for applies, template in DEFAULT_SECTION_RULES.get(key, ()):
        if applies(signals):
            return template(signals)
    return None
