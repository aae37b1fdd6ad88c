"""Splits a Markdown CV into its title, preamble and named sections."""

import re
from dataclasses import dataclass, field

SUMMARY = "summary"
EXPERIENCE = "experience"
EDUCATION = "education"
SKILLS = "skills"
PROJECTS = "projects"

_SECTION_SYNONYMS: dict[str, frozenset[str]] = {
    SUMMARY: frozenset({
        "summary", "professional summary", "career summary", "executive summary",
        "profile", "professional profile", "personal profile", "about me",
    }),
    EXPERIENCE: frozenset({
        "experience", "professional experience", "work experience",
        "relevant experience", "employment", "employment history",
        "work history", "career history",
    }),
    EDUCATION: frozenset({
        "education", "education & training", "academic background",
        "qualification", "academic qualification",
    }),
    SKILLS: frozenset({
        "skill", "skill & certification", "key skill", "technical skill",
        "core competency", "core competence", "competency", "certification",
    }),
    PROJECTS: frozenset({
        "project", "notable project", "key project", "relevant project",
        "selected project", "project highlight",
    }),
}

_SECTION_HEADING_RE = re.compile(r"^#{1,2} ")


@dataclass(frozen=True)
class CvSection:
    heading: str
    key: str | None
    body: str


@dataclass(frozen=True)
class ParsedCv:
    title: str | None
    preamble: str
    sections: tuple[CvSection, ...] = field(default_factory=tuple)

    def body_of(self, key: str) -> str:
        """Body of every section with this key, joined in input order."""
        bodies = [s.body for s in self.sections if s.key == key and s.body]
        return "\n\n".join(bodies)

    def unmatched(self) -> tuple[CvSection, ...]:
        return tuple(s for s in self.sections if s.key is None)


def classify_heading(heading: str) -> str | None:
    """Map a heading such as ``Professional Experience`` to a section key."""
    normalized = _normalize_heading(heading)
    for key, synonyms in _SECTION_SYNONYMS.items():
        if normalized in synonyms:
            return key
    return None


def parse_cv(text: str) -> ParsedCv:
    """Parse CV Markdown.

    The first ``# `` line becomes the title. Every later ``# `` or ``## `` line
    opens a section; ``###`` sub-headings stay inside their section's body.
    """
    title: str | None = None
    preamble: list[str] = []
    sections: list[tuple[str, list[str]]] = []

    for line in text.split("\n"):
        if _SECTION_HEADING_RE.match(line):
            heading = line.lstrip("#").strip()
            if title is None and not sections and line.startswith("# "):
                title = heading
                continue
            sections.append((heading, []))
        elif sections:
            sections[-1][1].append(line)
        else:
            preamble.append(line)

    return ParsedCv(
        title=title,
        preamble=_trim_blank_lines(preamble),
        sections=tuple(
            CvSection(heading=h, key=classify_heading(h), body=_trim_blank_lines(lines))
            for h, lines in sections
        ),
    )


def _normalize_heading(heading: str) -> str:
    words = heading.strip().rstrip(":").lower().replace(" and ", " & ").split()
    return " ".join(_singular(word) for word in words)


def _singular(word: str) -> str:
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word


def _trim_blank_lines(lines: list[str]) -> str:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end])
