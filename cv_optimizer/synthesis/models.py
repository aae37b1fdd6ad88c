from dataclasses import dataclass, field


@dataclass(frozen=True)
class CompositeInput:
    """Sanitized inputs for one analysis request."""

    cv: str
    tor: str | None = None
    competencies: str | None = None

    @property
    def has_tor(self) -> bool:
        return bool(self.tor and self.tor.strip())

    @property
    def has_competencies(self) -> bool:
        return bool(self.competencies and self.competencies.strip())


@dataclass(frozen=True)
class Suggestion:
    """An improvement recommendation tied to one CV section."""

    section: str
    suggestion: str
    suggested_copy: str | None = None
    rationale: str | None = None


@dataclass(frozen=True)
class SynthesisResult:
    """Output of one analysis run. Replaces, never merges with, earlier results."""

    improved_text: str
    suggestions: tuple[Suggestion, ...] = ()
    models_used: tuple[str, ...] = field(default_factory=tuple)
