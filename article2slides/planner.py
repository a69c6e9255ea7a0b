from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .headings import DEFAULT_RULES, HeadingRules
from .labels import ARABIC_LABELS, Labels
from .segmenter import Section, SectionSegmenter
from .sentences import parse_sentences, simplify_sentence
from .utils import non_empty_lines


MAX_OUTLINE_BULLETS = 6
MAX_CONTENT_BULLETS = 5
MAX_RAW_LINE_BULLETS = 3
MAX_TAKEAWAYS = 5
MAX_SUMMARY_BULLETS = 4


@dataclass(frozen=True)
class Slide:
    title: str
    bullets: Tuple[str, ...] = ()
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "bullets", tuple(self.bullets))

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "bullets": list(self.bullets), "notes": self.notes}


@dataclass(frozen=True)
class DeckInputs:
    """
    The raw strings supplied by the user. Any of them may be blank.
    """

    title: str = ""
    presenter: str = ""
    event_name: str = ""
    article_text: str = ""
    key_takeaways: str = ""


def presentation_name(title: str, labels: Labels = ARABIC_LABELS) -> str:
    return title.strip() or labels.presentation_title


class SlidePlanner:
    """
    Turn an article plus light metadata into an ordered list of slides:

    opening, outline (if any section), one slide per section, conclusion
    (explicit takeaways or a synthesized summary, if any), closing.

    Planning is a pure function of its inputs; call it as often as you like.
    """

    def __init__(self, labels: Labels = ARABIC_LABELS, rules: HeadingRules = DEFAULT_RULES) -> None:
        self.labels = labels
        self.segmenter = SectionSegmenter(labels=labels, rules=rules)

    def plan_slides(self, inputs: DeckInputs) -> List[Slide]:
        sections = self.segmenter.segment(inputs.article_text)

        slides: List[Slide] = [self._opening_slide(inputs)]
        if sections:
            slides.append(self._outline_slide(sections))
        slides.extend(self._content_slide(section) for section in sections)

        conclusion = self._conclusion_slide(sections, inputs.key_takeaways)
        if conclusion is not None:
            slides.append(conclusion)

        slides.append(self._closing_slide())
        return slides

    def _opening_slide(self, inputs: DeckInputs) -> Slide:
        labels = self.labels
        presenter = inputs.presenter.strip()
        bullets = [
            inputs.event_name.strip() or labels.event_name,
            labels.prepared_by.format(name=presenter) if presenter else "",
        ]
        return Slide(
            title=presentation_name(inputs.title, labels),
            bullets=[b for b in bullets if b],
            notes=labels.opening_note,
        )

    def _outline_slide(self, sections: List[Section]) -> Slide:
        return Slide(
            title=self.labels.outline,
            bullets=[s.title for s in sections][:MAX_OUTLINE_BULLETS],
            notes=self.labels.outline_note,
        )

    def _content_slide(self, section: Section) -> Slide:
        sentences = parse_sentences(section.content)
        bullets = [simplify_sentence(s) for s in sentences[:MAX_CONTENT_BULLETS]]
        if not bullets and section.content:
            bullets = list(section.content[:MAX_RAW_LINE_BULLETS])
        return Slide(
            title=section.title,
            bullets=bullets or [self.labels.section_placeholder],
            notes=self.labels.content_note,
        )

    def _conclusion_slide(self, sections: List[Section], key_takeaways: str) -> Optional[Slide]:
        labels = self.labels
        if key_takeaways.strip():
            return Slide(
                title=labels.conclusion,
                bullets=non_empty_lines(key_takeaways)[:MAX_TAKEAWAYS],
                notes=labels.takeaways_note,
            )

        main_points: List[str] = []
        for section in sections:
            sentences = parse_sentences(section.content)
            if sentences:
                main_points.append(sentences[0])
        if not main_points:
            return None
        return Slide(
            title=labels.conclusion,
            bullets=[simplify_sentence(s) for s in main_points[:MAX_SUMMARY_BULLETS]],
            notes=labels.summary_note,
        )

    def _closing_slide(self) -> Slide:
        return Slide(
            title=self.labels.thanks,
            bullets=[self.labels.questions],
            notes=self.labels.closing_note,
        )


def build_slides(
    *,
    title: str = "",
    presenter: str = "",
    event_name: str = "",
    article_text: str = "",
    key_takeaways: str = "",
    labels: Labels = ARABIC_LABELS,
    rules: HeadingRules = DEFAULT_RULES,
) -> List[Slide]:
    inputs = DeckInputs(
        title=title,
        presenter=presenter,
        event_name=event_name,
        article_text=article_text,
        key_takeaways=key_takeaways,
    )
    return SlidePlanner(labels=labels, rules=rules).plan_slides(inputs)
