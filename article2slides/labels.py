"""
Default labels and keyword tables for Article2Slides.

All user-visible strings (slide titles, speaker notes, preview texts) and the
heading keyword set are centralized here so that users can easily localize the
output without touching core logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


HEADING_KEYWORDS: Tuple[str, ...] = (
    "introduction",
    "background",
    "objective",
    "aim",
    "method",
    "methodology",
    "approach",
    "results",
    "findings",
    "discussion",
    "analysis",
    "conclusion",
    "recommendation",
    "abstract",
    "summary",
    "problem",
    "framework",
    "evaluation",
    "future work",
    "limitations",
    "references",
    "مقدمة",
    "خلفية",
    "الأهداف",
    "غاية",
    "منهجية",
    "المنهج",
    "طرق",
    "نتائج",
    "خلاصات",
    "نقاش",
    "تحليل",
    "توصيات",
    "خاتمة",
    "استنتاج",
    "مراجع",
    "محور",
    "ملخص",
)


@dataclass(frozen=True)
class Labels:
    """
    Every default string the deck builder and the preview renderer emit.

    `prepared_by`, `slide_count`, `bullet_count` and `speaker_note` are
    format templates (`{name}`, `{count}`, `{notes}`).
    """

    overview: str
    outline: str
    conclusion: str
    thanks: str
    presentation_title: str
    event_name: str
    prepared_by: str
    section_placeholder: str
    questions: str

    opening_note: str
    outline_note: str
    content_note: str
    takeaways_note: str
    summary_note: str
    closing_note: str

    slide_count: str
    no_slides: str
    bullet_count: str
    speaker_note: str


ARABIC_LABELS = Labels(
    overview="نظرة عامة",
    outline="محاور العرض",
    conclusion="الخلاصات",
    thanks="شكراً لحسن الإصغاء",
    presentation_title="عرض علمي",
    event_name="ملتقى علمي",
    prepared_by="إعداد: {name}",
    section_placeholder="(تفاصيل المحور)",
    questions="نرحب بالأسئلة والملاحظات",
    opening_note="شريحة افتتاحية تعرف بالموضوع والمشارك",
    outline_note="عرض سريع لمحاور المداخلة",
    content_note="راجع التفاصيل الدقيقة المذكورة في الورقة",
    takeaways_note="أبرز الخلاصات المقترحة من مقدم العرض",
    summary_note="خلاصة سريعة لأهم النقاط",
    closing_note="شريحة ختامية للتفاعل مع الجمهور",
    slide_count="{count} شريحة",
    no_slides="لا توجد شرائح بعد",
    bullet_count="{count} نقاط",
    speaker_note="ملاحظة للمتحدث: {notes}",
)


ENGLISH_LABELS = Labels(
    overview="Overview",
    outline="Outline",
    conclusion="Key Takeaways",
    thanks="Thank you for your attention",
    presentation_title="Scientific Presentation",
    event_name="Scientific Forum",
    prepared_by="Prepared by: {name}",
    section_placeholder="(section details)",
    questions="Questions and comments are welcome",
    opening_note="Opening slide introducing the topic and the presenter",
    outline_note="Quick preview of the structure of the talk",
    content_note="Check the exact details reported in the paper",
    takeaways_note="Highlights chosen by the presenter",
    summary_note="Quick summary of the main points",
    closing_note="Closing slide for audience interaction",
    slide_count="{count} slides",
    no_slides="No slides yet",
    bullet_count="{count} points",
    speaker_note="Speaker note: {notes}",
)


LABEL_SETS: Dict[str, Labels] = {
    "ar": ARABIC_LABELS,
    "en": ENGLISH_LABELS,
}


def get_labels(lang: str = "ar") -> Labels:
    """
    Return the label set for a language code ("ar" or "en").
    """
    try:
        return LABEL_SETS[lang.strip().lower()]
    except KeyError:
        raise ValueError(f"Unsupported language {lang!r}; expected one of: {', '.join(LABEL_SETS)}") from None
