"""
Article2Slides - Turn a pasted academic article into slides.

This package provides the core building blocks:

- HeadingClassifier: decide whether a line looks like a section heading
- SectionSegmenter: split article text into titled sections
- SlidePlanner: plan the deck (opening, outline, sections, conclusion, closing)
- SlideGenerator: export the deck as pptx / markdown / json / preview text
"""

from .generator import ExportError, SlideGenerator
from .headings import HeadingClassifier, HeadingRules
from .labels import ARABIC_LABELS, ENGLISH_LABELS, Labels, get_labels
from .planner import DeckInputs, Slide, SlidePlanner, build_slides
from .segmenter import Section, SectionSegmenter

__all__ = [
    "HeadingClassifier",
    "HeadingRules",
    "SectionSegmenter",
    "Section",
    "SlidePlanner",
    "Slide",
    "DeckInputs",
    "build_slides",
    "SlideGenerator",
    "ExportError",
    "Labels",
    "ARABIC_LABELS",
    "ENGLISH_LABELS",
    "get_labels",
]
