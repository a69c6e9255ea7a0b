from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Union

from .labels import ARABIC_LABELS, Labels
from .planner import Slide


BULLET_GLYPH = "•"
PPTX_EXTENSION = ".pptx"
UNSAFE_FILENAME_RE = re.compile(r'[\\/:*?"<>|\x00-\x1f]')
DEFAULT_FILE_STEM = "presentation"


class ExportError(RuntimeError):
    """Raised when a deck cannot be written to disk."""


def safe_file_stem(name: str) -> str:
    """
    Turn a presentation name into a single file name component.

    Path separators and characters not allowed in file names become "_",
    and leading dots are dropped so the name can't climb out of `out_dir`.
    """
    stem = UNSAFE_FILENAME_RE.sub("_", name).strip().lstrip(".").strip()
    return stem or DEFAULT_FILE_STEM


class SlideGenerator:
    """
    Generate markdown / json / preview text and pptx files from a planned deck.

    Exporting never modifies the slides, so a failed export can simply be
    retried with the same deck.
    """

    def to_markdown(self, slides: List[Slide]) -> str:
        """
        Convert slides into markdown slides separated by `---`.
        Speaker notes are kept as HTML comments (Marp presenter notes).
        """
        parts: list[str] = []
        for idx, slide in enumerate(slides):
            title = slide.title.strip() or f"Slide {idx + 1}"

            lines: list[str] = []
            lines.append(f"# {title}")
            lines.append("")
            for b in slide.bullets:
                text = b.strip()
                if not text:
                    continue
                lines.append(f"- {text}")
            if slide.notes:
                lines.append("")
                lines.append(f"<!-- {slide.notes} -->")
            parts.append("\n".join(lines).strip())

        return "\n\n---\n\n".join(parts) + "\n"

    def to_markdown_with_front_matter(
        self,
        slides: List[Slide],
        *,
        title: str = "Article2Slides",
        author: str = "",
        theme: str = "default",
        engine: str = "marp",
    ) -> str:
        """
        Markdown slides with YAML front matter.

        - engine="marp": add Marp-compatible fields (marp:true, paginate:true)
        - engine="plain": generic YAML only
        """
        meta_lines = ["---"]
        if engine == "marp":
            meta_lines.append("marp: true")
            meta_lines.append("paginate: true")
        meta_lines.append(f"title: {json.dumps(title, ensure_ascii=False)}")
        if author:
            meta_lines.append(f"author: {json.dumps(author, ensure_ascii=False)}")
        if theme:
            meta_lines.append(f"theme: {json.dumps(theme, ensure_ascii=False)}")
        generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")
        meta_lines.append(f'generated_at: "{generated_at}"')
        meta_lines.append("---")
        meta = "\n".join(meta_lines) + "\n\n"
        return meta + self.to_markdown(slides)

    def to_json(self, slides: List[Slide]) -> str:
        return json.dumps([s.to_dict() for s in slides], ensure_ascii=False, indent=2) + "\n"

    def to_preview(self, slides: List[Slide], labels: Labels = ARABIC_LABELS) -> str:
        """
        Plain-text preview: slide count, then every slide with its bullets and
        speaker note.
        """
        if not slides:
            return labels.no_slides + "\n"

        lines: list[str] = [labels.slide_count.format(count=len(slides)), ""]
        for idx, slide in enumerate(slides):
            count = labels.bullet_count.format(count=len(slide.bullets))
            lines.append(f"{idx + 1}. {slide.title} ({count})")
            for b in slide.bullets:
                lines.append(f"  - {b}")
            if slide.notes:
                lines.append("  " + labels.speaker_note.format(notes=slide.notes))
            lines.append("")
        return "\n".join(lines)

    def to_pptx(self, slides: List[Slide], name: str, out_dir: Union[str, Path] = ".") -> Path:
        """
        Write `<out_dir>/<name>.pptx` using python-pptx and return its path.

        Every slide gets a title text box, a single text box holding the
        bullets (one "• " line per bullet) and, if present, speaker notes.
        """
        if not slides:
            raise ExportError("Deck is empty; nothing to export.")

        try:
            from pptx import Presentation  # type: ignore
            from pptx.dml.color import RGBColor  # type: ignore
            from pptx.util import Inches, Pt  # type: ignore
        except ImportError as e:  # pragma: no cover - import guard
            raise ExportError(
                "python-pptx is required for PPTX export. Install via 'pip install python-pptx'."
            ) from e

        prs = Presentation()
        blank_layout = prs.slide_layouts[6]

        for slide_data in slides:
            slide = prs.slides.add_slide(blank_layout)

            title_box = slide.shapes.add_textbox(Inches(0.5), Inches(0.4), Inches(9), Inches(1))
            title_frame = title_box.text_frame
            title_frame.word_wrap = True
            title_frame.text = slide_data.title
            for p in title_frame.paragraphs:
                for run in p.runs:
                    run.font.size = Pt(28)
                    run.font.bold = True
                    run.font.color.rgb = RGBColor(0x36, 0x36, 0x36)

            bullet_text = "\n".join(f"{BULLET_GLYPH} {b}" for b in slide_data.bullets)
            if bullet_text:
                body_box = slide.shapes.add_textbox(Inches(0.8), Inches(1.6), Inches(8.4), Inches(4.5))
                body_frame = body_box.text_frame
                body_frame.word_wrap = True
                body_frame.text = bullet_text
                for p in body_frame.paragraphs:
                    for run in p.runs:
                        run.font.size = Pt(18)
                        run.font.color.rgb = RGBColor(0x40, 0x40, 0x40)

            if slide_data.notes:
                slide.notes_slide.notes_text_frame.text = slide_data.notes

        output_path = Path(out_dir) / f"{safe_file_stem(name)}{PPTX_EXTENSION}"
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            prs.save(str(output_path))
        except OSError as e:
            raise ExportError(f"Failed to write {output_path}: {e}") from e
        return output_path
