import json

import pytest
from pptx import Presentation

from article2slides.generator import ExportError, SlideGenerator, safe_file_stem
from article2slides.labels import ENGLISH_LABELS
from article2slides.planner import Slide, build_slides


@pytest.fixture
def deck():
    return build_slides(
        title="Soil Study",
        presenter="Dana",
        article_text="Introduction\nSoil is alive. It breathes.\n\nResults\nIt grew.",
        labels=ENGLISH_LABELS,
    )


def test_to_markdown(deck):
    md = SlideGenerator().to_markdown(deck)
    parts = md.strip().split("\n\n---\n\n")
    assert len(parts) == len(deck)
    assert parts[0].startswith("# Soil Study\n\n- Scientific Forum\n- Prepared by: Dana")
    assert f"<!-- {ENGLISH_LABELS.opening_note} -->" in parts[0]


def test_to_markdown_skips_blank_bullets_and_titles():
    md = SlideGenerator().to_markdown([Slide(title=" ", bullets=["", "kept"])])
    assert md == "# Slide 1\n\n- kept\n"


def test_front_matter_marp_and_plain(deck):
    gen = SlideGenerator()
    marp = gen.to_markdown_with_front_matter(deck, title="Soil Study", author="Dana", theme="gaia")
    assert marp.startswith("---\nmarp: true\npaginate: true\ntitle: \"Soil Study\"\nauthor: \"Dana\"\n")
    assert 'theme: "gaia"' in marp
    assert "generated_at:" in marp

    plain = gen.to_markdown_with_front_matter(deck, title="Soil Study", engine="plain")
    assert "marp: true" not in plain
    assert "author:" not in plain


def test_to_json(deck):
    data = json.loads(SlideGenerator().to_json(deck))
    assert data[0] == {
        "title": "Soil Study",
        "bullets": ["Scientific Forum", "Prepared by: Dana"],
        "notes": ENGLISH_LABELS.opening_note,
    }
    assert len(data) == len(deck)


def test_to_json_keeps_arabic_readable():
    out = SlideGenerator().to_json([Slide(title="خاتمة", bullets=[])])
    assert "خاتمة" in out


def test_to_preview(deck):
    preview = SlideGenerator().to_preview(deck, ENGLISH_LABELS)
    lines = preview.splitlines()
    assert lines[0] == f"{len(deck)} slides"
    assert "1. Soil Study (2 points)" in lines
    assert "  - Prepared by: Dana" in lines
    assert f"  Speaker note: {ENGLISH_LABELS.opening_note}" in lines


def test_to_preview_empty():
    assert SlideGenerator().to_preview([], ENGLISH_LABELS) == "No slides yet\n"


def test_to_pptx_writes_titles_bullets_and_notes(deck, tmp_path):
    path = SlideGenerator().to_pptx(deck, "Soil Study", tmp_path)
    assert path == tmp_path / "Soil Study.pptx"
    assert path.exists()

    prs = Presentation(str(path))
    assert len(prs.slides) == len(deck)

    first = prs.slides[0]
    texts = [shape.text_frame.text for shape in first.shapes if shape.has_text_frame]
    assert texts[0] == "Soil Study"
    assert texts[1] == "• Scientific Forum\n• Prepared by: Dana"
    assert first.notes_slide.notes_text_frame.text == ENGLISH_LABELS.opening_note


def test_to_pptx_without_bullets_or_notes(tmp_path):
    path = SlideGenerator().to_pptx([Slide(title="Only a title")], "bare", tmp_path)
    prs = Presentation(str(path))
    slide = prs.slides[0]
    assert [s.text_frame.text for s in slide.shapes if s.has_text_frame] == ["Only a title"]
    assert not slide.has_notes_slide


def test_to_pptx_empty_deck_raises(tmp_path):
    with pytest.raises(ExportError):
        SlideGenerator().to_pptx([], "empty", tmp_path)


def test_to_pptx_write_failure_leaves_deck_untouched(deck, tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", encoding="utf-8")
    snapshot = [s.to_dict() for s in deck]

    with pytest.raises(ExportError):
        SlideGenerator().to_pptx(deck, "deck", blocker)

    assert [s.to_dict() for s in deck] == snapshot
    path = SlideGenerator().to_pptx(deck, "deck", tmp_path)
    assert path.exists()


def test_front_matter_quotes_theme():
    marp = SlideGenerator().to_markdown_with_front_matter([Slide("T")], theme='my "dark" theme')
    assert 'theme: "my \\"dark\\" theme"' in marp


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Soil Study", "Soil Study"),
        ("AI/ML", "AI_ML"),
        ("../escaped", "_escaped"),
        ("/abs/x", "_abs_x"),
        ('a:b*c?"d"<e>|f\\g', "a_b_c__d__e__f_g"),
        ("...", "presentation"),
        ("   ", "presentation"),
        ("عرض علمي", "عرض علمي"),
    ],
)
def test_safe_file_stem(name, expected):
    assert safe_file_stem(name) == expected


def test_to_pptx_keeps_title_with_separators_inside_out_dir(deck, tmp_path):
    out_dir = tmp_path / "work"
    gen = SlideGenerator()

    path = gen.to_pptx(deck, "AI/ML", out_dir)
    assert path == out_dir / "AI_ML.pptx"
    assert path.exists()
    assert not (out_dir / "AI").exists()

    path = gen.to_pptx(deck, "../escaped", out_dir)
    assert path == out_dir / "_escaped.pptx"
    assert not (tmp_path / "escaped.pptx").exists()
