from __future__ import annotations

import argparse
import os
import pathlib
import sys
from typing import Optional

from .generator import PPTX_EXTENSION, ExportError, SlideGenerator
from .headings import HeadingRules
from .labels import LABEL_SETS, get_labels
from .planner import DeckInputs, SlidePlanner, presentation_name
from .utils import ensure_path, error, log


LANG_ENV_VAR = "ARTICLE2SLIDES_LANG"


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="article2slides",
        description="Turn a pasted academic article into a structured slide deck.",
    )
    parser.add_argument(
        "article",
        type=str,
        help="Path to a UTF-8 text file with the article, or '-' to read stdin.",
    )
    parser.add_argument("--title", type=str, default="", help="Presentation title.")
    parser.add_argument("--presenter", type=str, default="", help="Presenter name.")
    parser.add_argument("--event", type=str, default="", help="Event / forum name.")
    parser.add_argument(
        "--takeaways",
        type=str,
        default=None,
        help="Optional text file with key takeaways (one per line) for the conclusion slide.",
    )
    parser.add_argument(
        "--out",
        "-o",
        type=str,
        default=None,
        help=(
            "Output path. For pptx the extension is added automatically and the default "
            "name is the presentation title; other formats print to stdout by default."
        ),
    )
    parser.add_argument(
        "--format",
        choices=["pptx", "md", "json", "preview"],
        default="pptx",
        help="Output format. Default: pptx",
    )
    parser.add_argument(
        "--lang",
        choices=sorted(LABEL_SETS),
        default=os.getenv(LANG_ENV_VAR, "ar"),
        help=f"Language of the default labels. Default: ${LANG_ENV_VAR} or ar",
    )
    parser.add_argument(
        "--no-caps-heuristic",
        action="store_true",
        help="Do not treat short all-caps lines as headings.",
    )
    parser.add_argument(
        "--caps-requires-case",
        action="store_true",
        help="Only apply the all-caps heading test to lines with cased (e.g. Latin) letters.",
    )
    parser.add_argument(
        "--md-engine",
        choices=["marp", "plain"],
        default="marp",
        help="Markdown slides engine flavor. Default: marp",
    )
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme name written to the markdown front matter. Default: default",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress messages during generation.",
    )
    return parser.parse_args(argv)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return pathlib.Path(source).expanduser().read_text(encoding="utf-8")


def _emit(text: str, out: Optional[str]) -> Optional[pathlib.Path]:
    if out is None:
        sys.stdout.write(text)
        return None
    out_path = pathlib.Path(out).expanduser().resolve()
    ensure_path(out_path.parent)
    out_path.write_text(text, encoding="utf-8")
    return out_path


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        labels = get_labels(args.lang)
    except ValueError as e:
        error(str(e))
        return 1

    try:
        article_text = _read_input(args.article)
        takeaways = _read_input(args.takeaways) if args.takeaways else ""
    except (OSError, UnicodeDecodeError) as e:
        error(f"cannot read input: {e}")
        return 1

    rules = HeadingRules(
        use_short_caps=not args.no_caps_heuristic,
        short_caps_requires_case=args.caps_requires_case,
    )
    planner = SlidePlanner(labels=labels, rules=rules)
    inputs = DeckInputs(
        title=args.title,
        presenter=args.presenter,
        event_name=args.event,
        article_text=article_text,
        key_takeaways=takeaways,
    )
    if args.verbose:
        log(f"Planning slides (lang={args.lang}, {len(article_text)} characters of article text)...")
    slides = planner.plan_slides(inputs)
    if args.verbose:
        log(f"Planned {len(slides)} slides.")

    generator = SlideGenerator()
    deck_title = presentation_name(args.title, labels)

    if args.format == "pptx":
        if args.out:
            out = pathlib.Path(args.out).expanduser().resolve()
            name = out.stem if out.suffix.lower() == PPTX_EXTENSION else out.name
            out_dir = out.parent
        else:
            name, out_dir = deck_title, pathlib.Path.cwd()
        try:
            path = generator.to_pptx(slides, name, out_dir)
        except ExportError as e:
            error(str(e))
            return 1
        print(f"[article2slides] PPTX slides written to {path}")
        return 0

    if args.format == "md":
        text = generator.to_markdown_with_front_matter(
            slides,
            title=deck_title,
            author=args.presenter.strip(),
            theme=args.theme,
            engine=args.md_engine,
        )
    elif args.format == "json":
        text = generator.to_json(slides)
    else:
        text = generator.to_preview(slides, labels)

    try:
        written = _emit(text, args.out)
    except OSError as e:
        error(f"cannot write output: {e}")
        return 1
    if written is not None and args.verbose:
        log(f"{args.format} output written to {written}")
    return 0
