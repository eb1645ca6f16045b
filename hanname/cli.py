from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace

from config import DEFAULT_MODEL, load_settings
from hanname.models import MAX_TRAITS, NameProfile
from hanname.services import AnswerParseError, ChatCompletionService, LLMServiceError, NameService
from hanname.services.prompt_builder import (
    GENDER_PHRASES,
    PHONETIC_PHRASES,
    STYLE_PHRASES,
    TRAIT_PHRASES,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Suggest a Chinese name for an English name via the DeepSeek API."
    )
    parser.add_argument("--name", required=True, help="Your English (Latin-alphabet) name")
    parser.add_argument("--gender", choices=sorted(GENDER_PHRASES), default="neutral")
    parser.add_argument(
        "--trait",
        dest="traits",
        action="append",
        choices=sorted(TRAIT_PHRASES),
        default=[],
        help=f"A personality trait; repeat up to {MAX_TRAITS} times",
    )
    parser.add_argument("--style", choices=sorted(STYLE_PHRASES), default="modern")
    parser.add_argument("--phonetic", choices=sorted(PHONETIC_PHRASES), default="native-like")
    parser.add_argument(
        "--model",
        default=DEFAULT_MODEL,
        help=f"Model to use (default: {DEFAULT_MODEL})",
    )
    parser.add_argument("--json", action="store_true", help="Print the suggestion as JSON")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    if not args.name.strip():
        raise SystemExit("--name must not be empty")
    if len(args.traits) > MAX_TRAITS:
        raise SystemExit(f"At most {MAX_TRAITS} --trait options are allowed")

    profile = NameProfile.from_dict({
        "englishName": args.name,
        "gender": args.gender,
        "traits": args.traits,
        "style": args.style,
        "phonetic": args.phonetic,
    })

    settings = load_settings()
    if args.model != settings.model:
        settings = replace(settings, model=args.model)

    service = NameService(llm_service=ChatCompletionService(settings))
    try:
        suggestion = service.generate(profile)
    except (LLMServiceError, AnswerParseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    if args.json:
        print(json.dumps(suggestion.to_dict(), ensure_ascii=False, indent=2))
        return

    print(f"{suggestion.name} ({suggestion.phonetic})")
    print(f"Meaning: {suggestion.meaning}")
    print(f"Why: {suggestion.rationale}")


if __name__ == "__main__":
    main()
