from __future__ import annotations

import argparse
import json
import logging

from .config import load_config
from .engines.base import ApiDetect
from .errors import TranslatorError
from .languages import AUTOMATIC, InputLanguage, Language
from .logging import attach_file_logging, configure_logging
from .translators import PROVIDERS, build_translator


log = logging.getLogger("text_translator.probe")


def _language(value: str) -> Language:
    try:
        return Language(value.strip().lower().replace("-", "_"))
    except ValueError:
        names = ", ".join(lang.value for lang in Language)
        raise argparse.ArgumentTypeError(f"unknown language {value!r} (choose from {names})")


def _input_language(value: str) -> InputLanguage:
    if value.strip().lower() == "auto":
        return AUTOMATIC
    return InputLanguage(_language(value))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("text")
    parser.add_argument("--provider", choices=PROVIDERS, default=None)
    parser.add_argument("--source", type=_input_language, default=AUTOMATIC)
    parser.add_argument("--target", type=_language, default=None)
    parser.add_argument("--detect", action="store_true", help="detect the language instead of translating")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args(argv)

    if not args.detect and args.target is None:
        parser.error("--target is required unless --detect is given")

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    if args.log_file:
        attach_file_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)
    cfg = load_config()
    translator = build_translator(cfg, args.provider)
    log.info("provider=%s chars=%s", translator.name, len(args.text))

    try:
        if args.detect:
            if not isinstance(translator, ApiDetect):
                raise SystemExit(f"provider {translator.name!r} does not support detection")
            language = translator.detect(args.text)
            output = {
                "provider": translator.name,
                "text": args.text,
                "language": language.value if language else None,
            }
        else:
            translation = translator.translate(args.text, args.source, args.target)
            output = {
                "provider": translator.name,
                "source": args.source.language.value if args.source.language else "auto",
                "target": args.target.value,
                "text": args.text,
                "translation": translation,
            }
    except TranslatorError as exc:
        raise SystemExit(str(exc)) from exc

    print(json.dumps(output, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
