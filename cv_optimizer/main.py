import argparse
import mimetypes
import sys
from collections.abc import Sequence
from pathlib import Path

from cv_optimizer.config.settings import Settings
from cv_optimizer.export.service import export_document
from cv_optimizer.export.templates import TEMPLATES
from cv_optimizer.extraction.exceptions import UploadValidationError
from cv_optimizer.extraction.models import UploadedDocument
from cv_optimizer.keys.api_key_store import (
    SUPPORTED_MODELS,
    ApiKeyStore,
    available_models,
)
from cv_optimizer.keys.exceptions import ApiKeyStoreError
from cv_optimizer.logging.logger import Log
from cv_optimizer.processor.models import ProcessingOutcome, ProcessingRequest
from cv_optimizer.processor.processor import build_processor

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_UPLOAD = 2


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> dispatch subcommand."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    # stdout carries the document and suggestions
    Log.configure(settings.log_level, stream=sys.stderr)
    store = ApiKeyStore(settings.api_keys_store_path)
    return args.handler(args, settings, store)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cv-optimizer", description="Optimize a CV document.")
    commands = parser.add_subparsers(dest="command", required=True)

    analyze = commands.add_parser("analyze", help="analyze a CV and write the improved version")
    analyze.add_argument("cv", type=Path, help="CV file (.pdf, .doc, .docx or .txt)")
    analyze.add_argument("--tor", type=Path, help="Terms of Reference file")
    analyze.add_argument("--competencies", help="additional competencies, one per line or ';'")
    analyze.add_argument(
        "--model",
        dest="models",
        action="append",
        choices=SUPPORTED_MODELS,
        default=[],
        help="model to use; repeat to select several",
    )
    analyze.add_argument("--format", dest="fmt", choices=("md", "pdf", "docx"), default="md")
    analyze.add_argument("--template", choices=sorted(TEMPLATES))
    analyze.add_argument("--output", type=Path, help="output path; stdout for md when omitted")
    analyze.set_defaults(handler=run_analyze)

    keys = commands.add_parser("keys", help="manage stored API keys")
    key_commands = keys.add_subparsers(dest="action", required=True)
    key_set = key_commands.add_parser("set", help="store a key for a model")
    key_set.add_argument("model", choices=SUPPORTED_MODELS)
    key_set.add_argument("key")
    key_remove = key_commands.add_parser("remove", help="delete the stored key for a model")
    key_remove.add_argument("model", choices=SUPPORTED_MODELS)
    key_commands.add_parser("list", help="show which models have a key")
    keys.set_defaults(handler=run_keys)
    return parser


def run_analyze(args: argparse.Namespace, settings: Settings, store: ApiKeyStore) -> int:
    try:
        cv = load_upload(args.cv)
        tor = load_upload(args.tor) if args.tor else None
    except OSError as exc:
        print(f"Could not read file: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    request = ProcessingRequest(
        cv=cv,
        tor=tor,
        competencies=args.competencies,
        models=tuple(args.models),
    )
    processor = build_processor(settings, store, request.models)
    try:
        outcome = processor.process(request)
    except UploadValidationError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID_UPLOAD

    for warning in outcome.warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    return write_result(outcome, args, settings)


def load_upload(path: Path) -> UploadedDocument:
    raw_bytes = path.read_bytes()
    mime_type, _ = mimetypes.guess_type(path.name)
    return UploadedDocument(
        raw_bytes=raw_bytes,
        file_name=path.name,
        mime_type=mime_type or "",
        size_bytes=len(raw_bytes),
    )


def write_result(outcome: ProcessingOutcome, args: argparse.Namespace, settings: Settings) -> int:
    text = outcome.result.improved_text
    if args.fmt == "md":
        if args.output is None:
            print(text)
        else:
            args.output.write_text(text + "\n", encoding="utf-8")
        print_suggestions(outcome)
        return EXIT_OK

    export = export_document(text, args.fmt, args.template or settings.export_template)
    if not export.ok:
        print(export.warning, file=sys.stderr)
        return EXIT_FAILURE
    output = args.output or args.cv.with_name(f"{args.cv.stem}_optimized{export.file_extension}")
    output.write_bytes(export.data)
    print(f"Wrote {output}")
    print_suggestions(outcome)
    return EXIT_OK


def print_suggestions(outcome: ProcessingOutcome) -> None:
    suggestions = outcome.result.suggestions
    if not suggestions:
        return
    print(f"\nSuggestions ({outcome.report.source}):")
    for item in suggestions:
        print(f"- [{item.section}] {item.suggestion}")
        if item.suggested_copy:
            print(f"    Example: {item.suggested_copy}")
        if item.rationale:
            print(f"    Why: {item.rationale}")


def run_keys(args: argparse.Namespace, settings: Settings, store: ApiKeyStore) -> int:
    try:
        if args.action == "set":
            store.set(args.model, args.key)
            print(f"Saved API key for {args.model}")
        elif args.action == "remove":
            store.remove(args.model)
            print(f"Removed API key for {args.model}")
        else:
            stored = store.all()
            configured = available_models(settings, store)
            for model in SUPPORTED_MODELS:
                if stored.get(model):
                    source = "user"
                elif model in configured:
                    source = "environment"
                else:
                    source = "not configured"
                print(f"{model}: {source}")
    except ApiKeyStoreError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
