"""Command-line interface for classifying and extracting documents.

Provides subcommands for classifying a text dump, extracting fields from
a single document, and processing a folder of documents into a CSV file.
"""

import argparse
import csv
import json
import sys
from pathlib import Path
from typing import Any

from docverify.classification.classifier import DocumentClassifier, DocumentType
from docverify.extraction.pipeline import ExtractionPipeline
from docverify.ocr.tesseract_engine import TesseractEngine
from docverify.utils.config import AppConfig, load_config
from docverify.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

_TEXT_SUFFIXES = {".txt"}
_IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".tif", ".tiff"}
_META_COLUMNS = [
    "filename",
    "status",
    "documentType",
    "isValid",
    "reason",
    "detectedType",
    "error",
]


def _find_documents(input_dir: Path) -> list[Path]:
    """Find all supported text dumps and images in a directory.

    Args:
        input_dir: Directory to scan for documents.

    Returns:
        Sorted list of document file paths.
    """
    supported = _TEXT_SUFFIXES | _IMAGE_SUFFIXES
    return sorted(
        path
        for path in input_dir.iterdir()
        if path.is_file() and path.suffix.lower() in supported
    )


def read_document_text(file_path: Path, config: AppConfig) -> str:
    """Return the OCR text of a document file.

    ``.txt`` files are taken as existing OCR output; images are run
    through Tesseract first.
    """
    if file_path.suffix.lower() in _TEXT_SUFFIXES:
        return file_path.read_text(encoding="utf-8", errors="replace")

    engine = TesseractEngine(
        tesseract_cmd=config.ocr.tesseract_cmd,
        default_lang=config.ocr.default_lang,
        psm=config.ocr.psm,
    )
    return engine.extract_text(file_path.read_bytes())


def extract_single(
    file_path: Path,
    document_type: str | None = None,
    config: AppConfig | None = None,
) -> dict[str, Any]:
    """Process a single document and return its extraction record.

    Args:
        file_path: Path to a ``.txt`` OCR dump or an image.
        document_type: Type the document is claimed to be.
        config: Application configuration; loaded from disk if omitted.

    Returns:
        The extraction record as produced by the pipeline.
    """
    config = config or load_config()
    text = read_document_text(file_path, config)
    return ExtractionPipeline(config.extraction).run(text, document_type).to_dict()


def _flatten(record: dict[str, Any]) -> dict[str, Any]:
    row: dict[str, Any] = {}
    for key, value in record.items():
        if key == "data":
            continue
        row[key] = value["value"] if isinstance(value, dict) else value
    return row


def process_folder(
    input_dir: Path,
    output_csv: Path,
    verbose: bool = False,
) -> dict[str, int]:
    """Process all documents in a folder and export results to CSV.

    Args:
        input_dir: Directory containing document files.
        output_csv: Path for the output CSV file.
        verbose: Whether to print per-file progress.

    Returns:
        Summary dict with total, successful, and failed counts.
    """
    config = load_config()

    files = _find_documents(input_dir)
    if not files:
        logger.warning("No documents found in %s", input_dir)
        return {"total": 0, "successful": 0, "failed": 0}

    logger.info("Found %d documents to process", len(files))

    results: list[dict[str, Any]] = []
    successful = 0
    failed = 0

    for i, file_path in enumerate(files, 1):
        if verbose:
            print(f"Processing [{i}/{len(files)}]: {file_path.name}")

        try:
            record = extract_single(file_path, config=config)
            row = {"filename": file_path.name, "status": "success", "error": None}
            row.update(_flatten(record))
            results.append(row)
            successful += 1
        except (OSError, UnicodeError) as exc:
            logger.error("Failed to process %s: %s", file_path.name, exc)
            results.append(
                {
                    "filename": file_path.name,
                    "status": "failed",
                    "error": str(exc),
                }
            )
            failed += 1

    _write_csv(results, output_csv)
    logger.info("Results written to %s", output_csv)

    summary = {"total": len(files), "successful": successful, "failed": failed}
    _print_summary(summary, output_csv)
    return summary


def _write_csv(results: list[dict[str, Any]], output_path: Path) -> None:
    """Write extraction results to a CSV file.

    Args:
        results: List of result dictionaries.
        output_path: Path for the output CSV file.
    """
    if not results:
        return

    all_keys: set[str] = set()
    for r in results:
        all_keys.update(r.keys())

    field_columns = sorted(all_keys - set(_META_COLUMNS))
    columns = [c for c in _META_COLUMNS if c in all_keys] + field_columns

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(results)


def _print_summary(summary: dict[str, int], output_csv: Path) -> None:
    """Print batch processing summary to stdout."""
    print(f"\n{'=' * 50}")
    print("Batch Processing Complete")
    print(f"{'=' * 50}")
    print(f"Total:      {summary['total']}")
    print(f"Successful: {summary['successful']}")
    print(f"Failed:     {summary['failed']}")
    print(f"Output:     {output_csv}")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate command.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    parser = argparse.ArgumentParser(
        description="Document Verification Toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    classify_parser = subparsers.add_parser(
        "classify", help="Detect the type of an OCR text dump"
    )
    classify_parser.add_argument("file", type=Path, help="Text file with OCR output")

    single_parser = subparsers.add_parser("extract", help="Process a single document")
    single_parser.add_argument("file", type=Path, help="Text dump or image to process")
    single_parser.add_argument(
        "-t",
        "--type",
        choices=[t.value for t in DocumentType],
        default=None,
        dest="doc_type",
        help="Claimed document type (default: none)",
    )
    single_parser.add_argument("-o", "--output", type=Path, help="Output JSON file")

    batch_parser = subparsers.add_parser("batch", help="Process a folder of documents")
    batch_parser.add_argument(
        "input_dir", type=Path, help="Input directory with documents"
    )
    batch_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("results.csv"),
        help="Output CSV file (default: results.csv)",
    )
    batch_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose output"
    )

    args = parser.parse_args(argv)

    config = load_config()
    setup_logging(config.log_level)

    if args.command == "classify":
        if not args.file.exists():
            print(f"Error: {args.file} does not exist", file=sys.stderr)
            sys.exit(1)
        text = args.file.read_text(encoding="utf-8", errors="replace")
        print(DocumentClassifier().classify(text))
    elif args.command == "extract":
        if not args.file.exists():
            print(f"Error: {args.file} does not exist", file=sys.stderr)
            sys.exit(1)
        result = extract_single(args.file, args.doc_type, config)
        output_str = json.dumps(result, indent=2)
        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(output_str)
            print(f"Output written to {args.output}")
        else:
            print(output_str)
    elif args.command == "batch":
        if not args.input_dir.is_dir():
            print(f"Error: {args.input_dir} is not a directory", file=sys.stderr)
            sys.exit(1)
        process_folder(args.input_dir, args.output, args.verbose)
    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    main()
