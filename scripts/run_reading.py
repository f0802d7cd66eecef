#!/usr/bin/env python3
"""
Vybe Reading CLI - capture -> tokens -> motifs -> reading

Usage:
  # Single capture mode:
  python scripts/run_reading.py --raw "15:51 74%" --enable
  python scripts/run_reading.py --raw "77 km 11.1 L" --context "back home" --entry-no 12 --format json
  python scripts/run_reading.py --raw "06:06 71%" --explain --seventies 70,80 --enable

  # Bulk mode (JSONL input/output):
  python scripts/run_reading.py --input-jsonl captures.jsonl --output-jsonl readings.jsonl --enable

JSONL input format (one JSON object per line):
  {"raw": "15:51 74%"}
  {"raw": "77 km 11.1 L", "context": "arriving", "entryNo": 3}

JSONL output format (one JSON object per line):
  {"success": true, "reading": {...}, "explain": {...}}
  {"success": false, "line_number": 4, "error": "..."}

Without --enable the FEATURE_VYBE_V4_READINGS environment flag decides.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from vybe import (
    CaptureInput,
    FeatureConfig,
    FeatureDisabledError,
    GeneratedReading,
    ReadingConfig,
    ReadingEngine,
    Thresholds,
    DEFAULT_CONFIG,
    FEATURE_FLAG,
    is_feature_enabled,
    load_phrasebook,
    with_config,
)

logger = logging.getLogger("vybe_reading_cli")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def parse_seventies(value: str) -> Tuple[int, int]:
    """
    Parse a "LO,HI" range.

    Raises:
        argparse.ArgumentTypeError: If the value is not two integers
    """
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected LO,HI but got: {value}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Range bounds must be integers: {value}")


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Configure root logging; log records go to stderr so stdout stays clean."""
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))
    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers)


def build_config(
    phrasebook_path: Optional[str] = None,
    near_full: Optional[int] = None,
    seventies: Optional[Tuple[int, int]] = None,
) -> ReadingConfig:
    """
    Shallow-override the default config from CLI options.

    Raises:
        FileNotFoundError: If the phrasebook file does not exist
        ValueError: If the phrasebook or thresholds are invalid
    """
    phrasebook = load_phrasebook(phrasebook_path) if phrasebook_path else None
    thresholds = None
    if near_full is not None or seventies is not None:
        base = DEFAULT_CONFIG.thresholds
        thresholds = Thresholds(
            near_full_percent=near_full if near_full is not None else base.near_full_percent,
            seventies=seventies if seventies is not None else base.seventies,
        )
    return with_config(DEFAULT_CONFIG, phrasebook=phrasebook, thresholds=thresholds)


# =============================================================================
# READING PIPELINE
# =============================================================================

def run_reading(
    capture: CaptureInput,
    engine: ReadingEngine,
    explain: bool = False,
) -> GeneratedReading:
    """
    Generate one reading through the gated engine.

    Raises:
        FeatureDisabledError: If the engine is not enabled
    """
    logger.debug(f"Reading capture: {capture.raw!r}")
    return engine.generate(capture, explain=explain)


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_text_output(result: GeneratedReading) -> str:
    """
    Format a reading as human-readable text.

    Args:
        result: Generated reading (with optional explain payload)

    Returns:
        Formatted text output
    """
    reading = result.reading
    lines = []
    lines.append("=" * 70)
    lines.append(f"  {reading.header.title}")
    lines.append("=" * 70)
    if reading.header.theme:
        lines.append(f"Theme: {', '.join(reading.header.theme)}")
    lines.append("")

    lines.append("=== ANCHOR FRAME ===")
    for label, text in reading.anchor_frame.items():
        lines.append(f"  {label}: {text}")
    lines.append("")

    numerology = reading.numerology
    lines.append("=== NUMEROLOGY ===")
    lines.append(f"Tokens:         {' | '.join(t.raw for t in numerology.tokens) or '(none)'}")
    lines.append(f"Flow:           {', '.join(str(v) for v in numerology.flow) or '(none)'}")
    lines.append(f"Core frequency: {numerology.core_frequency}")
    lines.append(f"Motifs:         {', '.join(numerology.notes) or '(none)'}")
    lines.append("")

    lines.append("=== LAYERED MEANING ===")
    for row in reading.layered_meaning:
        lines.append(f"  {row.segment}: {row.essence}")
        if row.message:
            lines.append(f"    {row.message}")
    lines.append("")

    lines.append("=== ENERGY MESSAGE ===")
    lines.append(reading.energy_message)
    lines.append("")

    lines.append("=== ALIGNMENT SUMMARY ===")
    for row in reading.alignment_summary:
        lines.append(f"  {row.number} - {row.focus} ({row.tone}): {row.guidance}")
    lines.append("")

    resonance = reading.resonance
    lines.append("=== RESONANCE ===")
    lines.append(f"Elements: {', '.join(resonance.elements)}")
    lines.append(f"Chakras:  {', '.join(resonance.chakras)}")
    if resonance.blurb:
        lines.append(resonance.blurb)
    lines.append("")

    lines.append("=== GUIDANCE ASPECT ===")
    lines.append(f"{reading.guidance_aspect.area}: {reading.guidance_aspect.blurb}")
    lines.append("")

    lines.append("=== ESSENCE ===")
    lines.append(reading.essence_sentence)
    lines.append("")

    if result.explain is not None:
        lines.append("=== EXPLAIN ===")
        for section, key in result.explain.template_keys.items():
            lines.append(f"  {section}: {key}")
        lines.append("")

    lines.append("=" * 70)
    return "\n".join(lines)


def format_json_output(result: GeneratedReading, compact: bool = False) -> str:
    indent = None if compact else 2
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)


# =============================================================================
# BULK PROCESSING FUNCTIONS
# =============================================================================

def process_single_item(
    item: Dict[str, Any],
    engine: ReadingEngine,
    explain: bool = False,
) -> Dict[str, Any]:
    """
    Process one capture object from JSONL input.

    Returns:
        Dict with success, reading, explain and error fields
    """
    output: Dict[str, Any] = {"success": False, "error": None}
    try:
        capture = CaptureInput.from_dict(item)
        result = run_reading(capture, engine, explain=explain)
        output.update(result.to_dict())
        output["success"] = True
    except FeatureDisabledError as e:
        output["error"] = str(e)
    except ValueError as e:
        output["error"] = f"Validation error: {e}"
    except Exception as e:
        logger.exception("Reading failed")
        output["error"] = f"Processing error: {e}"
    return output


def read_jsonl(file_path: Path) -> Iterator[Tuple[int, Any]]:
    """
    Yield (line number, parsed JSON value) for each non-blank line.

    Lines that fail to parse yield a marker dict with `_parse_error`.
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        for line_num, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                yield line_num, json.loads(line)
            except json.JSONDecodeError as e:
                yield line_num, {"_parse_error": f"JSON parse error: {e}"}


def write_jsonl(file_path: Path, items: Iterator[Dict[str, Any]]) -> int:
    count = 0
    with open(file_path, 'w', encoding='utf-8') as f:
        for item in items:
            f.write(json.dumps(item, ensure_ascii=False) + '\n')
            count += 1
    return count


def process_jsonl(
    input_path: Path,
    output_path: Path,
    engine: ReadingEngine,
    explain: bool = False,
) -> Dict[str, int]:
    """
    Read captures from JSONL and write one result per line.

    Per-line failures are recorded in the output and do not stop the run.

    Returns:
        Dict with statistics: total, success, errors, parse_errors
    """
    stats = {"total": 0, "success": 0, "errors": 0, "parse_errors": 0}

    def process_items():
        for line_num, item in read_jsonl(input_path):
            stats["total"] += 1
            if isinstance(item, dict) and "_parse_error" in item:
                stats["parse_errors"] += 1
                yield {"success": False, "line_number": line_num, "error": item["_parse_error"]}
                continue

            result = process_single_item(item, engine, explain=explain)
            if result["success"]:
                stats["success"] += 1
            else:
                stats["errors"] += 1
                result["line_number"] = line_num
            yield result

    write_jsonl(output_path, process_items())
    logger.info(
        f"Processed {stats['total']} captures: {stats['success']} ok, "
        f"{stats['errors']} errors, {stats['parse_errors']} parse errors"
    )
    return stats


# =============================================================================
# CLI ARGUMENT PARSING
# =============================================================================

def parse_args(argv=None):
    """Parse command-line arguments."""
    p = argparse.ArgumentParser(
        description="Vybe Reading CLI - numeric capture to structured reading",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Single capture, human-readable
  python scripts/run_reading.py --raw "15:51 74%" --enable

  # With context and entry number, JSON output with explain payload
  python scripts/run_reading.py --raw "77 km 11.1 L" --context "back home" \\
      --entry-no 12 --format json --explain --enable

  # Custom phrasebook and thresholds
  python scripts/run_reading.py --raw "96%" --phrasebook my_phrasebook.json \\
      --near-full 98 --seventies 70,80 --enable

  # Bulk mode with JSONL input/output
  python scripts/run_reading.py --input-jsonl captures.jsonl --output-jsonl readings.jsonl

Feature gate:
  The engine refuses to run unless --enable is given or {FEATURE_FLAG}=true.
        """
    )

    input_group = p.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "--raw",
        type=str,
        help="Raw capture text (single capture mode)"
    )
    input_group.add_argument(
        "--input-jsonl",
        type=str,
        dest="input_jsonl",
        help="Path to input JSONL file for bulk processing"
    )

    p.add_argument(
        "--context",
        type=str,
        help="Free-text context (e.g. 'arriving home')"
    )
    p.add_argument(
        "--entry-no",
        type=int,
        dest="entry_no",
        help="Entry number shown in the title"
    )
    p.add_argument(
        "--output-jsonl",
        type=str,
        dest="output_jsonl",
        help="Path to output JSONL file (required with --input-jsonl)"
    )
    p.add_argument(
        "--explain",
        action="store_true",
        help="Attach the explain payload"
    )
    p.add_argument(
        "--format",
        type=str,
        default="text",
        choices=["text", "json"],
        help="Output format (default: text)"
    )
    p.add_argument(
        "--phrasebook",
        type=str,
        help="Path to a phrasebook JSON file (default: bundled phrasebook)"
    )
    p.add_argument(
        "--near-full",
        type=int,
        dest="near_full",
        help="Near-full percent cutoff (default: 95)"
    )
    p.add_argument(
        "--seventies",
        type=parse_seventies,
        help="Seventies percent range as LO,HI (default: 70,79)"
    )
    p.add_argument(
        "--enable",
        action="store_true",
        help=f"Enable the engine regardless of {FEATURE_FLAG}"
    )
    p.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging"
    )
    p.add_argument(
        "--log-file",
        type=str,
        dest="log_file",
        help="Also write logs to this file"
    )

    return p.parse_args(argv)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv=None):
    """Main CLI entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        config = build_config(args.phrasebook, args.near_full, args.seventies)
    except (OSError, ValueError) as e:
        print(f"ERROR: Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    override = True if args.enable else None
    engine = ReadingEngine(config, FeatureConfig(enabled=is_feature_enabled(override)))

    # =========================================================================
    # BULK MODE: Process JSONL input/output
    # =========================================================================
    if args.input_jsonl:
        if not args.output_jsonl:
            print("ERROR: --output-jsonl is required when using --input-jsonl", file=sys.stderr)
            sys.exit(1)

        input_path = Path(args.input_jsonl)
        output_path = Path(args.output_jsonl)
        if not input_path.exists():
            print(f"ERROR: Input file not found: {input_path}", file=sys.stderr)
            sys.exit(1)

        logger.info(f"Processing {input_path} -> {output_path}")
        stats = process_jsonl(input_path, output_path, engine, explain=args.explain)

        print("\nBulk processing complete:", file=sys.stderr)
        print(f"  Total items:  {stats['total']}", file=sys.stderr)
        print(f"  Successful:   {stats['success']}", file=sys.stderr)
        print(f"  Errors:       {stats['errors']}", file=sys.stderr)
        print(f"  Parse errors: {stats['parse_errors']}", file=sys.stderr)
        print(f"  Output:       {output_path}", file=sys.stderr)

        sys.exit(0 if stats['errors'] == 0 and stats['parse_errors'] == 0 else 1)

    # =========================================================================
    # SINGLE CAPTURE MODE
    # =========================================================================
    capture = CaptureInput(raw=args.raw, context=args.context, entry_no=args.entry_no)

    try:
        result = run_reading(capture, engine, explain=args.explain)
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == "json":
        print(format_json_output(result))
    else:
        print(format_text_output(result))
    sys.exit(0)


if __name__ == "__main__":
    main()
