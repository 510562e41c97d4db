from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from registrant_extract.config.loader import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    default_config,
    load_config,
)
from registrant_extract.logging.init import log_summary, setup_logging
from registrant_extract.models.config_models import ExtractConfig
from registrant_extract.models.processing_result import ALL_EVENTS
from registrant_extract.services.orchestrator import ProcessingError, process_all
from registrant_extract.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, resolve and load config
- Process the given CSV exports (or every *.csv in source_directory)
- Write per-category TSV files and print a SUMMARY line
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

CONFIG_ENV_VAR = "REGISTRANT_EXTRACT_CONFIG"


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv; a failure only prints a warning."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except OSError as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="registrant-extract",
        description="Extract Iftar and Programming registrants from POS CSV exports",
    )
    p.add_argument("paths", nargs="*", type=Path, help="CSV export files (default: scan source_directory)")
    p.add_argument("--config", type=Path, default=None, help="Config YAML path")
    p.add_argument("--output-dir", type=Path, default=None, help="Override output_directory")
    p.add_argument("--iftar-event", default=ALL_EVENTS, help="Only export Iftar rows of this event")
    p.add_argument(
        "--programming-event", default=ALL_EVENTS, help="Only export Programming rows of this event"
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument(
        "--inspect-data", action="store_true", help="Print headers, format & first rows then exit"
    )
    return p.parse_args(argv)


def _resolve_config(explicit: Path | None) -> ExtractConfig:
    """Load config from --config, the env var, or the default path.

    Only the implicit default path may be absent, in which case built-in
    defaults apply.
    """
    if explicit is not None:
        return load_config(explicit)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return load_config(Path(env_path))
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return default_config()


def _inspect_data(cfg: ExtractConfig, paths: list[Path]) -> int:
    from registrant_extract.csvio.reader import ExportParseError, read_export_csv
    from registrant_extract.services.accumulator import extract_rows
    from registrant_extract.services.orchestrator import scan_csv_files

    if not paths:
        try:
            paths = scan_csv_files(Path(cfg.source_directory))
        except ProcessingError as e:
            print(f"inspect: {e}")
            return EXIT_FATAL
    if not paths:
        print("inspect: no .csv files")
        return EXIT_SUCCESS_ALL
    for f in paths:
        print(f"FILE: {f.name}")
        try:
            rows = read_export_csv(f, encoding=cfg.encoding)
        except (ExportParseError, OSError) as e:
            print(f"  read_error: {e}")
            continue
        result = extract_rows(rows, cfg.legacy_categories)
        fmt = result.detected_format.value if result.detected_format else "-"
        columns = list(rows[0].keys()) if rows else []
        print(f"  format={fmt} rows={len(rows)} cols={columns}")
        print("    sample_rows=", rows[:3])
        print(f"    iftar_events={list(result.iftar_events)}")
        print(f"    programming_events={list(result.programming_events)}")
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    # None only: an explicit [] must not pull in sys.argv (pytest flags)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    if args.debug:
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))
    try:
        cfg = _resolve_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.output_dir is not None:
        cfg = dataclasses.replace(cfg, output_directory=str(args.output_dir))

    paths: list[Path] = list(args.paths)
    if args.inspect_data:
        return _inspect_data(cfg, paths)

    if paths:
        logger.info(f"Processing {len(paths)} file(s)")
    else:
        directory = Path(cfg.source_directory)
        if not directory.exists():
            logger.error(f"directory not found: {directory}")
            return EXIT_FATAL
        logger.info(f"Processing files from: {directory}")

    try:
        result = process_all(
            cfg,
            paths or None,
            iftar_event=args.iftar_event,
            programming_event=args.programming_event,
        )
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    total_files = result.success_files + result.failed_files
    summary_line = render_summary_line(total_files, result)
    # log_summary adds the "SUMMARY " label itself
    log_summary(summary_line[len("SUMMARY "):])

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
