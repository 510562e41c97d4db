from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from ..csvio.reader import ExportParseError, read_export_csv
from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import ExtractConfig
from ..models.error_record import FILE_LEVEL_ROW, ErrorRecord
from ..models.processing_result import ALL_EVENTS, FileStat, RunResult
from ..models.records import Category
from .accumulator import extract_rows
from .export import filter_records, write_tsv
from .progress import ProgressTracker

"""Run orchestration for the registrant extraction tool.

Scans the source directory (or takes explicit paths), extracts records from
each export file and writes one TSV per category. A file that cannot be read
or written is recorded in the error log and the run continues with the next
file.
"""

__all__ = [
    "ProcessingError",
    "scan_csv_files",
    "output_paths",
    "process_file",
    "process_all",
]

logger = logging.getLogger(__name__)


class ProcessingError(Exception):
    """Fatal error that prevents a run from starting."""


def scan_csv_files(directory: Path) -> list[Path]:
    """Scan directory for .csv files (non-recursive), sorted by name.

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        files = [p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".csv"]
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e
    return sorted(files, key=lambda p: p.name)


def output_paths(file_path: Path, output_dir: Path) -> dict[Category, Path]:
    return {
        category: output_dir / f"{file_path.stem}-{category.value}.tsv"
        for category in Category
    }


def _failed(file_path: Path, started: datetime, error: str) -> FileStat:
    return FileStat(
        file_name=file_path.name,
        status="failed",
        elapsed_seconds=(datetime.now(UTC) - started).total_seconds(),
        error=error,
    )


def process_file(
    file_path: Path,
    config: ExtractConfig,
    error_log: ErrorLogBuffer,
    *,
    iftar_event: str = ALL_EVENTS,
    programming_event: str = ALL_EVENTS,
    write_output: bool = True,
) -> FileStat:
    """Extract one export file and write its TSV outputs."""
    started = datetime.now(UTC)
    try:
        rows = read_export_csv(file_path, encoding=config.encoding)
    except (ExportParseError, OSError) as e:
        logger.error(f"{file_path.name}: unreadable export: {e}")
        error_log.append(
            ErrorRecord.create(file_path.name, FILE_LEVEL_ROW, "CSV_PARSE_ERROR", str(e))
        )
        return _failed(file_path, started, str(e))

    result = extract_rows(rows, config.legacy_categories)
    fmt = result.detected_format.value if result.detected_format else None
    logger.info(
        f"{file_path.name}: format={fmt or '-'} rows={result.total_rows} "
        f"iftar={len(result.iftar_records)} programming={len(result.programming_records)} "
        f"skipped={result.skipped_rows}"
    )

    outputs: list[Path] = []
    if write_output:
        targets = output_paths(file_path, Path(config.output_directory))
        selected = {
            Category.IFTAR: filter_records(result.iftar_records, iftar_event),
            Category.PROGRAMMING: filter_records(result.programming_records, programming_event),
        }
        try:
            for category, records in selected.items():
                outputs.append(write_tsv(targets[category], category, records))
        except OSError as e:
            logger.error(f"{file_path.name}: cannot write output: {e}")
            error_log.append(
                ErrorRecord.create(file_path.name, FILE_LEVEL_ROW, "OUTPUT_WRITE_ERROR", str(e))
            )
            return _failed(file_path, started, str(e))

    return FileStat(
        file_name=file_path.name,
        status="success",
        iftar_rows=len(result.iftar_records),
        programming_rows=len(result.programming_records),
        skipped_rows=result.skipped_rows,
        elapsed_seconds=(datetime.now(UTC) - started).total_seconds(),
        detected_format=fmt,
        outputs=outputs,
    )


def process_all(
    config: ExtractConfig,
    paths: Sequence[Path] | None = None,
    *,
    iftar_event: str = ALL_EVENTS,
    programming_event: str = ALL_EVENTS,
    write_output: bool = True,
    error_log: ErrorLogBuffer | None = None,
) -> RunResult:
    """Process the given export files, or every CSV in the source directory.

    Raises:
        ProcessingError: When the source directory cannot be scanned
    """
    start_time = datetime.now(UTC)
    error_log = error_log if error_log is not None else ErrorLogBuffer()

    file_paths = list(paths) if paths else scan_csv_files(Path(config.source_directory))

    file_stats: list[FileStat] = []
    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)
            stat = process_file(
                file_path,
                config,
                error_log,
                iftar_event=iftar_event,
                programming_event=programming_event,
                write_output=write_output,
            )
            file_stats.append(stat)
            progress.finish_file(
                iftar=sum(s.iftar_rows for s in file_stats),
                programming=sum(s.programming_rows for s in file_stats),
            )

    try:
        log_path = error_log.flush()
    except OSError as e:
        # TSV outputs are already on disk at this point
        logger.warning(f"cannot write error log: {e}")
    else:
        if log_path is not None:
            logger.warning(f"errors written to {log_path}")

    end_time = datetime.now(UTC)
    succeeded = [s for s in file_stats if s.status == "success"]
    return RunResult(
        success_files=len(succeeded),
        failed_files=len(file_stats) - len(succeeded),
        iftar_rows=sum(s.iftar_rows for s in succeeded),
        programming_rows=sum(s.programming_rows for s in succeeded),
        skipped_rows=sum(s.skipped_rows for s in succeeded),
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
    )
