from __future__ import annotations

from ..models.processing_result import RunResult

"""SUMMARY line rendering."""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation for very small numbers
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(value)


def render_summary_line(result: RunResult) -> str:
    """Render the SUMMARY line of a run.

    Format:
    SUMMARY statements={n} success={s} failed={f} records={r} written={w}
    rejected={x} elapsed_sec={e}

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2025, 1, 1, tzinfo=timezone.utc)
        >>> result = RunResult(
        ...     success_statements=1, failed_statements=0, total_records=3,
        ...     total_written=2, total_rejected=1, start_time=t, end_time=t,
        ...     elapsed_seconds=0.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY statements=1 success=1 failed=0 records=3 written=2 rejected=1 elapsed_sec=0'
    """
    return (
        f"SUMMARY statements={result.total_statements} "
        f"success={result.success_statements} "
        f"failed={result.failed_statements} "
        f"records={result.total_records} "
        f"written={result.total_written} "
        f"rejected={result.total_rejected} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
