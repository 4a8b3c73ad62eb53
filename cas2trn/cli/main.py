from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from cas2trn.config.loader import ConfigError, build_mapping, load_config
from cas2trn.logging.error_log import ErrorLogBuffer
from cas2trn.logging.init import log_summary, set_debug, setup_logging
from cas2trn.mapping.errors import MappingError
from cas2trn.mapping.plan import RecordPlan
from cas2trn.mapping.validator import validate_mapping
from cas2trn.services.summary import render_summary_line
from cas2trn.services.translator import translate_all

"""CLI entrypoint.

Flow:
- Build the column mapping from --config (or CAS2TRN_CONFIG) and flags
- Validate it once; an invalid mapping aborts before any record is read
- Translate the named statements (or standard input) to standard output
- Log the SUMMARY line and return the exit code
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

CONFIG_ENV_VAR = "CAS2TRN_CONFIG"

_DESCRIPTION = """\
Translate financial transactions from an arbitrary comma-separated values (CSV)
format to the standard format, so that transactions from statements in
different formats can be combined.

The standard format, written to standard output, has the fields:
 * date in ISO 8601 format, e.g. "2006-01-02"
 * this account number or name
 * other account number or name, optional
 * memo or description
 * amount, negative for debits

Fields of the input records are linked to the transaction fields by 1-based
field indexes. An index of zero means the records do not contain that field.
"""

_EPILOG = """\
example:
  The input record "24/12/2019,Brumby's,6.50,,330.04" has no account, and has
  debit and credit fields followed by a balance. It is translated with

    cas2trn --thisacct=PCUS1 --nfields=5 --datei=1 --dateformat=DD/MM/YYYY \\
            --memoi=2 --debiti=3 --crediti=4

  which outputs "2019-12-24,PCUS1,,Brumby's,-6.5".

Records that cannot be translated are reported on standard error and skipped;
errors about header lines can be ignored.
"""

# argparse dest -> ColumnMapping key
_MAPPING_OPTIONS: list[tuple[str, str, type, str]] = [
    ("--nfields", "field_count", int, "number of fields in a CSV record, mandatory"),
    ("--amounti", "amount_index", int, "amount field index, optional but if zero then crediti and debiti must be non-zero"),
    ("--crediti", "credit_index", int, "credit field index, optional, see amounti"),
    ("--datei", "date_index", int, "date field index, mandatory"),
    ("--debiti", "debit_index", int, "debit field index, optional, see amounti"),
    ("--memoi", "memo_index", int, "memo or description field index, mandatory"),
    ("--otheraccti", "other_account_index", int, "other account number or name field index, optional"),
    ("--thisaccti", "this_account_index", int, "this account number or name field index, optional, see thisacct"),
    ("--dateformat", "date_format", str, 'date format, mandatory, e.g. "DD/MM/YYYY", "%%d/%%m/%%Y" or "02/01/2006"'),
    ("--thisacct", "this_account", str, "this account number or name, optional but if empty then thisaccti must be non-zero"),
]


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="cas2trn",
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("files", nargs="*", type=Path, metavar="FILE", help="statement files (default: standard input)")
    mapping = p.add_argument_group("column mapping")
    for flag, dest, typ, help_text in _MAPPING_OPTIONS:
        mapping.add_argument(flag, dest=dest, type=typ, default=None, help=help_text)
    p.add_argument("--config", type=Path, default=None, help=f"YAML column mapping file (default: ${CONFIG_ENV_VAR})")
    p.add_argument("--error-log", type=Path, default=None, metavar="DIR", help="write rejected records as JSON Lines to DIR")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _load_env_file(path: Path) -> None:
    """Load .env with python-dotenv; variables already set in the process win."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _load_plan(args: argparse.Namespace) -> RecordPlan:
    """Build and validate the column mapping.

    Raises:
        ConfigError: the mapping file is missing or invalid
        MappingError: the merged mapping breaks a rule
    """
    config_path = args.config
    if config_path is None and os.getenv(CONFIG_ENV_VAR):
        config_path = Path(os.environ[CONFIG_ENV_VAR])
    file_values = load_config(config_path) if config_path is not None else {}
    overrides = {dest: getattr(args, dest) for _, dest, _, _ in _MAPPING_OPTIONS}
    return validate_mapping(build_mapping(file_values, overrides))


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # [] is a valid argv (tests); only None reads the real command line
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    try:
        plan = _load_plan(args)
    except (ConfigError, MappingError) as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    error_log = ErrorLogBuffer(args.error_log) if args.error_log is not None else None
    result = translate_all(args.files, plan, out=sys.stdout, error_log=error_log)

    if error_log is not None:
        log_path = error_log.flush()
        if log_path is not None:
            logger.info(f"rejected records written to {log_path}")

    # log_summary adds the "SUMMARY " label itself
    summary_line = render_summary_line(result)
    log_summary(summary_line.removeprefix("SUMMARY "))

    if result.failed_statements > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS
