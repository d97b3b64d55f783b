"""Command line harness that dumps a PCG32 stream as a JSON report."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "stream_logs" / "latest_stream.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from pcg32 import SampleConfig, draw_samples
from pcg32.sampling import SAMPLE_KINDS

logger = logging.getLogger("pcg32.dump_stream")


def _parse_int(value: str) -> int:
    """Accept decimal, 0x-hex, 0o-octal or 0b-binary integers."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected an integer (decimal or 0x-prefixed hex), received '{value}'."
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dump a deterministic PCG32 stream")
    parser.add_argument(
        "--seed",
        type=_parse_int,
        default=None,
        help="Initial state (decimal or 0x-prefixed hex). Omit to use the default generator",
    )
    parser.add_argument(
        "--sequence",
        type=_parse_int,
        default=1,
        help="Stream selector used with --seed",
    )
    parser.add_argument("--count", type=_parse_int, default=8, help="Number of values to draw")
    parser.add_argument(
        "--kind",
        choices=SAMPLE_KINDS,
        default="u32",
        help="Which extraction to record",
    )
    parser.add_argument(
        "--bound",
        type=_parse_int,
        default=6,
        help="Exclusive upper bound for --kind bounded",
    )
    parser.add_argument(
        "--skip",
        type=_parse_int,
        default=0,
        help="Steps to jump ahead before sampling",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "stream_logs/latest_stream.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    cfg = SampleConfig(
        seed=args.seed,
        sequence=args.sequence,
        count=args.count,
        kind=args.kind,
        bound=args.bound,
        skip=args.skip,
    )
    try:
        result = draw_samples(cfg)
    except ValueError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.info("wrote stream report to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
