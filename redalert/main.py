import argparse
import logging
import sys
from datetime import date, datetime
from typing import Callable, List, Optional

from . import __version__
from .config import settings
from .schemas import EventTimes
from .services.calendar import load_events
from .services.redalert import compute_red_alert
from .utils.time import format_timestamp, parse_day

logger = logging.getLogger(__name__)

# ----- Logging -----
def configure_logging(level: str | None = None) -> None:
    level = (level or settings.log_level).upper()
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    try:
        logging.getLogger("redalert").setLevel(level)
    except ValueError:
        logging.getLogger("redalert").setLevel(logging.WARNING)
        logger.warning("Unknown log level %r, using WARNING", level)

# ----- Arguments -----
def _day_arg(text: str) -> date:
    try:
        return parse_day(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {text!r}, expected YYYY-MM-DD")

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="metalab-redalert",
        description="Calculate metalab red alert time for a specific day.",
    )
    ap.add_argument("-d", "--day", type=_day_arg, metavar="YYYY-MM-DD",
                    help="Specify day to calculate (default is today).")
    ap.add_argument("-o", dest="filename", metavar="FILENAME",
                    help="Specify output file (uses stdout otherwise).")
    ap.add_argument("--url", default=settings.url,
                    help="Specify URL for iCal file. Defaults to the metalab server's.")
    ap.add_argument("-V", "--version", action="version", version=__version__,
                    help="Show version")
    return ap

# ----- Output -----
def write_result(red_alert: datetime, filename: str | None = None) -> None:
    text = format_timestamp(red_alert)
    if filename:
        with open(filename, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        print(text)

def main(
    argv: Optional[List[str]] = None,
    loader: Callable[[str], List[EventTimes]] = load_events,
) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    day = args.day or date.today()

    events = loader(args.url)
    red_alert = compute_red_alert(day, events)
    write_result(red_alert, args.filename)

    logger.info("Done!")
    return 0

if __name__ == "__main__":
    sys.exit(main())
