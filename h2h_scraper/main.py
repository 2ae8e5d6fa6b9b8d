# h2h_scraper/main.py
from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, List, Optional

from .core.config import Config, Destination, RunConfig
from .core.exceptions import ConfigError, InvalidDateError
from .models import FixtureQuery
from .pipeline import FixturesPipeline
from .utils.logger import RunLog, ScraperLogger, console_sink, file_sink, get_logger

logger = get_logger(__name__)

PROMPT = "Enter the fixtures date (YY-MM-DD): "


def prompt_for_query(ask: Callable[[str], str] = input, max_attempts: Optional[int] = None) -> FixtureQuery:
    """Ask for a YY-MM-DD date until one parses."""
    attempts = 0
    while True:
        attempts += 1
        try:
            return FixtureQuery.from_input(ask(PROMPT))
        except InvalidDateError as e:
            print(f"⚠️  {e}")
            if max_attempts is not None and attempts >= max_attempts:
                raise


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="LiveScore fixtures + head-to-head scraper")
    when = p.add_mutually_exclusive_group()
    when.add_argument("--date", type=str, help="Fixtures date (YY-MM-DD format); default is tomorrow")
    when.add_argument("--interactive", action="store_true", help="Prompt for the fixtures date")
    p.add_argument("--destination", choices=[d.value for d in Destination], default=Destination.LOCAL_FILE.value,
                   help="Where the report and log go (default: local_file)")
    p.add_argument("--output-dir", type=str, default=Config.OUTPUT_DIR,
                   help=f"Directory for local_file output (default: {Config.OUTPUT_DIR})")
    p.add_argument("--timeout", type=float, default=Config.REQUEST_TIMEOUT,
                   help=f"Per-request timeout in seconds (default: {Config.REQUEST_TIMEOUT:g})")
    p.add_argument("--build-id", type=str, default=Config.LIVESCORE_BUILD_ID,
                   help="LiveScore Next.js build id used in h2h URLs")
    p.add_argument("--log-file", type=str, help="Also mirror the run log to this file")
    p.add_argument("--progress", action="store_true", help="Show a tqdm progress bar over the matches")
    return p


def build_run_config(args: argparse.Namespace, ask: Callable[[str], str] = input) -> RunConfig:
    if args.interactive:
        query = prompt_for_query(ask)
    elif args.date:
        query = FixtureQuery.from_input(args.date)
    else:
        query = FixtureQuery.for_tomorrow()
    return RunConfig(
        query=query,
        destination=Destination(args.destination),
        output_dir=Path(args.output_dir),
        timeout=args.timeout,
        build_id=args.build_id,
        show_progress=args.progress,
    )


def cli(argv: Optional[List[str]] = None) -> int:
    """Command line interface"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        run_config = build_run_config(args)
    except InvalidDateError as e:
        parser.error(str(e))

    try:
        Config.validate_config(run_config.destination)
    except ConfigError as e:
        logger.error(f"main | {e}")
        return 2

    sinks = [console_sink()]
    if args.log_file:
        sinks.append(file_sink(args.log_file))
    run_log = RunLog(sinks=sinks)

    session = ScraperLogger()
    session.log_scraper_start()
    start = time.time()
    logger.info(f"main | target={run_config.query.target_token} destination={run_config.destination.value}")
    try:
        pipeline = FixturesPipeline(run_config, run_log=run_log)
        pipeline.run()
    except ConfigError as e:
        logger.error(f"main | {e}")
        return 2
    finally:
        run_log.close()
    session.log_scraper_end(True, time.time() - start, pipeline.get_stats())
    return 0


def main():
    sys.exit(cli())


if __name__ == "__main__":
    main()
