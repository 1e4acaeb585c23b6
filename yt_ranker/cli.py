import argparse
import logging
import sys

from yt_ranker.config import (
    DEFAULT_ALPHA,
    DEFAULT_BETA,
    DEFAULT_DURATION,
    DEFAULT_MAX_COMMENTS,
    DEFAULT_MAX_RESULTS,
    DEFAULT_TIMEOUT,
    DEFAULT_WORKERS,
    MissingApiKeyError,
    get_api_key,
    save_api_key,
)
from yt_ranker.output.json_out import JsonPrinter
from yt_ranker.output.table import TablePrinter
from yt_ranker.services.query_builder import build_skill_query
from yt_ranker.services.ranker import Ranker
from yt_ranker.services.ranking_service import RankingService
from yt_ranker.youtube_client import VALID_DURATIONS, YouTubeClient

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


def run(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="yt-ranker",
        description="Rank YouTube videos on a topic by engagement and comment sentiment.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug).")
    sub = parser.add_subparsers(dest="command", required=True)

    rank = sub.add_parser("rank", help="Search a topic and print ranked videos.")
    rank.add_argument("topic", help="Topic (or skill, with --keywords) to search for.")
    rank.add_argument("--max-results", type=int, default=DEFAULT_MAX_RESULTS, help="Candidates to fetch (max 50).")
    rank.add_argument("--comments", type=int, default=DEFAULT_MAX_COMMENTS, help="Comments sampled per video.")
    rank.add_argument("--workers", type=int, default=DEFAULT_WORKERS, help="Concurrent per-video fetches.")
    rank.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Per-request timeout in seconds.")
    rank.add_argument("--alpha", type=float, default=DEFAULT_ALPHA, help="Engagement weight.")
    rank.add_argument("--beta", type=float, default=DEFAULT_BETA, help="Sentiment weight.")
    rank.add_argument("--duration", choices=sorted(VALID_DURATIONS), default=DEFAULT_DURATION)
    rank.add_argument(
        "--keywords",
        type=str,
        default=None,
        help='Comma-separated keywords; builds a "<topic> <keywords> tutorial guide tips" query.',
    )
    rank.add_argument("--format", choices=["table", "json"], default="table", help="Output format.")

    sk = sub.add_parser("set-key", help="Save the YouTube API key to the per-user config file.")
    sk.add_argument("key", help="YouTube Data API v3 key.")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.command == "rank":
        return _handle_rank(args)
    if args.command == "set-key":
        return _handle_set_key(args)
    return 0


def main() -> None:
    sys.exit(run())


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _handle_rank(args: argparse.Namespace) -> int:
    try:
        api_key = get_api_key()
    except MissingApiKeyError as e:
        print(str(e), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    yt = YouTubeClient(api_key=api_key, timeout=args.timeout)
    svc = RankingService(
        yt=yt,
        ranker=Ranker(alpha=args.alpha, beta=args.beta),
        max_workers=args.workers,
        max_comments=args.comments,
        duration=args.duration,
    )

    topic = args.topic
    if args.keywords is not None:
        keywords = [k.strip() for k in args.keywords.split(",") if k.strip()]
        topic = build_skill_query(topic, keywords)
    logger.info(f"Ranking query: {topic!r}")

    results = svc.rank(topic, max_results=args.max_results)

    if args.format == "json":
        JsonPrinter().print(results)
    else:
        TablePrinter().print(results)
    return 0


def _handle_set_key(args: argparse.Namespace) -> int:
    path = save_api_key(args.key)
    if path is None:
        print("Empty key, nothing saved.", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    print(f"Saved API key to {path}")
    return 0
