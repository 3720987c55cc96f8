"""
Command Line Interface for feed-catcher.
"""

import argparse
import sys
from functools import partial

from feed_catcher import config
from feed_catcher.cancellation import StopListener, StopToken
from feed_catcher.data.collection import FeedError
from feed_catcher.download.downloader import download
from feed_catcher.logging_config import configure_logging, setup_logging
from feed_catcher.runner import run
from feed_catcher.settings import default_download_path, load_settings
from feed_catcher.validation import ValidationError

logger = setup_logging(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='feed-catcher',
        description='Download the videos of an RSS feed into a folder per series',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  feed-catcher -feedurl "https://example.com/feed.xml?token=abc"
  feed-catcher -downloadpath ~/Videos -feedurl "https://example.com/feed.xml"

Type "stop" and press <Enter> while downloading to stop after the current item.
        """
    )
    parser.add_argument(
        '-downloadpath', '--download-path', dest='download_path',
        default=default_download_path(),
        help='The target directory for your videos (default: %(default)s)'
    )
    parser.add_argument(
        '-feedurl', '--feed-url', dest='feed_url',
        default=config.DEFAULT_FEED_URL,
        help='Your feed URL'
    )
    parser.add_argument(
        '--log-level', dest='log_level', default=config.LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default: %(default)s)'
    )
    parser.add_argument(
        '--log-file', dest='log_file', default=config.LOG_FILE,
        help='Also write log messages to this file'
    )
    parser.add_argument(
        '--no-progress', dest='show_progress', action='store_false',
        help='Do not show progress bars'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {config.VERSION}')
    return parser


def main(argv=None):
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    print(f"{parser.prog} (Version: {config.VERSION})\n")

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)

    configure_logging(args.log_level, args.log_file, force=True)

    try:
        settings = load_settings(args.download_path, args.feed_url)
    except ValidationError as e:
        print(f"❌ {e}")
        if args.feed_url == config.DEFAULT_FEED_URL or not args.feed_url.strip():
            parser.print_usage()
        return 1

    stop_token = StopToken()
    listener = StopListener(stop_token).start()
    print('Write "stop" and press <Enter> to stop downloading.')

    try:
        run(settings, stop_token, fetch_one=partial(download, show_progress=args.show_progress))
    except FeedError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\n⚠️  Download interrupted by user.")
        return 130
    finally:
        listener.close()
        listener.join(config.LISTENER_JOIN_TIMEOUT)

    return 0


if __name__ == '__main__':
    sys.exit(main())
