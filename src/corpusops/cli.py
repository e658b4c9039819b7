"""CLI entry point for corpusops."""

import argparse
import logging
import sys

from corpusops import engine
from corpusops.analysis import parse_slice_length
from corpusops.config import DEFAULT_CONFIG_PATH, AnalysisConfig, load_config
from corpusops.errors import CorpusOpsError
from corpusops.reports import ArtifactOutcome

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def _log_outcomes(outcomes: list[ArtifactOutcome]) -> int:
    """Log every artifact and return the number of failures."""
    failures = 0
    for outcome in outcomes:
        if outcome.ok:
            logger.info(f"  {outcome.path}")
        else:
            logger.error(f"  {outcome.error}")
            failures += 1
    return failures


def analyse_file(config: AnalysisConfig, path: str | None, keyword: str, lines: int) -> int:
    """Analyse a single file.

    Args:
        config: Loaded configuration
        path: File to analyse (default: config.default_file)
        keyword: Case-sensitive keyword for filtered.txt
        lines: Head/tail length

    Returns:
        Number of artifacts that failed to write
    """
    result = engine.analyse_file(path or config.default_file, keyword, lines, config)

    logger.info(f"Size: {result.descriptor.size_bytes} bytes")
    logger.info(f"Modified: {result.descriptor.modified_rfc3339}")
    logger.info(f"Lines: {result.line_count}")
    if result.stats.is_reportable:
        logger.info(f"Words: {result.stats.total_words}")
        logger.info(f"Average word length: {result.stats.average_word_length}")
    logger.info(
        f"Matching: {len(result.partition.matching)}, "
        f"not matching: {len(result.partition.non_matching)}"
    )
    return _log_outcomes(result.outcomes)


def analyse_directory(config: AnalysisConfig, root: str | None, ext: str | None) -> int:
    """Analyse every matching file under a folder."""
    root = root or config.base_dir
    result = engine.analyse_directory(root, config, extension=ext)

    logger.info(f"Walked {root}: {len(result.descriptors)} files, {len(result.merged)} lines")
    return _log_outcomes(result.outcomes)


def analyse_wikipedia(
    config: AnalysisConfig, article: str, keyword: str, lang: str | None
) -> int:
    """Fetch a Wikipedia article and write its summary."""
    if lang:
        config = config.model_copy(update={"wiki_lang": lang})
    result = engine.analyse_wikipedia(article, keyword, config)

    logger.info(f"Article: {result.article}")
    logger.info(f"Paragraphs: {len(result.paragraphs)}")
    logger.info(f"Matching '{keyword}': {len(result.partition.matching)}")
    return _log_outcomes(result.outcomes)


def menu(config: AnalysisConfig) -> None:
    """Run the interactive menu."""
    from corpusops.menu import MenuSession

    MenuSession(config).run()


def deck(config: AnalysisConfig) -> None:
    """Launch the Corpus Deck TUI."""
    # Import here to avoid loading Textual unless needed
    from corpusops.deck import main as deck_main

    deck_main(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="corpusops",
        description="corpusops - Text corpus inspection",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"key=value or .json config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    # file command
    file_parser = subparsers.add_parser(
        "file",
        help="Analyse a single file",
    )
    file_parser.add_argument("path", nargs="?", help="File path (default: default_file)")
    file_parser.add_argument(
        "-k",
        "--keyword",
        default="",
        help="Keyword for filtered.txt (default: match every line)",
    )
    file_parser.add_argument(
        "-n",
        "--lines",
        type=parse_slice_length,
        default=0,
        help="Line count for head.txt and tail.txt; non-numeric means 0 (default: 0)",
    )

    # dir command
    dir_parser = subparsers.add_parser(
        "dir",
        help="Analyse every matching file under a folder",
    )
    dir_parser.add_argument("root", nargs="?", help="Folder (default: base_dir)")
    dir_parser.add_argument(
        "-e",
        "--ext",
        default=None,
        help="File name suffix to match (default: default_ext)",
    )

    # wiki command
    wiki_parser = subparsers.add_parser(
        "wiki",
        help="Analyse the paragraphs of a Wikipedia article",
    )
    wiki_parser.add_argument("article", help="Article name, e.g. Go_(langage)")
    wiki_parser.add_argument("-k", "--keyword", default="", help="Keyword to select paragraphs")
    wiki_parser.add_argument("--lang", default=None, help="Wikipedia language (default: wiki_lang)")

    # menu command
    subparsers.add_parser(
        "menu",
        help="Interactive menu (default)",
    )

    # deck command
    subparsers.add_parser(
        "deck",
        help="Launch the Corpus Deck TUI",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = load_config(args.config)

    try:
        if args.command == "file":
            failures = analyse_file(config, args.path, args.keyword, args.lines)
        elif args.command == "dir":
            failures = analyse_directory(config, args.root, args.ext)
        elif args.command == "wiki":
            failures = analyse_wikipedia(config, args.article, args.keyword, args.lang)
        elif args.command == "deck":
            deck(config)
            failures = 0
        else:
            menu(config)
            failures = 0
    except CorpusOpsError as e:
        logger.error(str(e))
        sys.exit(1)

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
