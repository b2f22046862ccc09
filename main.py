"""
Command line entry point for vntext.
Normalizes, corrects, sorts, spells and reads Vietnamese text.
"""

import argparse
import sys
from pathlib import Path

from configs.config import Config
from vntext import (
    InvalidSyllableError,
    Normalizer,
    check_char,
    fix_accent,
    fix_i_or_y,
    format_name,
    generate_words,
    number_to_text,
    place_accent,
    remove_accent,
    scan_words,
    sort_people_name,
    sort_word,
    speak,
)
from vntext.utils.logger import setup_logger


def read_lines(args) -> list:
    """Lines to process: positional text, else the --input file, else stdin."""
    if getattr(args, 'text', None):
        return [' '.join(args.text)]
    if getattr(args, 'input', None):
        input_path = Path(args.input)
        if not input_path.exists():
            raise FileNotFoundError(f"Input file not found: {input_path}")
        return input_path.read_text(encoding='utf-8').splitlines()
    return sys.stdin.read().splitlines()


def write_lines(lines, output=None):
    """Write result lines to the --output file, or to stdout."""
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    else:
        for line in lines:
            print(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vietnamese text normalization")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration YAML file (defaults are used if not provided)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Verbosity level (overrides config)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_text_command(name, help_text):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("text", nargs="*", help="Text to process (reads --input or stdin if empty)")
        sub.add_argument("--input", type=str, default=None, help="Input file, one text per line")
        sub.add_argument("--output", type=str, default=None, help="Output file (stdout if not provided)")
        return sub

    add_text_command("normalize", "Run the configured normalization steps")
    remove = add_text_command("remove-accent", "Remove or convert accents")
    remove.add_argument(
        "--mode",
        type=str,
        choices=["remove", "alphabet", "ncr_decimal"],
        default=None,
        help="Accent removal mode (overrides config)"
    )
    add_text_command("fix-accent", "Correct wrong accent placements")
    add_text_command("fix-iy", "Correct wrong uses of i and y")
    add_text_command("format-name", "Format people names")
    add_text_command("speak", "Spell out a text")
    scan = add_text_command("scan", "Find incorrect words")
    scan.add_argument("--correct", action="store_true", help="Return correct words instead")
    sort = add_text_command("sort", "Sort lines in Vietnamese order")
    sort.add_argument("--people", action="store_true", help="Sort as people names")

    place = subparsers.add_parser("place-accent", help="Place a tone mark on a single word")
    place.add_argument("word", type=str, help="Single word, e.g. 'hoa'")
    place.add_argument("tone", type=int, choices=range(6), help="0 flat, 1 huyền, 2 hỏi, 3 ngã, 4 sắc, 5 nặng")
    place.add_argument(
        "--style",
        type=str,
        choices=["classic", "modern"],
        default=None,
        help="Tone placement style (overrides config)"
    )
    place.add_argument("--strict", action="store_true", help="Fail on words outside the syllable grammar")

    number = subparsers.add_parser("number", help="Read a number in Vietnamese")
    number.add_argument("amount", type=str, help="Number, e.g. 1452369")

    char = subparsers.add_parser("check-char", help="Check a character is in the Vietnamese alphabet")
    char.add_argument("char", type=str, help="Single character")

    generate = subparsers.add_parser("generate-words", help="Generate all single words")
    generate.add_argument("--all", action="store_true", help="Every leading consonant, not only attested ones")
    generate.add_argument("--output", type=str, default=None, help="Output file (stdout if not provided)")

    return parser


def main(argv=None) -> int:
    """Main command line function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = Config.from_yaml(args.config) if args.config else Config()
    if args.log_level is not None:
        config.logging.level = args.log_level

    logger = setup_logger(
        output=config.logging.output,
        level=config.logging.level,
        color=config.logging.color,
        name="vntext"
    )
    logger.debug(f"Command: {args.command}")
    logger.debug(f"Configuration: {config.model_dump()}")

    if args.command == "place-accent":
        style = args.style or config.accent.style
        strict = args.strict or config.accent.strict
        try:
            print(place_accent(args.word, args.tone, style=style, strict=strict))
        except InvalidSyllableError as e:
            logger.error(str(e))
            return 1
        return 0

    if args.command == "number":
        text = number_to_text(args.amount)
        if not text:
            logger.error(f"Cannot read amount: {args.amount}")
            return 1
        print(text)
        return 0

    if args.command == "check-char":
        result = check_char(args.char)
        print("true" if result else "false")
        return 0 if result else 1

    if args.command == "generate-words":
        words = generate_words(strict=not args.all, style=config.accent.style)
        logger.info(f"Generated {len(words)} words")
        write_lines(words, args.output)
        return 0

    # Each positional argument is one item to sort
    if args.command == "sort" and args.text:
        lines = list(args.text)
    else:
        lines = read_lines(args)

    if args.command == "normalize":
        normalizer = Normalizer.from_config(config, logger=logger)
        results = normalizer.normalize_lines(lines)
    elif args.command == "remove-accent":
        mode = args.mode or config.accent.remove_mode
        results = [remove_accent(line, mode) for line in lines]
    elif args.command == "fix-accent":
        results = [fix_accent(line) for line in lines]
    elif args.command == "fix-iy":
        results = [fix_i_or_y(line) for line in lines]
    elif args.command == "format-name":
        results = [format_name(line) for line in lines]
    elif args.command == "speak":
        results = [speak(line) for line in lines]
    elif args.command == "scan":
        results = [' '.join(scan_words(line, want_incorrect=not args.correct)) for line in lines]
    elif args.command == "sort":
        lines = [line for line in lines if line.strip()]
        results = sort_people_name(lines) if args.people else sort_word(lines)
    else:
        parser.error(f"Unknown command: {args.command}")

    write_lines(results, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
