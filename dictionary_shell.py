#!/usr/bin/env python3
"""
dictionary_shell.py

Builds a dictionary trie from one or more word sources and then either runs
an interactive shell over it or, with --lookup-file, looks up every word of a
file and prints the results.

Usage:
    python dictionary_shell.py --sample
    python dictionary_shell.py --entries-file slang.txt --wordnet 20000
    python dictionary_shell.py --sample --lookup-file /path/to/words.txt

Shell commands:
    add <word> <description...>   store or replace a word
    find <word>                   show the description of a word
    prefix <prefix>               list words starting with a prefix
    list                          list every word
    count                         number of stored words
    help                          show this list
    quit | exit                   leave the shell

Pass --verbose for debug information on stderr (prefix "DEBUG:").
"""

import argparse
import logging
import os
import sys

from word_sources import (
    DEFAULT_WORDFREQ_LANG,
    build_trie,
    load_sample_entries,
    load_text_entries,
    load_wordfreq_entries,
    load_wordnet_entries,
)

logger = logging.getLogger(__name__)

PROMPT = "> "

HELP_TEXT = """Commands:
  add <word> <description...>
  find <word>
  prefix <prefix>
  list
  count
  help
  quit | exit"""


def format_entries(entries):
    return [f"{word}: {description}" for word, description in entries]


def handle_command(trie, line: str):
    """
    Execute one shell command against `trie`.
    Returns (output_lines, keep_running).
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return [], True
    command = parts[0].lower()
    arg = parts[1].strip() if len(parts) > 1 else ""
    logger.debug(f"handle_command: command='{command}' arg='{arg}'")

    if command in ("quit", "exit"):
        return [], False
    if command == "help":
        return [HELP_TEXT], True
    if command == "count":
        return [f"{len(trie)} words"], True
    if command == "list":
        entries = trie.list_all()
        return (format_entries(entries) or ["(empty dictionary)"]), True
    if command == "add":
        word_and_desc = arg.split(maxsplit=1)
        if len(word_and_desc) != 2:
            return ["Usage: add <word> <description...>"], True
        word, description = word_and_desc
        trie.insert(word, description)
        return [f"Added: {word}"], True
    if command == "find":
        if not arg:
            return ["Usage: find <word>"], True
        description = trie.search(arg)
        if description is None:
            return [f"Not found: {arg}"], True
        return [f"{arg}: {description}"], True
    if command == "prefix":
        if not arg:
            return ["Usage: prefix <prefix>"], True
        entries = trie.prefix_search(arg)
        if not entries:
            return [f"No match for prefix '{arg}'"], True
        return format_entries(entries), True

    return [f"Unknown command '{command}'. Type 'help' for a list of commands."], True


def run_shell(trie, stdin=None, stdout=None):
    """Read commands from `stdin` (default sys.stdin) until quit/exit or end of input."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    interactive = stdin.isatty()
    while True:
        if interactive:
            stdout.write(PROMPT)
            stdout.flush()
        line = stdin.readline()
        if not line:
            break
        output, keep_running = handle_command(trie, line)
        for out_line in output:
            print(out_line, file=stdout)
        if not keep_running:
            break
    logger.debug("run_shell: leaving shell")


def load_words_to_lookup(path: str):
    """
    Read each nonempty line of `path`, stripped, as a word to look up.
    Raises RuntimeError if the file does not exist.
    """
    if not os.path.isfile(path):
        raise RuntimeError(f"could not open lookup file at '{path}'")

    words = []
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for lineno, line in enumerate(f, start=1):
            w = line.strip()
            if not w:
                logger.debug(f"load_words_to_lookup: Line {lineno} is blank, skipping")
                continue
            words.append(w)
    logger.debug(f"load_words_to_lookup: Collected {len(words)} words from file")
    return words


def lookup_words(trie, words):
    """Return a dict mapping each word to its description, or None if absent."""
    results = {}
    for w in words:
        results[w] = trie.search(w)
        logger.debug(f"lookup_words: '{w}' → {results[w] is not None}")
    return results


def build_parser():
    parser = argparse.ArgumentParser(
        description="Build an in-memory word dictionary and query it interactively or from a file."
    )
    parser.add_argument(
        "--sample", "-s", action="store_true",
        help="Load the built-in slang sample entries."
    )
    parser.add_argument(
        "--entries-file", "-e", default=None,
        help="Path to a text file of 'word<TAB>description' or 'word: description' lines."
    )
    parser.add_argument(
        "--wordnet", "-w", nargs="?", type=int, const=0, default=None, metavar="LIMIT",
        help="Load WordNet definitions (via NLTK). Optional LIMIT caps the number of entries."
    )
    parser.add_argument(
        "--wordfreq", "-f", type=int, default=None, metavar="LIMIT",
        help="Load the LIMIT most frequent words from wordfreq."
    )
    parser.add_argument(
        "--lang", "-l", default=DEFAULT_WORDFREQ_LANG,
        help=f"Language code for wordfreq (default: {DEFAULT_WORDFREQ_LANG})."
    )
    parser.add_argument(
        "--lookup-file", "-v", default=None,
        help="Look up every word of this file (one per line) instead of starting the shell."
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Also print debug information to stderr."
    )
    return parser


def collect_sources(args):
    """Load every source selected on the command line, in a fixed order."""
    sources = []
    if args.wordfreq is not None:
        sources.append(load_wordfreq_entries(args.wordfreq, args.lang))
    if args.wordnet is not None:
        sources.append(load_wordnet_entries(args.wordnet or None))
    if args.entries_file:
        sources.append(load_text_entries(os.path.abspath(os.path.expanduser(args.entries_file))))
    if args.sample or not sources:
        sources.append(load_sample_entries())
    return sources


def log_level(verbose):
    """Per-source progress is always shown at INFO; --verbose adds DEBUG detail."""
    return logging.DEBUG if verbose else logging.INFO


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=log_level(args.verbose),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        trie = build_trie(*collect_sources(args))
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    logger.debug(f"main: Trie built with {len(trie)} words")

    try:
        if args.lookup_file:
            lookup_path = os.path.abspath(os.path.expanduser(args.lookup_file))
            words = load_words_to_lookup(lookup_path)
            if not words:
                print("No words found in lookup file. Exiting.", file=sys.stderr)
                sys.exit(1)
            results = lookup_words(trie, words)
            found = 0
            for word, description in results.items():
                if description is None:
                    print(f"{word}: NOT FOUND")
                else:
                    found += 1
                    print(f"{word}: {description}")
            print(f"{found} found, {len(results) - found} not found", file=sys.stderr)
        else:
            run_shell(trie)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        trie.destroy()


if __name__ == "__main__":
    main()
