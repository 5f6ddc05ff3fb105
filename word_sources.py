"""
word_sources.py

Loaders that produce (word, description) entries for the dictionary trie:
the built-in slang sample, a local entries file, WordNet definitions (via
NLTK) and the wordfreq frequency list. Every loader returns a list of pairs
whose words are pure lowercase a–z, and raises RuntimeError when a source
that was asked for cannot deliver anything.

Third-party requirements: pip install nltk wordfreq
"""

import logging
import os
import re

import nltk
from nltk.corpus import wordnet as wn
from wordfreq import iter_wordlist, zipf_frequency

from trie import Trie

logger = logging.getLogger(__name__)

DEFAULT_WORDFREQ_LANG = "en"
DEFAULT_WORDFREQ_LIMIT = 5000

# Kept in insertion order: the second "sus" deliberately overwrites the first.
SAMPLE_ENTRIES = [
    ("sus", "suspicious behavior"),
    ("yeet", "to throw something forcefully"),
    ("simp", "someone who does way too much for a person they like"),
    ("sus", "updated: still suspicious"),
    ("savage", "cool, fierce, or brutally honest"),
    ("ship", "to support a romantic relationship between two people"),
    ("lit", "exciting or excellent"),
    ("salty", "bitter or upset over something small"),
    ("goat", "greatest of all time"),
    ("flex", "to show off"),
    ("ghost", "to suddenly stop all communication with someone"),
    ("vibe", "the mood or feeling of a person, place, or situation"),
]

_ENTRY_SEPARATOR = re.compile(r"\t|:\s*")


################################################################################
# UTILITY FUNCTIONS
################################################################################

def is_pure_alpha(word):
    """Return True if `word` consists of only lowercase a–z."""
    return bool(re.fullmatch(r"[a-z]+", word))


################################################################################
# 1. Built-in slang sample
################################################################################

def load_sample_entries():
    """Return a copy of the built-in sample entries, in insertion order."""
    logger.info(f"Loaded {len(SAMPLE_ENTRIES)} sample entries")
    return list(SAMPLE_ENTRIES)


################################################################################
# 2. Local entries file (raises on failure)
################################################################################

def load_text_entries(path: str):
    """
    Read `word<TAB>description` or `word: description` lines from `path`.
    Blank lines and '#' comments are ignored; malformed lines and words with
    non a–z characters are skipped with a warning.
    Raises RuntimeError if the file is missing or yields no valid entries.
    """
    if not os.path.isfile(path):
        raise RuntimeError(f"Entries file error: file not found: {path}")

    entries = []
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for lineno, line in enumerate(f, start=1):
            original = line.rstrip("\r\n")
            if not original.strip() or original.lstrip().startswith("#"):
                continue
            parts = _ENTRY_SEPARATOR.split(original, maxsplit=1)
            if len(parts) != 2 or not parts[1].strip():
                logger.warning(f"Skipping malformed line {lineno} in {path}: '{original}'")
                continue
            w = parts[0].strip().lower()
            if not is_pure_alpha(w):
                logger.warning(f"Skipping invalid word '{parts[0].strip()}' on line {lineno}")
                continue
            logger.debug(f"load_text_entries: Line {lineno} -> '{w}'")
            entries.append((w, parts[1].strip()))

    if not entries:
        raise RuntimeError(f"Entries file error: no valid entries found in {path}")
    logger.info(f"Loaded {len(entries)} entries from {path}")
    return entries


################################################################################
# 3. WordNet (NLTK) definitions (raises on failure)
################################################################################

def _ensure_wordnet():
    try:
        wn.ensure_loaded()
    except LookupError:
        logger.info("WordNet not found locally. Downloading via nltk.download('wordnet')")
        try:
            nltk.download("wordnet", quiet=True)
            wn.ensure_loaded()
        except Exception as e:
            raise RuntimeError(f"WordNet download error: {e}")


def load_wordnet_entries(limit=None):
    """
    Map every a–z WordNet lemma to the definition of the first synset it
    appears in. Stops after `limit` entries when a limit is given.
    Raises RuntimeError if the corpus is unavailable or yields nothing.
    """
    if limit is not None and limit <= 0:
        raise RuntimeError(f"WordNet loader error: limit must be positive, got {limit}")
    _ensure_wordnet()

    entries = []
    seen = set()
    try:
        for synset in wn.all_synsets():
            for lemma in synset.lemma_names():
                w = lemma.lower()
                if w in seen or not is_pure_alpha(w):
                    continue
                seen.add(w)
                entries.append((w, synset.definition()))
                if limit is not None and len(entries) >= limit:
                    break
            if limit is not None and len(entries) >= limit:
                break
    except Exception as e:
        raise RuntimeError(f"WordNet iteration error: {e}")

    if not entries:
        raise RuntimeError("WordNet loader error: no lemmas found")
    logger.info(f"Loaded {len(entries)} WordNet definitions (a–z only)")
    return entries


################################################################################
# 4. wordfreq frequency list (raises on failure)
################################################################################

def load_wordfreq_entries(limit=DEFAULT_WORDFREQ_LIMIT, lang=DEFAULT_WORDFREQ_LANG):
    """
    Take the `limit` most frequent a–z words of `lang` from wordfreq and
    describe each one by its Zipf frequency.
    """
    if limit <= 0:
        raise RuntimeError(f"wordfreq loader error: limit must be positive, got {limit}")

    entries = []
    seen = set()
    try:
        for w in iter_wordlist(lang):
            w_lower = w.lower()
            if w_lower in seen or not is_pure_alpha(w_lower):
                continue
            seen.add(w_lower)
            entries.append((w_lower, f"zipf frequency {zipf_frequency(w_lower, lang):.2f}"))
            if len(entries) >= limit:
                break
    except Exception as e:
        raise RuntimeError(f"wordfreq loader error: {e}")

    if not entries:
        raise RuntimeError("wordfreq loader error: no words retrieved")
    logger.info(f"Loaded {len(entries)} entries from wordfreq ({lang})")
    return entries


################################################################################
# Building the trie
################################################################################

def build_trie(*sources):
    """
    Insert each list of (word, description) entries into a new Trie, in
    order, so later sources overwrite earlier ones. Returns the Trie.
    """
    trie = Trie()
    for entries in sources:
        before = len(trie)
        trie.insert_many(entries)
        logger.info(f"Inserted {len(entries)} entries → trie size now {len(trie)} (+{len(trie) - before})")
    return trie
