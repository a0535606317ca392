"""
Corpus sources: bundled default documents and JSON corpus files.

JSON corpus format:
    [
        {"id": 0, "content": "first document"},
        {"id": 1, "content": "second document"}
    ]
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .ranking.corpus import CorpusError

logger = logging.getLogger(__name__)


DEFAULT_DOCUMENTS: List[Dict[str, Any]] = [
    {"id": 0, "content": "Lorem ipsum blah blah fox"},
    {"id": 1, "content": "The quick brown fox jumped over the lazy dog. The dog slept peacefully."},
    {"id": 2, "content": "I have a dream that one day this nation will rise up and live out the true meaning of its creed: 'We hold these truths to be self-evident, that all men are created equal.'"},
    {"id": 3, "content": "To be, or not to be, that is the question: Whether 'tis nobler in the mind to suffer The slings and arrows of outrageous fortune, Or to take arms against a sea of troubles And by opposing end them."},
    {"id": 4, "content": "In a hole in the ground there lived a hobbit. Not a nasty, dirty, wet hole, filled with the ends of worms and an oozy smell, nor yet a dry, bare, sandy hole with nothing in it to sit down on or to eat: it was a hobbit-hole, and that means comfort."},
    {"id": 5, "content": "The only way to do great work is to love what you do. If you haven't found it yet, keep looking. Don't settle. As with all matters of the heart, you'll know when you find it."},
    {"id": 6, "content": "It is a truth universally acknowledged, that a single man in possession of a good fortune, must be in want of a wife."},
    {"id": 7, "content": "It was the best of times, it was the worst of times, it was the age of wisdom, it was the age of foolishness, it was the epoch of belief, it was the epoch of incredulity, it was the season of Light, it was the season of Darkness, it was the spring of hope, it was the winter of despair."},
    {"id": 8, "content": "Two households, both alike in dignity, In fair Verona, where we lay our scene, From ancient grudge break to new mutiny, Where civil blood makes civil hands unclean."},
    {"id": 9, "content": "Once upon a time in a far-off land, there was a princess who was very beautiful and very kind, but also very sad."},
    {"id": 10, "content": "It is not in the stars to hold our destiny but in ourselves."},
    {"id": 11, "content": "In the beginning God created the heaven and the earth. And the earth was without form, and void; and darkness was upon the face of the deep. And the Spirit of God moved upon the face of the waters."},
    {"id": 12, "content": "There are known knowns; there are things we know we know. We also know there are known unknowns; that is to say we know there are some things we do not know. But there are also unknown unknowns – the ones we don't know we don't know."},
    {"id": 13, "content": "When I consider how my light is spent Ere half my days in this dark world and wide, And that one talent which is death to hide Lodg'd with me useless, though my soul more bent To serve therewith my Maker, and present My true account, lest he returning chide;"},
    {"id": 14, "content": "I wandered lonely as a cloud That floats on high o'er vales and hills, When all at once I saw a crowd, A host, of golden daffodils; Beside the lake, beneath the trees, Fluttering and dancing in the breeze."},
    {"id": 15, "content": "Do not go gentle into that good night, Old age should burn and rave at close of day; Rage, rage against the dying of the light."},
    {"id": 16, "content": "The sun was shining on the sea, Shining with all his might: He did his very best to make The billows smooth and bright."},
    {"id": 17, "content": "In Xanadu did Kubla Khan A stately pleasure-dome decree: Where Alph, the sacred river, ran Through caverns measureless to man Down to a sunless sea."},
    {"id": 18, "content": "I celebrate myself, and sing myself, And what I assume you shall assume, For every atom belonging to me as good belongs to you."},
    {"id": 19, "content": "The love that moves the sun and all the stars."},
    {"id": 20, "content": "It was a bright cold day in April, and the clocks were striking thirteen. Winston Smith, his chin nuzzled into his breast in an effort to escape the vile wind, slipped quickly through the glass doors of Victory Mansions, though not quickly enough to prevent a swirl of gritty dust from entering along with him."},
    {"id": 21, "content": "It was a pleasure to burn. It was a special pleasure to see things eaten, to see things blackened and changed."},
    {"id": 22, "content": "The human race, to which so many of my readers belong, has been playing at children's games from the beginning, and will probably do it till the end, which is a nuisance for the few people who grow up. And one of the games to which it is most attached is called 'Keep to-morrow dark,' and which is also sometimes called 'Cheat the Prophet.'"},
    {"id": 23, "content": "Happy families are all alike; every unhappy family is unhappy in its own way."},
    {"id": 24, "content": "I am an invisible man. No, I am not a spook like those who haunted Edgar Allan Poe; nor am I one of your Hollywood-movie ectoplasms. I am a man of substance, of flesh and bone, fiber and liquids—and I might even be said to possess a mind. I am invisible, understand, simply because people refuse to see me."},
    {"id": 25, "content": "It was a dark and stormy night; the rain fell in torrents, except at occasional intervals, when it was checked by a violent gust of wind which swept up the streets (for it is in London that our scene lies), rattling along the housetops, and fiercely agitating the scanty flame of the lamps that struggled against the darkness."},
    {"id": 26, "content": "The sky above the port was the color of television, tuned to a dead channel."},
    {"id": 27, "content": "All children, except one, grow up. They soon know that they will grow up, and the way Wendy knew was this. One day when she was two years old she was playing in a garden, and she plucked another flower and ran with it to her mother. I suppose she must have looked rather delightful, for Mrs. Darling put her hand to her heart and cried, 'Oh, why can't you remain like this for ever!' This was all that passed between them on the subject, but henceforth Wendy knew that she must grow up. You always know after you are two. Two is the beginning of the end."},
    {"id": 28, "content": "As Gregor Samsa awoke one morning from uneasy dreams he found himself transformed in his bed into a gigantic insect."},
    {"id": 29, "content": "Call me Ishmael. Some years ago—never mind how long precisely—having little or no money in my purse, and nothing particular to interest me on shore, I thought I would sail about a little and see the watery part of the world."},
    {"id": 30, "content": "It was the day my grandmother exploded."},
]


def load_documents(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Load corpus documents from a JSON file.

    Only the file structure is checked here; ids and content types are
    validated when the Corpus is built.

    Args:
        path: Path to JSON file with a list of {"id", "content"} objects

    Returns:
        List of document dicts

    Raises:
        FileNotFoundError: File does not exist
        CorpusError: File is not valid JSON or not a list of objects
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CorpusError(f"Invalid JSON in corpus file {path}: {e}") from e

    if not isinstance(data, list):
        raise CorpusError(f"Corpus file {path} must contain a JSON array, got {type(data).__name__}")

    for position, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise CorpusError(f"Corpus file {path}: entry #{position} is not an object")

    logger.info(f"Loaded {len(data)} documents from {path}")
    return data
