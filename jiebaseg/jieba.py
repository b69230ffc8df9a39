"""One object bundling every segmentation mode over a shared dictionary and model."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Union

from .dict_trie import UNKNOWN_TAG, DictTrie
from .full_segment import FullSegment
from .hmm_model import HMMModel
from .hmm_segment import HMMSegment
from .keyword_extractor import KeywordExtractor
from .mix_segment import MixSegment
from .mp_segment import MPSegment
from .query_segment import QuerySegment

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_DICT_DIR = Path(__file__).resolve().parent.parent / "dict"


def _get_path(path: PathLike, default_file: str) -> str:
    if os.fspath(path):
        return os.fspath(path)
    return str(DEFAULT_DICT_DIR / default_file)


class Jieba:
    """Segmenters, tagger and keyword extractor sharing one dictionary and HMM."""

    def __init__(
        self,
        dict_path: PathLike = "",
        model_path: PathLike = "",
        user_dict_path: PathLike = "",
        idf_path: PathLike = "",
        stop_word_path: PathLike = "",
    ) -> None:
        self.dict_trie = DictTrie(
            _get_path(dict_path, "jieba.dict.utf8"),
            _get_path(user_dict_path, "user.dict.utf8"),
        )
        self.model = HMMModel(_get_path(model_path, "hmm_model.utf8"))
        self.mp_seg = MPSegment(self.dict_trie)
        self.hmm_seg = HMMSegment(self.model)
        self.mix_seg = MixSegment(self.dict_trie, self.model)
        self.full_seg = FullSegment(self.dict_trie)
        self.query_seg = QuerySegment(self.dict_trie, self.model)
        self.extractor = KeywordExtractor(
            self.dict_trie,
            self.model,
            _get_path(idf_path, "idf.utf8"),
            _get_path(stop_word_path, "stop_words.utf8"),
        )

    def cut(self, sentence: str, hmm: bool = True) -> list[str]:
        """Segment with the dictionary, recovering unknown words by HMM when asked."""
        return self.mix_seg.cut(sentence, hmm)

    def cut_all(self, sentence: str) -> list[str]:
        """List every dictionary word found in the sentence."""
        return self.full_seg.cut(sentence)

    def cut_for_search(self, sentence: str, hmm: bool = True) -> list[str]:
        """Segment for indexing: long words are followed by their shorter parts."""
        return self.query_seg.cut(sentence, hmm)

    def cut_hmm(self, sentence: str) -> list[str]:
        """Segment with the HMM alone."""
        return self.hmm_seg.cut(sentence)

    def cut_small(self, sentence: str, max_word_len: int) -> list[str]:
        """Segment with words no longer than ``max_word_len`` runes."""
        return self.mp_seg.cut(sentence, max_word_len)

    def tag(self, sentence: str) -> list[tuple[str, str]]:
        """Segment and pair each word with its part-of-speech tag."""
        return self.mix_seg.tag(sentence)

    def lookup_tag(self, word: str) -> str:
        """Return the part-of-speech tag of one word."""
        return self.mix_seg.lookup_tag(word)

    def insert_user_word(self, word: str, freq: int = 0, tag: str = UNKNOWN_TAG) -> bool:
        """Add a word to the dictionary; a zero frequency uses the default weight."""
        return self.dict_trie.insert_user_word(word, freq, tag)

    def delete_user_word(self, word: str, tag: str = UNKNOWN_TAG) -> bool:
        """Remove a word's branch from the dictionary."""
        return self.dict_trie.delete_user_word(word, tag)

    def find(self, word: str) -> bool:
        """True when the word is in the dictionary."""
        return self.dict_trie.contains(word)

    def reset_separators(self, separators: str) -> None:
        """Replace the separator characters of every segmenter."""
        for segment in (self.mp_seg, self.hmm_seg, self.mix_seg, self.full_seg, self.query_seg):
            segment.reset_separators(separators)

    def load_user_dict(self, source: Union[PathLike, Iterable[str]]) -> None:
        """Load user words from paths or from dictionary lines."""
        self.dict_trie.load_user_dict(source)