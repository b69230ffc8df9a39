# jiebaseg

Chinese word segmentation driven by a frequency dictionary and a hidden
Markov model, with part-of-speech tagging and TF-IDF and TextRank keyword
extraction. Pure Python, no dependencies.

## Installation

    pip install jiebaseg

## Data files

The segmenters read plain UTF-8 data files, which you supply:

- a main dictionary: one `word frequency tag` entry per line;
- an optional user dictionary: lines of `word`, `word tag` or
  `word freq tag`; several files can be given, separated by `|` or `;`;
- an HMM model: start, transition and emission probabilities for the
  B/E/M/S states (blank lines and lines starting with `#` are skipped);
- an IDF table: one `word idf` entry per line;
- a stop-word list: one word per line.

`Jieba` resolves any path left empty to a file of the default name
(`jieba.dict.utf8`, `user.dict.utf8`, `hmm_model.utf8`, `idf.utf8`,
`stop_words.utf8`) in a `dict` directory beside the `jiebaseg` package
directory; all five files must then exist there.

## Usage

```python
from jiebaseg.jieba import Jieba

jieba = Jieba(
    dict_path="dict/jieba.dict.utf8",
    model_path="dict/hmm_model.utf8",
    user_dict_path="dict/user.dict.utf8",
    idf_path="dict/idf.utf8",
    stop_word_path="dict/stop_words.utf8",
)

jieba.cut("他来到了网易杭研大厦")             # dictionary + HMM for unknown words
jieba.cut("他来到了网易杭研大厦", hmm=False)  # dictionary only
jieba.cut_all("我来到北京清华大学")           # every dictionary word found
jieba.cut_for_search("小明硕士毕业于中国科学院计算所")
jieba.cut_hmm("南京市长江大桥")               # HMM alone
jieba.cut_small("南京市长江大桥", 3)          # words of at most 3 characters

jieba.tag("我是蓝翔技工拖拉机学院手扶拖拉机专业的")  # [(word, tag), ...]
jieba.lookup_tag("拖拉机")

jieba.insert_user_word("男默女泪")
jieba.find("男默女泪")                         # True
jieba.delete_user_word("男默女泪")

jieba.extractor.extract("我是拖拉机学院手扶拖拉机专业的。", 5)
```

Words missing from the dictionary are tagged `m` when their ASCII
characters are all digits, `eng` when they hold other ASCII, and `x`
otherwise.

`delete_user_word` removes the whole trie branch under the word's first
character, so every dictionary word that starts with that character goes
with it.

The segmenters can also be used on their own; each works on a shared
`DictTrie` and `HMMModel` (or takes file paths and loads its own):

```python
from jiebaseg.dict_trie import DictTrie, UserWordWeight
from jiebaseg.hmm_model import HMMModel
from jiebaseg.mix_segment import MixSegment
from jiebaseg.keyword_extractor import KeywordExtractor
from jiebaseg.textrank import TextRankExtractor

trie = DictTrie("dict/jieba.dict.utf8", "dict/user.dict.utf8", UserWordWeight.MEDIAN)
model = HMMModel("dict/hmm_model.utf8")

segment = MixSegment(trie, model)
segment.cut("我来自北京邮电大学。")
segment.cut_words("我来自北京邮电大学。")   # Word objects with byte and character offsets

tfidf = KeywordExtractor(trie, model, "dict/idf.utf8", "dict/stop_words.utf8")
tfidf.extract("我是拖拉机学院手扶拖拉机专业的。", 5)

textrank = TextRankExtractor(trie, model, "dict/stop_words.utf8")
textrank.extract("我是拖拉机学院手扶拖拉机专业的。", 5, span=5, rank_time=10)
```

Other segmenters: `MPSegment` (maximum probability, `jiebaseg.mp_segment`),
`HMMSegment` (`jiebaseg.hmm_segment`), `FullSegment`
(`jiebaseg.full_segment`) and `QuerySegment` (`jiebaseg.query_segment`).

Keyword results are `Keyword` objects carrying the word, its byte offsets
in the sentence and its weight, ordered from the highest weight down.
Single-character words and stop words are never keywords.

## Separators

Sentences are first split at separator characters (by default space, tab,
newline, `，` and `。`). Replace them with `reset_separators`; a repeated
separator raises `ValueError`:

```python
jieba.reset_separators(" \t\n")
```

## Utilities

- `jiebaseg.config.Config` reads `key = value` files (`#` starts a comment
  line) and offers `get`, `get_int` and item access.
- `jiebaseg.argv.ArgvContext` splits an argument list into positionals,
  `-key value` options and lone flags.
- `jiebaseg.strutil` holds splitting, trimming and UTF-8/UTF-16/GBK
  code-unit conversions; `jiebaseg.unicode` decodes UTF-8 into runes.

## What it does not do

There is no command-line program, and no dictionary, model, IDF or
stop-word data is bundled: the package is a library and works only on
data files you provide.

## Running the tests

    pip install -e ".[test]"
    pytest