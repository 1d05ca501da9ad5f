# seqdiff

seqdiff compares sequences of hashable items, such as strings, lists of
lines or lists of numbers. It finds matching blocks, edit opcodes and
similarity ratios. It also renders readable diffs as lists of strings.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

### Sequence matching

```python
from seqdiff.sequencematcher import SequenceMatcher

matcher = SequenceMatcher("qabxcd", "abycdf")
matcher.find_longest_match(0, 6, 0, 6)  # Match(first_start, second_start, size)
matcher.get_matching_blocks()   # list of Match, ending with a zero-size sentinel
matcher.get_opcodes()           # list of Opcode(tag, first_start, first_end, second_start, second_end)
matcher.get_grouped_opcodes(3)  # opcodes grouped into hunks with 3 items of context
matcher.ratio()                 # similarity in [0.0, 1.0]
```

The `tag` of an `Opcode` is a member of the `Tag` enum: `INSERT`, `DELETE`,
`REPLACE` or `EQUAL`. `str(tag)` gives `"insert"`, `"delete"`,
`"replace"` or `"equal"`.

`SequenceMatcher` takes an optional third argument, `is_junk`. This is a
predicate, and elements of the second sequence for which it returns true
are never used as match anchors. When the second sequence has 200 or more
items, any element that appears more than `len // 100 + 1` times is also
left out as an anchor. Use `set_seqs`, `set_first_seq` or `set_second_seq`
to reuse one matcher on new inputs. Results are cached until a sequence
changes.

### Unified and context diffs

```python
from seqdiff.diffs import unified_diff, context_diff, get_close_matches

old = "one two three four".split(" ")
new = "zero one tree four".split(" ")

print("".join(unified_diff(old, new, "Original", "Current",
                           "2005-01-26 23:30:50", "2010-04-02 10:20:52", 3)))
print("".join(context_diff(old, new, "Original", "Current",
                           "2005-01-26 23:30:50", "2010-04-02 10:20:52", 3)))

get_close_matches("appel", ["ape", "apple", "peach", "puppy"], 3, 0.6)
# ['apple', 'ape']
```

The header and hunk lines end in `"\n"`. The content lines are the items
with a prefix and nothing more, so give lines that already end in `"\n"`
if you want one line per item. For both diff functions, the file names and
dates default to empty strings and `n` defaults to 3.

`get_close_matches(word, possibilities, n=3, cutoff=0.6)` returns the best
matches first. It raises `ValueError` when `cutoff` is outside 0.0 to 1.0.

### Human-readable deltas

```python
from seqdiff.differ import Differ

delta = Differ().compare(["one\n", "two\n", "three\n"],
                         ["ore\n", "tree\n", "emu\n"])
print("".join(delta))

Differ.restore(delta, 1)  # recovers the first sequence
Differ.restore(delta, 2)  # recovers the second sequence
```

`Differ` accepts optional `line_junk` and `char_junk` predicates. Each
delta line starts with `"- "`, `"+ "`, `"  "` or `"? "`. A `"? "` line marks
changes within a line: `^` for a replaced character, `-` for a removed
one and `+` for an added one. `restore` raises `ValueError` unless `which`
is 1 or 2.

## Demo

The package installs one command. It prints sample output of every
operation on fixed example inputs:

```
seqdiff-demo
```

## What it does not do

seqdiff has no command for comparing files or text that you supply. The
only command, `seqdiff-demo`, prints its built-in examples. To diff your
own data, call the functions above from Python. They return lists of
strings; nothing is written to files.