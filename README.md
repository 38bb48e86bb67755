# hierarkey

`hierarkey` generates hierarchical tree keys such as `0003.0001.0004`.
Every part of a key has a fixed width and is padded on the left, so
sorting the keys as plain strings puts them in tree order. The keys can
serve as dictionary keys, database row keys or in any ordered store.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```python
from hierarkey.keys import HierarKey

hk = HierarKey(seed=1, width=2)
tree = {}
tree[hk.next_leaf()] = "Animal"        # "01"
tree[hk.next_level()] = "Vertebrate"   # "01.01"
tree[hk.next_level()] = "Mammal"       # "01.01.01"
tree[hk.prev_level()] = "Invertebrate" # "01.02"
tree[hk.jump_to_level("2")] = "Plant"  # "02"

for key in sorted(tree):
    print(f"{key}: {tree[key]}")
```

### `HierarKey(seed, width, padding="0")`

- `seed` is the first number used on every level. A negative seed is
  replaced by `1`.
- `width` is the number of characters in each part. A width of zero or
  less is replaced by `3`.
- `padding` is the fill character. An empty string means `"0"`.

The new key starts at the seed on the top level, for example `"0001"`
for seed 1 and width 4.

### Navigation

- `next_leaf(curr_leaf=None)` moves to the next free sibling of the
  given key, or of the current key.
- `next_level(curr_leaf=None)` goes down one level below the given key,
  or the current key, and starts the new branch at the seed.
- `prev_level(level_decr=None)` goes up `level_decr` levels (one by
  default) and moves to the next free sibling there. A value below one
  raises `HierarKeyError`.
- `jump_to_level(path)` moves to any path, for example `"7.6.5"`. Each
  part is padded to the set width, parts below the seed are raised to
  the seed, and missing parents are recorded on the way. If the full
  path already exists, you get its next free sibling instead. An empty
  path jumps to the seed on the top level.

Each of these returns the new current key.

### Other members

- `curr_leaf` and `prev_leaf` hold the current key and the one before
  it.
- `seed`, `width` and `padding` hold the settings in use.
- `pad(n, pad_char=None)` pads a single number to the set width.
- `pad_path(path)` pads every dot-separated part of a path.
- `validate(func_name, path)` checks that a path is well formed.
- `get_next_seq(path)` and `get_next_level_seq(path)` return the next
  free sequence number on the level of a path.
- `set_curr_leaf(value, idx)` makes a key current and records its
  sequence number.

### Errors

`HierarKeyError`, a subclass of `ValueError`, is raised when a path
holds characters other than digits and dots, starts or ends with a dot,
or has a part whose length differs from the set width. `pad` and
`pad_path` raise it when a number is already longer than the width.

## Examples

`hierarkey.examples` holds three worked examples:

- `example_a_entries()` builds a small taxonomy of animals and plants
  and returns its `(key, name)` pairs sorted by key; `run_example_a()`
  prints them.
- `genre_lines(content, hk)` turns wikitext headings and `*` bullet
  items into `key: entry` lines. `fetch_genre_wikitext(url)` downloads
  a parse API response and returns its wikitext; `run_example_b()`
  fetches a list of rock music genres from Wikipedia and prints it with
  keys. It needs network access and prints an error message if the
  download or the response fails.
- `example_c_lines()` returns a walk-through of each navigation step
  with four-character keys; `run_example_c()` prints it.

## Command line

```
hierarkey A
hierarkey B
hierarkey C
```

Each command prints a heading and runs the matching example. With no
argument or an unknown one, example A runs.