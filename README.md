# autocorrect

Spelling correction against a plain word list, with a small web page for
trying it out.

Each word of the input is compared with every entry of a dictionary file
(one word per line) and replaced by the entry with the smallest edit
distance. A capital first letter is kept, and punctuation around or inside
a word stays where it was.

## From Python

```python
from autocorrect.spellcheck_parser import SpellcheckParser

parser = SpellcheckParser("dictionary.txt")
for result in parser.spellcheck_all("Speling is hard, wrld!"):
    print(result.original, "->", result.spellchecked)
```

`spellcheck_all` splits the text on whitespace and returns one
`Spellchecked` per token, in order. `Spellchecked` is a frozen dataclass
with the fields `original` and `spellchecked`; `to_dict()` returns them as
a plain dictionary.

A token made only of letters is looked up in lower case and, if it started
with a capital, the result is capitalised (`capitalize_if_needed`). Any
other token is cut into runs of letters and runs of everything else
(`split_by_alphabetic("hello, world!")` gives
`["hello", ", ", "world", "!"]`); the letter runs are corrected and the rest
is kept unchanged, so `"wrld!"` becomes `"world!"`.

Single words go through `Spellchecker`:

```python
from autocorrect.spellchecker import Spellchecker, edit_distance

checker = Spellchecker("dictionary.txt")
checker.spellcheck("speling")          # "spelling" with a suitable word list
checker.spellcheck("")                 # None
edit_distance("kitten", "sitting")     # 3
```

When several entries are equally close, the one that comes first in the
file wins. An empty word, or a word list with nothing closer than 1000
edits, gives `None`; the parser then keeps the word as it was.

A missing or unreadable dictionary file raises
`autocorrect.spellchecker.DictionaryError`.

## The web page

```
autocorrect
```

starts a WSGI server (from the standard library) on `0.0.0.0:8080`. The
options `--host`, `--port`, `--templates`, `--static` and `--dictionary`
change the address, the template directory (default `templates`), the
static directory (default `static`) and the word list (default
`dictionary.txt`). Ctrl-C stops it.

- `GET /` and `POST /` render `index.html` from the template directory,
  with HTML autoescaping on. Other methods on `/` get 405.
- A form post with a `textInput` field is corrected: at most the first 150
  characters are taken, surrounding whitespace is stripped, and the
  template receives `spellchecked_sentences`, a list of dictionaries with
  `original` and `spellchecked` keys.
- Files under the static directory are served at `/static/...`; anything
  outside it, or missing, gets 404.
- The dictionary is loaded on each request to `/`. If it cannot be loaded,
  the answer is status 500 with a JSON body of the form
  `{"error":"Failed to initialize SpellcheckParser: ..."}`.
- A request body that is not UTF-8 gets 422; a template that fails to
  render gets a plain 500.

`autocorrect.server.create_app(template_dir, static_dir, dictionary_file)`
returns the same WSGI application for use with any WSGI server.

## What is not included

The package ships no word list, no `index.html` template and no static
files. You supply a dictionary file and a template directory holding
`index.html`; without the template the page answers with a 500 error.