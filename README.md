# linkpath

Helpers for turning the links found in HTML and Markdown documents into
something a link checker can test: absolute filesystem paths and `file://`
URLs. The package has no dependencies outside the standard library.

## Installation

```
pip install linkpath
```

To work on the package and run its tests:

```
pip install -e ".[test]"
pytest
```

## Splitting links: `linkpath.urls`

`remove_get_params_and_separate_fragment(url)` takes link text (which need
not be a full URL) and returns a `(path, fragment)` pair. Everything after the
first `#` is the fragment; everything from the first `?` before it is
dropped. The fragment is `None` when the text has no `#`.

```python
from linkpath.urls import remove_get_params_and_separate_fragment

remove_get_params_and_separate_fragment("test.png?foo=bar#anchor")
# ("test.png", "anchor")
remove_get_params_and_separate_fragment("test.png#anchor?anchor!?")
# ("test.png", "anchor?anchor!?")
```

## Resolving paths: `linkpath.paths`

- `absolute_path(path)` makes a path absolute against the current working
  directory and cleans it lexically: `.` segments are removed and `..`
  segments fold away the segment before them. Results are cached, and the
  working directory is read once, on first use.
- `resolve(src, dst, ignore_absolute_local_links)` resolves `dst` as it is
  linked from the file `src` and returns a cleaned absolute `Path`. A relative
  `dst` is joined to the directory that holds `src`. An absolute `dst` is
  used as it is, or `None` is returned when `ignore_absolute_local_links` is
  true. A relative `dst` linked from a filesystem root (which has no parent
  directory) raises `InvalidFileError`.
- `contains(parent, child)` tells whether `child` lies inside `parent`,
  following symlinks on the real filesystem. A directory counts as inside
  itself. Both paths must exist; otherwise `FileNotFoundError` is raised.

```python
from linkpath.paths import resolve

resolve("/path/to/index.html", "./foo.html", True)
# PosixPath('/path/to/foo.html')
resolve("/path/to/index.html", "/other.html", True)
# None
```

`InvalidFileError` is a `ValueError` and keeps the offending path in its
`path` attribute.

## Local links: `linkpath.local_links`

- `is_anchor(text)` is true for link text that starts with `#`.
- `prepend_root_dir_if_absolute_local_link(text, root_dir)` puts `root_dir`
  in front of link text that starts with `/`; other text, or a `root_dir` of
  `None`, leaves the text unchanged.
- `resolve_and_create_url(src_path, dest_path, ignore_absolute_local_links)`
  builds a `file://` URL string for a link found in `src_path`. The query
  string is dropped, the fragment kept, and the path part percent-decoded
  before resolving so that it is not encoded twice. It raises
  `InvalidPathToUriError` when the path cannot be resolved (including an
  absolute link that is being ignored), `InvalidUrlFromPathError` when the
  result is not an absolute path, and `UnicodeDecodeError` when the decoded
  path is not valid UTF-8.
- `create_uri_from_file_path(file_path, link_text, ignore_absolute_local_links)`
  does the same, and turns a bare `#anchor` into a link to the file it
  appears in. Any failure while resolving is raised as
  `InvalidPathToUriError`; an anchor in a path with no file name raises
  `InvalidFileError`.

```python
from linkpath.local_links import create_uri_from_file_path, resolve_and_create_url

resolve_and_create_url("/README.md", "test+encoding", True)
# "file:///test+encoding"
create_uri_from_file_path("/some/page.html", "#fragment", True)
# "file:///some/page.html#fragment"
```

`InvalidPathToUriError` and `InvalidUrlFromPathError` are `ValueError`
subclasses and keep the path they were raised for in `path`.

## Error messages: `linkpath.errortext`

`trim_error_output(error)` shortens a verbose HTTP client error message,
given as an exception or a string. When the message contains
`error trying to connect:`, only the trimmed text after it is kept;
otherwise the message is returned unchanged.

```python
from linkpath.errortext import trim_error_output

trim_error_output(
    "error sending request for url (https://example.com): "
    "error trying to connect: The certificate was not trusted."
)
# "The certificate was not trusted."
```

## What it does not do

This package only resolves and reshapes links. It does not extract links
from documents, does not fetch or check URLs over the network, does not look
up fragments inside target files, and has no command-line tool.