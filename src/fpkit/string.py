"""Data-first or curried helpers over strings.

```python
>>> import fpkit as fp
>>> from fpkit import string as S
>>> fp.pipe("Hello", S.append(" "), S.append("World"), S.append("!"))
'Hello World!'

```
"""

from __future__ import annotations

import unicodedata

from ._core import dual
from ._results import NONE, Option, Some


@dual(2)
def append(s: str, suffix: str) -> str:
    """Add `suffix` at the end of the string.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.append("Hello", "World")
    'HelloWorld'

    ```
    """
    return s + suffix


@dual(2)
def prepend(s: str, prefix: str) -> str:
    """Add `prefix` at the start of the string.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import string as S
    >>> S.prepend("Hello", "World")
    'WorldHello'
    >>> fp.pipe("Hello", S.prepend(" "), S.prepend("World"), S.prepend("!"))
    '!World Hello'

    ```
    """
    return prefix + s


@dual(2)
def char_at(s: str, index: int) -> Option[str]:
    """Return the character at `index`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import string as S
    >>> fp.pipe("Hello World!", S.char_at(0))
    Some(value='H')
    >>> fp.pipe("Hello World!", S.char_at(12))
    NONE

    ```
    """
    try:
        return Some(s[index])
    except IndexError:
        return NONE


def head(s: str) -> Option[str]:
    """Return the first character.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.head("Hello"), S.head("")
    (Some(value='H'), NONE)

    ```
    """
    return Some(s[0]) if s else NONE


def last(s: str) -> Option[str]:
    """Return the last character.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.last("Hello!"), S.last("")
    (Some(value='!'), NONE)

    ```
    """
    return Some(s[-1]) if s else NONE


@dual(2)
def starts_with(s: str, prefix: str) -> bool:
    """Check if the string starts with `prefix`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import string as S
    >>> fp.pipe("Hello World!", S.starts_with("Hello"))
    True

    ```
    """
    return s.startswith(prefix)


@dual(2)
def ends_with(s: str, suffix: str) -> bool:
    """Check if the string ends with `suffix`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import string as S
    >>> fp.pipe("Hello World!", S.ends_with("!!"))
    False

    ```
    """
    return s.endswith(suffix)


@dual(2)
def includes(s: str, sub: str) -> bool:
    """Check if `sub` appears in the string.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import string as S
    >>> fp.pipe("Hello World!", S.includes("Goodbye"))
    False

    ```
    """
    return sub in s


def is_empty(s: str) -> bool:
    """Check if the string is empty.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.is_empty(""), S.is_empty(" ")
    (True, False)

    ```
    """
    return not s


def is_non_empty(s: str) -> bool:
    """Check if the string is not empty.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.is_non_empty("a")
    True

    ```
    """
    return bool(s)


def length(s: str) -> int:
    """Return the number of characters.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.length("Hello World!")
    12

    ```
    """
    return len(s)


def lines(s: str) -> list[str]:
    """Split the string on line boundaries, `\\n` and `\\r\\n` included.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.lines("Hello\\nWorld!\\r\\nbye")
    ['Hello', 'World!', 'bye']
    >>> S.lines("")
    []

    ```
    """
    return s.splitlines()


def words(s: str) -> list[str]:
    """Split the string on runs of whitespace.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.words(" Hello   World! "), S.words("")
    (['Hello', 'World!'], [])

    ```
    """
    return s.split()


@dual(2)
def remove(s: str, sub: str) -> str:
    """Remove the first occurrence of `sub`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import string as S
    >>> fp.pipe("Hello Bonjour Hello", S.remove("Hello"))
    ' Bonjour Hello'

    ```
    """
    return s.replace(sub, "", 1)


@dual(2)
def remove_all(s: str, sub: str) -> str:
    """Remove every occurrence of `sub`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import string as S
    >>> fp.pipe("Hello Bonjour Hello", S.remove_all("Hello"))
    ' Bonjour '

    ```
    """
    return s.replace(sub, "")


@dual(3)
def replace(s: str, old: str, new: str) -> str:
    """Replace the first occurrence of `old` by `new`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import string as S
    >>> fp.pipe("Hello Hello", S.replace("Hello", "Goodbye"))
    'Goodbye Hello'

    ```
    """
    return s.replace(old, new, 1)


@dual(3)
def replace_all(s: str, old: str, new: str) -> str:
    """Replace every occurrence of `old` by `new`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import string as S
    >>> fp.pipe("Hello Bonjour Hello", S.replace_all("Hello", "Goodbye"))
    'Goodbye Bonjour Goodbye'

    ```
    """
    return s.replace(old, new)


def reverse(s: str) -> str:
    """Return the characters in reverse order.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.reverse("Hello World!")
    '!dlroW olleH'

    ```
    """
    return s[::-1]


@dual(2)
def split(s: str, sep: str) -> list[str]:
    """Split the string on `sep`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import string as S
    >>> fp.pipe("Hello World!", S.split("o"))
    ['Hell', ' W', 'rld!']

    ```
    """
    return s.split(sep)


@dual(2)
def split_at(s: str, index: int) -> tuple[str, str]:
    """Split the string in two at `index`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import string as S
    >>> fp.pipe("Hello World!", S.split_at(5))
    ('Hello', ' World!')
    >>> fp.pipe("Hello World!", S.split_at(0))
    ('', 'Hello World!')

    ```
    """
    return s[:index], s[index:]


def to_list(s: str) -> list[str]:
    """Return the characters of the string.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.to_list("abc")
    ['a', 'b', 'c']

    ```
    """
    return list(s)


def to_lower(s: str) -> str:
    """Lowercase the string.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.to_lower("Hello World!")
    'hello world!'

    ```
    """
    return s.lower()


def to_upper(s: str) -> str:
    """Uppercase the string.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.to_upper("Hello World!")
    'HELLO WORLD!'

    ```
    """
    return s.upper()


def trim(s: str) -> str:
    """Strip whitespace on both ends.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.trim(" Hello World! ")
    'Hello World!'

    ```
    """
    return s.strip()


def trim_start(s: str) -> str:
    """Strip leading whitespace.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.trim_start(" Hello World! ")
    'Hello World! '

    ```
    """
    return s.lstrip()


def trim_end(s: str) -> str:
    """Strip trailing whitespace.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.trim_end(" Hello World! ")
    ' Hello World!'

    ```
    """
    return s.rstrip()


def deburr(s: str) -> str:
    """Remove diacritical marks, turning accented letters into their basic Latin form.

    Example:
    ```python
    >>> from fpkit import string as S
    >>> S.deburr("déjà vu")
    'deja vu'

    ```
    """
    decomposed = unicodedata.normalize("NFKD", s)
    return "".join(c for c in decomposed if not unicodedata.combining(c))
