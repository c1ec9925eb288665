"""Lexical path algebra.

Pure string functions behind the Path value type. Nothing in this module
touches the filesystem or the process environment: home directories, user
home lookups and case-sensitivity are passed in by the caller.

Architecture:
- split_components / join_components: component decomposition and its inverse
- append: the join algorithm with "." elision and ".." collapsing
- last_component / split_extension: name decomposition
- normalize / abbreviate: tilde expansion and its inverse
"""

import posixpath
from collections.abc import Callable, Sequence

SEPARATOR = "/"
CURRENT = "."
PARENT = ".."
HOME = "~"


def split_components(path: str) -> list[str]:
    """Split a raw path string into its components.

    Empty segments produced by repeated or trailing separators are dropped.
    Absolute paths keep the separator itself as a leading root component.

    Examples:
        >>> split_components("/a/b/c.d")
        ['/', 'a', 'b', 'c.d']
        >>> split_components("a//b/")
        ['a', 'b']
    """
    parts = [part for part in path.split(SEPARATOR) if part]
    if path.startswith(SEPARATOR):
        return [SEPARATOR, *parts]
    return parts


def join_components(components: Sequence[str]) -> str:
    """Join components with the separator.

    An empty sequence joins to ".". A leading root component is counted once,
    so ["/", "a"] joins to "/a" rather than "//a".
    """
    if not components:
        return CURRENT

    joined = SEPARATOR.join(components)
    if components[0] == SEPARATOR and len(components) > 1:
        return joined[1:]
    return joined


def append(base: str, fragment: str) -> str:
    """Append fragment to base, resolving "." and ".." lexically.

    Rules, in order:
    1. An absolute fragment replaces the base entirely.
    2. "." components are dropped from both sides.
    3. Each leading ".." of the fragment consumes one trailing component of
       the base, unless the base already ends in ".." (nothing left to
       consume) or has been reduced to the root, which is never popped.

    Examples:
        >>> append("a/b/c", "../d/e")
        'a/b/d/e'
        >>> append("..", "../a")
        '../../a'
        >>> append("/", "..")
        '/'
    """
    if fragment.startswith(SEPARATOR):
        return fragment

    left = [c for c in split_components(base) if c != CURRENT]
    right = [c for c in split_components(fragment) if c != CURRENT]

    while left and left[-1] != PARENT and right and right[0] == PARENT:
        if len(left) > 1 or left[0] != SEPARATOR:
            left.pop()
        right.pop(0)

    return join_components(left + right)


def last_component(path: str) -> str:
    """Return the final component, ignoring trailing separators.

    "a/b/" -> "b", "/" -> "/", "" -> ".".
    """
    if not path:
        return CURRENT

    stripped = path.rstrip(SEPARATOR)
    if not stripped:
        return SEPARATOR
    return stripped.rsplit(SEPARATOR, 1)[-1]


def split_extension(component: str) -> tuple[str, str | None]:
    """Split a single component into (stem, extension).

    Leading dots never introduce an extension, so hidden files and all-dot
    components such as ".." come back unchanged with no extension. A trailing
    dot yields an empty suffix, which is reported as no extension.
    """
    stem, suffix = posixpath.splitext(component)
    if not suffix:
        return component, None

    extension = suffix[1:]
    if not extension:
        return stem, None
    return stem, extension


def expand_tilde(
    path: str, home: str, user_home: Callable[[str], str | None] | None = None
) -> str:
    """Expand a leading "~" or "~/" against home.

    "~user" forms are resolved through user_home, which returns None for an
    unknown user. Without a resolver, or for an unknown user, the path is
    returned unchanged.
    """
    if path == HOME:
        return home
    if path.startswith(HOME + SEPARATOR):
        return home.rstrip(SEPARATOR) + path[len(HOME) :]
    if path.startswith(HOME) and user_home is not None:
        user, separator, rest = path[len(HOME) :].partition(SEPARATOR)
        user_directory = user_home(user)
        if user_directory is None:
            return path
        if not separator:
            return user_directory
        return user_directory.rstrip(SEPARATOR) + SEPARATOR + rest
    return path


def normalize(
    path: str, home: str, user_home: Callable[[str], str | None] | None = None
) -> str:
    """Expand "~", collapse redundant separators and resolve "." and "..".

    The result is computed lexically: symlinks are not consulted, so ".." may
    not match the filesystem's notion of a parent directory. An empty path
    stays empty. A leading "~" surfaced by collapsing (as in "a/../~") is
    expanded as well.
    """
    if not path:
        return path
    collapsed = posixpath.normpath(expand_tilde(path, home, user_home))
    return posixpath.normpath(expand_tilde(collapsed, home, user_home))


def abbreviate(path: str, home: str, *, case_sensitive: bool) -> str:
    """Replace a leading home directory in path with "~".

    Only the leading occurrence is replaced, and only when it ends at a
    component boundary.
    """
    home = home.rstrip(SEPARATOR)
    if not home:
        return path

    prefix = path[: len(home)]
    if case_sensitive:
        matched = prefix == home
    else:
        matched = prefix.lower() == home.lower()
    if not matched:
        return path

    remainder = path[len(home) :]
    if remainder and not remainder.startswith(SEPARATOR):
        return path
    if not remainder.strip(SEPARATOR):
        return HOME
    return HOME + remainder
