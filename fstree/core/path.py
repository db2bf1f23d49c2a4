"""
Immutable path value with normalization, composition and containment tests.

Every composition method returns a new PathValue, so a path can be shared
between concurrent tree-resolution branches without aliasing problems.

Usage:
    >>> base = PathValue.of("/srv/data")
    >>> report = base / "2024" / "report.txt"
    >>> report.inside(base)
    True
    >>> report.relative_to(base).path
    '2024/report.txt'
"""
from dataclasses import dataclass
from typing import Pattern, Union
import os

_SEPARATORS = ('/', '\\')

PathInput = Union[str, 'os.PathLike[str]']


@dataclass(frozen=True)
class PathBundle:
    """
    Snapshot of every derived form of a path.

    A value, not a live view: later changes of the working directory
    do not affect an existing bundle.
    """
    path: str
    relative: str
    absolute: str
    dirname: str
    basename: str
    extname: str


class PathValue:
    """Normalized, platform-native filesystem path."""

    __slots__ = ('_path',)

    def __init__(self, path: PathInput = ''):
        """
        Initialize a path value.

        Args:
            path: Raw string, PathLike or another PathValue
        """
        self._path = os.path.normpath(os.fspath(path))

    @classmethod
    def of(cls, path: PathInput) -> 'PathValue':
        """
        Wrap a raw path, returning PathValue inputs unchanged.

        Args:
            path: Raw string, PathLike or PathValue

        Returns:
            PathValue (never a wrapper around another PathValue)
        """
        if isinstance(path, PathValue):
            return path
        return cls(path)

    @classmethod
    def _wrap(cls, raw: str) -> 'PathValue':
        """Wrap a string as-is, without normalizing it."""
        instance = cls.__new__(cls)
        instance._path = raw
        return instance

    def clone(self) -> 'PathValue':
        """Return an equal, distinct instance."""
        return PathValue._wrap(self._path)

    # =========================================================================
    # Composition
    # =========================================================================

    def join(self, *paths: PathInput) -> 'PathValue':
        """
        Join paths after this one.

        Args:
            *paths: Segments to append, in order

        Returns:
            New normalized PathValue
        """
        parts = [os.fspath(p) for p in paths]
        return PathValue(os.path.join(self._path, *parts))

    def append(self, *paths: PathInput) -> 'PathValue':
        """Join paths after this one."""
        return self.join(*paths)

    def push(self, path: PathInput) -> 'PathValue':
        """Join a single path after this one."""
        return self.join(path)

    def postfix(self, path: PathInput) -> 'PathValue':
        """Join a single path after this one."""
        return self.join(path)

    def prepend(self, *paths: PathInput) -> 'PathValue':
        """
        Join paths before this one.

        Args:
            *paths: Segments to put in front, in order

        Returns:
            New normalized PathValue
        """
        parts = [os.fspath(p) for p in paths]
        return PathValue(os.path.join(*parts, self._path))

    def prefix(self, path: PathInput) -> 'PathValue':
        """Join a single path before this one."""
        return self.prepend(path)

    def pop(self) -> 'PathValue':
        """
        Drop the base name and the separator in front of it.

        If the stored string does not literally end with its base name
        (e.g. a trailing separator left by replace()), the path is
        returned unchanged.
        """
        base = self.basename
        if not base or not self._path.endswith(base):
            return self

        head = self._path[:-len(base)]
        if head.endswith(_SEPARATORS):
            head = head[:-1]
        return PathValue(head)

    def replace(
        self,
        matcher: Union[str, Pattern[str]],
        replacement: str,
        count: int = 1
    ) -> 'PathValue':
        """
        Substitute text in the raw path string.

        No path-aware validation is performed and the result is not
        re-normalized.

        Args:
            matcher: Substring or compiled regular expression
            replacement: Replacement text
            count: Maximum number of replacements, 0 for all

        Returns:
            New PathValue wrapping the substituted string
        """
        if isinstance(matcher, str):
            replaced = self._path.replace(matcher, replacement, count or -1)
        else:
            replaced = matcher.sub(replacement, self._path, count=count)
        return PathValue._wrap(replaced)

    # =========================================================================
    # Comparison
    # =========================================================================

    def inside(self, path: PathInput) -> bool:
        """
        Check if this path is a strict descendant of another.

        Both sides are compared in absolute form. Equal paths are not
        inside one another.
        """
        base = PathValue.of(path).absolute
        mine = self.absolute

        if mine == base:
            return False
        if not base.endswith(_SEPARATORS):
            base += os.sep
        return mine.startswith(base)

    def is_same(self, path: PathInput) -> bool:
        """Check if both paths have the same absolute form."""
        return self.absolute == PathValue.of(path).absolute

    def relative_to(self, path: PathInput) -> 'PathValue':
        """
        Strip another path's absolute form from the front of this one.

        When the other path is not a prefix, this path's absolute form
        is returned as is.
        """
        base = PathValue.of(path).absolute
        mine = self.absolute

        for sep in _SEPARATORS:
            if mine.startswith(base + sep):
                return PathValue(mine[len(base) + 1:])
        return PathValue(mine)

    def bundle(self) -> PathBundle:
        """Snapshot every derived form of this path."""
        return PathBundle(
            path=self.path,
            relative=self.relative,
            absolute=self.absolute,
            dirname=self.dirname,
            basename=self.basename,
            extname=self.extname,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def path(self) -> str:
        """Stored path string."""
        return self._path

    @property
    def absolute(self) -> str:
        """Absolute form, resolved against the working directory."""
        return os.path.abspath(self._path)

    @property
    def relative(self) -> str:
        """Form relative to the working directory."""
        try:
            return os.path.relpath(self._path)
        except ValueError:
            # no relative path across Windows drives
            return self.absolute

    @property
    def dirname(self) -> str:
        return os.path.dirname(self._path)

    @property
    def basename(self) -> str:
        return os.path.basename(self._path)

    @property
    def extname(self) -> str:
        return os.path.splitext(self._path)[1]

    def to_json(self) -> str:
        return self._path

    # =========================================================================
    # Python protocols
    # =========================================================================

    def __truediv__(self, other: PathInput) -> 'PathValue':
        """Support for path / "child"."""
        if not isinstance(other, (str, os.PathLike)):
            return NotImplemented
        return self.join(other)

    def __fspath__(self) -> str:
        return self._path

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"PathValue('{self._path}')"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathValue):
            return self._path == other._path
        if isinstance(other, str):
            return self._path in (other, os.path.normpath(other))
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._path)
