from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import Union


# ======================================================================


class FormatStyle:
    """
    `FormatStyle` defines a base class for formatting operations that
    are applied to a diagnostic message.  The style may optionally
    incorporate features of a linked parent style.

    Derived classes provide their own implementation of `apply(s)`.

    Parameters
    ----------
    parent : FormatStyle, Optional
        The parent style, if any.
    """

    def __init__(self, parent: FormatStyle = None):
        self.parent = parent

    # -- Public Methods ------------------------------------------------

    def apply(self, s: str) -> str:
        """
        Format or modify `s`, as well as applying any formatting from
        parent styles if desired.  At the base level this returns `s`
        unchanged.
        """
        return s

    @property
    def level(self) -> int:
        """
        Level of this style in the tree of styles.  The top (root)
        style has a level of 1.
        """
        if self.parent:
            return self.parent.level + 1
        else:
            return 1


# ----------------------------------------------------------------------

class PrintStyles:
    """
    `PrintStyles` holds a collection of named `FormatStyle` objects
    that may include parent / child relationships.  Solvers use it as a
    diagnostic sink: summary messages are printed with the top level
    style and per-iteration messages with a child style, so that the
    amount of output is controlled by `display_level`.

    Parameters
    ----------
    display_level : int, default = 10
        Lowest number style level to display.  The highest level is
        **1**. Setting ``display_level=0`` will suppress output.
    file : optional
        Stream passed to `print` (default is `sys.stdout`).

    Examples
    --------
    >>> fmt = PrintStyles(display_level=2)
    >>> fmt.add('top', SkipStyle())
    >>> fmt.add('detail', AddDotStyle(), parent='top')
    >>> fmt.add('noise', AddDotStyle(), parent='detail')
    >>> fmt.print('top', "Brent:")
    Brent:
    >>> fmt.apply('detail', "Iteration 1") == '... Iteration 1'
    True
    >>> fmt.print('noise', "Not shown at this display level.")
    """

    def __init__(self, display_level: int = 10, file=None):
        self.display_level = display_level
        self.file = file
        self._styles: dict[str, FormatStyle] = {}

    # -- Public Methods ------------------------------------------------

    def add(self, name: str, style: FormatStyle, parent: str = None):
        """
        Adds a new style to the collection.

        Parameters
        ----------
        name : str
            Name of added style.
        style : FormatStyle
            Style object.  Any existing `style.parent` is overwritten.
        parent : str, Optional
            Name of parent style (to insert below).

        Raises
        ------
        ValueError
            If `name` already exists or `parent` does not exist.
        """
        if name in self._styles:
            raise ValueError(f"Print style '{name}' already defined.")

        if parent:
            try:
                style.parent = self._styles[parent]
            except KeyError:
                raise ValueError(f"Parent print style '{parent}' not found.")
        else:
            style.parent = None

        self._styles[name] = style

    def apply(self, name: str, s: str) -> str:
        """
        Apply format style `name` to string `s`, including any parent
        styles.

        Raises
        ------
        ValueError
            If `name` is not found.
        """
        try:
            style = self._styles[name]
        except KeyError:
            raise ValueError(f"Style '{name}' not found.")

        return style.apply(s)

    def print(self, name: str | None, s: str = '', *,
              display_level: int = None):
        """
        Print string `s` after applying formatting, if style `name` is
        at or above the `display_level`.

        Parameters
        ----------
        name : str
            Name of format style to apply, or `None` to bypass
            formatting.

            .. note::If `name` is not found, a warning is generated
               and `s` is printed without formatting.

        s : str, default = ''
            String to format.
        display_level : int
            If supplied, sets the `display_level` for this print
            operation only.
        """
        if name is None:
            print(s, file=self.file)
            return

        try:
            style = self._styles[name]
        except KeyError:
            print(s, file=self.file)
            warnings.warn(f"Format style '{name}' not found.")
            return

        if display_level is None:
            display_level = self.display_level

        if style.level <= display_level:
            print(style.apply(s), file=self.file)


# ======================================================================

# Standard format styles.

class AddDotStyle(FormatStyle):
    """
    If the style has a parent, prepends three dots and a space
    (``... ``) to the string before applying the parent style.
    """

    def apply(self, s: str) -> str:
        if self.parent:
            return self.parent.apply('... ' + s)
        else:
            return s


class SkipStyle(FormatStyle):
    """Applies the parent style, but adds no extra formatting."""

    def apply(self, s: str) -> str:
        if self.parent:
            s = self.parent.apply(s)
        return s


# ======================================================================

# Style names used by the solvers.
SOLVER_STYLE = 'solver'
ITER_STYLE = 'iter'

LogSink = Union[PrintStyles, Callable[[str], None], None]


def solver_printer(display_level: int = 1, file=None) -> PrintStyles:
    """
    Returns the standard two-level `PrintStyles` used by the solvers:
    ``'solver'`` (level 1) for setup and termination messages and
    ``'iter'`` (level 2, dotted) for per-iteration progress.  Use
    ``display_level=2`` to see the iterations.
    """
    fmt = PrintStyles(display_level=display_level, file=file)
    fmt.add(SOLVER_STYLE, SkipStyle())
    fmt.add(ITER_STYLE, AddDotStyle(), parent=SOLVER_STYLE)
    return fmt


def log_print(log: LogSink, name: str, s: str):
    """
    Send message `s` to a diagnostic sink.  `log` may be `None`
    (discard), a `PrintStyles` (printed using style `name`, which must
    have been added) or any callable taking a single string (receives
    every message unformatted).
    """
    if log is None:
        return

    if isinstance(log, PrintStyles):
        log.print(name, s)
    else:
        log(s)
