"""Masked password input for the console."""

from collections.abc import Callable

import typer

ENTER_KEYS = ("\r", "\n")
BACKSPACE_KEYS = ("\b", "\x7f")
# Prefixes of special-key sequences (arrows, function keys)
ESCAPE_PREFIXES = ("\x00", "\x1b")
# Windows prefix; on its own it is a plain "à"
WINDOWS_KEY_PREFIX = "\xe0"


def _is_special_key(key: str) -> bool:
    if key.startswith(ESCAPE_PREFIXES):
        return True
    return len(key) > 1 and key.startswith(WINDOWS_KEY_PREFIX)


def read_password(
    prompt_text: str = "Password: ",
    getchar: Callable[[], str] = typer.getchar,
    echo: Callable[..., None] = typer.echo,
) -> str:
    """Read a password from the console, echoing ``*`` for each character.

    Backspace erases the last character and its ``*``; Enter finishes input.
    Characters are read one at a time in raw mode, so Ctrl+C surfaces as
    ``KeyboardInterrupt`` from ``getchar``.

    Args:
        prompt_text: Text shown before reading
        getchar: Function returning one key press at a time
        echo: Function used to write to the console

    Returns:
        The typed password
    """
    echo(prompt_text, nl=False)
    chars: list[str] = []
    while True:
        key = getchar()
        if key in ENTER_KEYS:
            break
        if key in BACKSPACE_KEYS:
            if chars:
                chars.pop()
                # step back, blank the asterisk, step back again
                echo("\b \b", nl=False)
            continue
        if not key or _is_special_key(key):
            continue
        chars.extend(key)
        echo("*" * len(key), nl=False)
    echo()
    return "".join(chars)
