# -*- coding: utf-8 -*-
from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

import click

from ..errors import ModixError

F = TypeVar("F", bound=Callable[..., Any])

RULE_WIDTH = 44


def handle_errors(func: F) -> F:
    """Turn ``ModixError`` into ``Error: ...`` on stderr and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ModixError as exc:
            click.echo(click.style(f"Error: {exc}", fg="red"), err=True)
            raise SystemExit(1) from exc

    return wrapper  # type: ignore[return-value]


def heading(text: str, char: str = "─") -> None:
    click.echo(f"\n{char * RULE_WIDTH}")
    click.echo(click.style(f"  {text}", fg="cyan", bold=True))
    click.echo(f"{char * RULE_WIDTH}")


def field(label: str, value: Any, **style: Any) -> None:
    """Print an aligned ``label: value`` row, optionally styled."""
    text = str(value)
    if style:
        text = click.style(text, **style)
    click.echo(f"  {label:16s}: {text}")


def mark(ok: bool) -> str:
    return click.style("✓", fg="green") if ok else click.style("✗", fg="red")
