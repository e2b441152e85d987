from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

import typer

from message_expander.core.errors import MessageError
from message_expander.core.expand.bootstrap import write_bootstrap_template
from message_expander.core.expand.expander import MessageExpander
from message_expander.core.io.load_document import load_document
from message_expander.core.model import CodeFile, Message, MessageJsonFile, MessageTextFile, entry_kind

ROOT_ENVVAR = "MESSAGE_EXPANDER_ROOT"

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log resolution details to stderr"),
) -> None:
    """Message document expander CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _root_option():
    return typer.Option(
        None,
        "--root",
        envvar=ROOT_ENVVAR,
        help="Root directory for relative references (default: current directory)",
    )


@app.command("expand")
def expand(
    reference: str = typer.Argument(..., help="Message document (.json/.yaml/.yml) or .txt file"),
    prompt: str = typer.Option("", "--prompt", help="Prompt text to append after the messages"),
    prompt_file: str | None = typer.Option(
        None, "--prompt-file", help="Read the prompt from a UTF-8 file (overrides --prompt)"
    ),
    root: str | None = _root_option(),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Expand REFERENCE and print the resulting text."""
    if format not in ("text", "json"):
        _print_errors(
            [
                MessageError(
                    code="E_UNKNOWN_FORMAT",
                    message=f"unknown format: {format} (choose one of: text, json)",
                    path=None,
                )
            ]
        )
        raise typer.Exit(code=2)

    def _emit_json(ok: bool, *, visited: list[str], text: str | None, errors: list[MessageError]) -> None:
        payload = {
            "tool": "msgexpand",
            "command": "expand",
            "ok": ok,
            "reference": reference,
            "visited": visited,
            "text": text,
            "errors": [{"code": e.code, "message": e.message, "path": e.path} for e in errors],
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        raise typer.Exit(code=0 if ok else 1)

    if prompt_file is not None:
        p = Path(prompt_file)
        if not p.is_file():
            err = MessageError(
                code="E_PROMPT_FILE_NOT_FOUND",
                message=f"prompt file not found: {prompt_file}",
                path=str(p),
            )
            if format == "json":
                _emit_json(False, visited=[], text=None, errors=[err])
            _print_errors([err])
            raise typer.Exit(code=1)
        prompt = p.read_text(encoding="utf-8")

    expander = MessageExpander(root or os.getcwd())
    try:
        text = expander.expand(reference, prompt)
    except MessageError as e:
        if format == "json":
            _emit_json(False, visited=expander.visited, text=None, errors=[e])
        _print_errors([e])
        raise typer.Exit(code=1)

    if format == "json":
        _emit_json(True, visited=expander.visited, text=text, errors=[])
    typer.echo(text, nl=False)


@app.command("init")
def init(
    path: str = typer.Argument(..., help="Message document to create"),
    root: str | None = _root_option(),
) -> None:
    """Write the starter template at PATH unless a file already exists there."""
    target = Path(MessageExpander(root or os.getcwd()).resolve(path))
    if target.exists():
        typer.echo(f"OK: exists {target}")
        return

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        _print_errors([MessageError(code="E_DIR_CREATE", message=str(e), path=str(target.parent))])
        raise typer.Exit(code=1)

    try:
        write_bootstrap_template(target)
    except MessageError as e:
        _print_errors([e])
        raise typer.Exit(code=1)
    typer.echo(f"OK: created {target}")


@app.command("entries")
def entries(
    path: str = typer.Argument(..., help="Message document to inspect"),
    root: str | None = _root_option(),
) -> None:
    """List the decoded entries of one document (no recursion, no bootstrap)."""
    target = MessageExpander(root or os.getcwd()).resolve(path)
    try:
        decoded = load_document(target)
    except MessageError as e:
        _print_errors([e])
        raise typer.Exit(code=1)

    for entry in decoded:
        kind = entry_kind(entry)
        if isinstance(entry, Message):
            typer.echo(f"{kind}: {json.dumps(entry.text, ensure_ascii=False)}")
        elif isinstance(entry, (MessageJsonFile, MessageTextFile, CodeFile)):
            typer.echo(f"{kind}: {entry.path}")
        else:
            typer.echo(kind)


def _print_errors(errors: list[MessageError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="msgexpand")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()
