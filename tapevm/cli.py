from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from tapevm.config import load_settings
from tapevm.errors import VMFault
from tapevm.program import Program
from tapevm.schemas import EofPolicy
from tapevm.vm import VirtualMachine


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def _read_source(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    try:
        return Path(value).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SystemExit(f"cannot read source file {value}: {e}") from e


def _dump_tape(vm: VirtualMachine) -> None:
    print(vm.snapshot().model_dump_json(), file=sys.stderr)


def _cmd_run(args: argparse.Namespace) -> int:
    if args.source == "-":
        raise SystemExit("run needs a source file; stdin is the program's input")
    try:
        settings = load_settings(
            args.config,
            overrides={
                "eof_policy": args.eof_policy,
                "echo_banner": True if args.banner else None,
            },
        )
    except (ValueError, yaml.YAMLError) as e:
        raise SystemExit(f"invalid configuration: {e}") from e

    if settings.echo_banner:
        print(f"Reading file {args.source}", file=sys.stderr)
    program = Program.from_text(_read_source(args.source))

    stdout = sys.stdout.buffer
    vm = VirtualMachine(program, sys.stdin.buffer, stdout, settings=settings)

    if settings.echo_banner:
        print("Executing:", file=sys.stderr)
    try:
        vm.run()
    except VMFault as e:
        stdout.flush()
        if args.dump_tape:
            _dump_tape(vm)
        raise SystemExit(f"program execution failed: {type(e).__name__}: {e}") from e
    stdout.flush()
    if args.dump_tape:
        _dump_tape(vm)
    return 0


def _cmd_fmt(args: argparse.Namespace) -> int:
    program = Program.from_text(_read_source(args.source))
    print(program.to_text())
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tapevm")
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="execute a program, wiring stdin/stdout to the machine")
    run_p.add_argument("source", help="path to the program source")
    run_p.add_argument("--config", type=_existing_path, default=None, help="YAML settings file")
    run_p.add_argument(
        "--eof-policy",
        choices=[p.value for p in EofPolicy],
        default=None,
        help="what ',' does at end of input (default: fault)",
    )
    run_p.add_argument("--banner", action="store_true", help="print progress lines to stderr")
    run_p.add_argument(
        "--dump-tape",
        action="store_true",
        help="print the final machine state as JSON to stderr",
    )

    fmt_p = sub.add_parser("fmt", help="print the program with comments stripped")
    fmt_p.add_argument("source", help="path to the program source, or - for stdin")

    args = parser.parse_args(argv)

    if args.cmd == "run":
        return _cmd_run(args)

    if args.cmd == "fmt":
        return _cmd_fmt(args)

    raise AssertionError(f"unhandled cmd: {args.cmd}")
