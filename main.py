# main.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, TextIO

import enigma
import keyboard_and_plugboard
import rotor_and_reflector
from debug import Debug
from enigma import EnigmaMachine
from errors import EnigmaError
from permutation import ALPHA26
from settings import build_machine, load_settings, reference_machine

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────

debug = Debug()

TRACED_MODULES = (enigma, keyboard_and_plugboard, rotor_and_reflector)


@dataclass(slots=True)
class Config:
    """Runtime switches for the read-cipher-print loop."""

    prime: bool = True      # one extra key press before the first letter
    block: int = 5          # output group size, 0 = no grouping
    trace: bool = False     # print every intermediate letter


# ────────────────────────────────────────────────────────────────────────
#  1. Text helpers
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str, alpha: str) -> str:
    """Upper-case and drop anything outside the alphabet."""
    return "".join(ch for ch in msg.upper() if ch in alpha)


def group(text: str, block: int) -> str:
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


# ────────────────────────────────────────────────────────────────────────
#  2. Session – one machine, one stream of key presses
# ────────────────────────────────────────────────────────────────────────


class TracePrinter:
    """Observer printing each keystroke's signal path as letters."""

    def __init__(self, alphabet: str, out: TextIO) -> None:
        self.alphabet = alphabet
        self.out = out

    def __call__(self, stage: str, signal: int) -> None:
        letter = self.alphabet[signal]
        if stage.startswith("rotor"):
            self.out.write(letter + " ")
        elif stage == "reflector":
            self.out.write("\n" + letter + "\n")
        elif stage == "etw-back":
            self.out.write("\n")


class Session:
    def __init__(self, machine: EnigmaMachine, cfg: Config) -> None:
        self.machine = machine
        self.cfg = cfg
        if cfg.prime:
            machine.keydown()

    def run(self, text: str) -> str:
        clean = preprocess_message(text, self.machine.alphabet)
        return self.machine.encipher(clean)

    def run_lines(self, lines: Iterable[str], out: TextIO) -> None:
        for line in lines:
            if not line.strip():
                continue
            out.write(group(self.run(line), self.cfg.block) + "\n")


# ────────────────────────────────────────────────────────────────────────
#  3. CLI
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encipher text on a three-rotor Enigma machine")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, lines are read from stdin.")
    p.add_argument("--config", metavar="FILE", type=Path, help="Load machine settings from JSON instead of the stock machine.")
    p.add_argument("--prime", choices=["on", "off"], default="on", help="Press one key before the first letter (stock behaviour). Default: on")
    p.add_argument("--block", type=int, default=5, help="Group output in blocks of N letters, 0 for none. Default: 5")
    p.add_argument("--trace", action="store_true", help="Print the signal path of every key press.")
    p.add_argument("--debug", metavar="PARTS", help="Comma separated debug components to log, or 'all'.")
    return p.parse_args(argv)


def make_machine(config: Path | None, **kw) -> EnigmaMachine:
    if config is None:
        return reference_machine(**kw)
    return build_machine(load_settings(config), **kw)


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    args = parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if args.debug:
        try:
            for mod in TRACED_MODULES:
                mod.debug.configure(args.debug)
            debug.configure(args.debug)
        except ValueError as e:
            raise SystemExit(f"❌  {e}")

    cfg = Config(prime=(args.prime == "on"), block=args.block, trace=args.trace)

    try:
        observer = None
        if cfg.trace:
            observer = TracePrinter(ALPHA26, stdout)
        machine = make_machine(args.config, observer=observer)
    except (EnigmaError, ValueError, OSError) as e:
        raise SystemExit(f"❌  Failed to load configuration: {e}")

    debug.log("encipher", "machine ready: %r", machine)
    session = Session(machine, cfg)

    # one-shot mode ------------------------------------------------------
    if args.message is not None:
        stdout.write(group(session.run(args.message), cfg.block) + "\n")
        return

    # stream mode --------------------------------------------------------
    session.run_lines(stdin, stdout)


if __name__ == "__main__":
    main()
