# settings_generator.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from permutation import ALPHA26
from settings import MAX_PAIRS, ROTOR_COUNT, MachineSettings, save_settings
from wheels import REFLECTORS, ROTORS

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = min(k, len(alpha) // 2)
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate(rng: Random | SystemRandom, pairs: int = MAX_PAIRS) -> MachineSettings:
    alpha = ALPHA26
    return MachineSettings(
        rotors=rng.sample(sorted(ROTORS), ROTOR_COUNT),
        reflector=rng.choice(sorted(REFLECTORS)),
        ring_set=[rng.randint(1, len(alpha)) for _ in range(ROTOR_COUNT)],
        plugs=choose_pairs(alpha, pairs, rng),
        start="".join(rng.choices(alpha, k=ROTOR_COUNT)),
    )


def parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate Enigma daily settings")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--pairs", type=int, default=MAX_PAIRS, help=f"Plug pairs, 0–{MAX_PAIRS} (default {MAX_PAIRS})")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_settings.json"),
        help="Destination JSON file (default: enigma_settings.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    args = parse_cli(argv)
    if not 0 <= args.pairs <= MAX_PAIRS:
        sys.exit(f"❌  --pairs must be in 0–{MAX_PAIRS}")

    cfg = generate(build_rng(args.seed), args.pairs)
    save_settings(cfg, args.outfile)
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {cfg.rotors}\n"
        f"   reflector   : {cfg.reflector}\n"
        f"   rings       : {cfg.ring_set}\n"
        f"   start       : {cfg.start}\n"
        f"   plug pairs  : {len(cfg.plugs)}")


if __name__ == "__main__":
    main()
