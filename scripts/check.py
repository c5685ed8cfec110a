#!/usr/bin/env python3
"""Run typecheck and test gates for the windowing repo."""

from __future__ import annotations

import argparse
import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CheckStep:
    name: str
    command: tuple[str, ...]


def _pytest(
    *targets: str, cov: Sequence[str] = (), fail_under: int | None = None
) -> tuple[str, ...]:
    args = ["uv", "run", "pytest", *targets]
    if cov:
        args += [f"--cov={package}" for package in cov]
        args.append("--cov-report=term-missing")
    if fail_under is not None:
        args.append(f"--cov-fail-under={fail_under}")
    return tuple(args)


STEPS: tuple[CheckStep, ...] = (
    CheckStep("typecheck", ("uv", "run", "mypy")),
    CheckStep("windowing", _pytest("tests/windowing", cov=["windowing"], fail_under=90)),
    # The viewport math and scroll session carry the window invariants.
    CheckStep(
        "core",
        _pytest(
            "tests/windowing/unit/ui_runtime",
            "tests/windowing/unit/api",
            cov=["windowing.ui_runtime", "windowing.api"],
            fail_under=95,
        ),
    ),
    CheckStep("tools", _pytest("tests/tools")),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run repository quality checks.")
    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        choices=[step.name for step in STEPS],
        help="Skip a named step; repeatable.",
    )
    return parser


def run_steps(steps: Sequence[CheckStep], *, cwd: Path, env: dict[str, str]) -> int:
    for step in steps:
        print(f"Running {step.name}: {' '.join(step.command)}", flush=True)
        completed = subprocess.run(step.command, cwd=cwd, env=env, check=False)
        if completed.returncode != 0:
            print(f"{step.name} failed with exit code {completed.returncode}.", flush=True)
            return completed.returncode
    print("All selected checks passed.")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    env = os.environ.copy()
    env["PYTHONPATH"] = "."
    selected = [step for step in STEPS if step.name not in args.skip]
    return run_steps(selected, cwd=Path(__file__).resolve().parent.parent, env=env)


if __name__ == "__main__":
    raise SystemExit(main())
