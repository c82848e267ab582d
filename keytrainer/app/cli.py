from __future__ import annotations

"""CLI for keytrainer using TrainerSession and the strategy registry."""

import argparse
from typing import Any, Callable, Dict

from ..config.config import load_config, validate_config
from ..drills.key_drill import KeyDrill
from ..stats.stats import format_summary, write_stats
from ..util.randomness import make_random_source, seed_if_needed
from .explain import enable as explain_enable
from .presets import ALPHABET_PRESETS, resolve_alphabet
from .session_manager import EmptyAlphabetError, TrainerSession
from .strategy_registry import get_strategy, list_strategies, make_strategy

QUIT_COMMANDS = {":q", ":quit", ":exit"}


def _build_ui() -> Dict[str, Callable[..., Any]]:
    def ask(prompt: str) -> str:
        return input(prompt)

    def inform(msg: str) -> None:
        print(msg)

    return {"ask": ask, "inform": inform}


def run_drill(drill: KeyDrill, num_prompts: int, ui: Dict[str, Callable[..., Any]], *, show_feedback: bool = True) -> int:
    """Present up to ``num_prompts`` symbols; return how many were completed.

    A prompt is completed when the expected key is typed. Quit commands or
    end of input stop the drill early.
    """
    ask = ui["ask"]
    inform = ui["inform"]

    completed = 0
    symbol = drill.current or drill.start()
    while completed < num_prompts:
        try:
            raw = ask(f"[{completed + 1}/{num_prompts}] Type '{symbol}': ")
        except EOFError:
            break
        if raw.strip().lower() in QUIT_COMMANDS:
            break
        fb = drill.handle_key(raw)
        if fb.kind == "correct":
            completed += 1
            if show_feedback:
                inform("Correct")
            symbol = fb.next_symbol or symbol
        elif fb.kind == "error":
            if show_feedback:
                inform(f"Error: typed '{fb.key}', expected '{fb.expected}'")
        elif show_feedback:
            inform(f"Ignored '{fb.key}' (not in alphabet)")
    return completed


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="keytrainer")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list-strategies")
    sub.add_parser("list-presets")

    rp = sub.add_parser("run")
    rp.add_argument("--config", default=None, help="Path to YAML config")
    rp.add_argument("--alphabet", default=None, help="Preset name or literal characters")
    rp.add_argument("--prompts", type=int, default=None)
    rp.add_argument("--strategy", default=None)
    rp.add_argument("--floor", type=float, default=None, help="Weight added to every error rate")
    rp.add_argument("--seed", type=int, default=None)
    rp.add_argument("--stats-out", dest="stats_out", default=None, help="Write JSON summary to this path")
    rp.add_argument("--explain", action="store_true")

    args = p.parse_args(argv)

    if args.cmd == "list-strategies":
        for m in list_strategies():
            print(f"{m.id}: {m.name} - {m.description}")
        return 0

    if args.cmd == "list-presets":
        for name, chars in ALPHABET_PRESETS.items():
            print(f"{name}: {chars}")
        return 0

    if args.cmd == "run":
        seed_if_needed()
        if args.explain:
            explain_enable(True)
        cfg: Dict[str, Any] = load_config(args.config)
        if args.alphabet is not None:
            cfg.setdefault("session", {})["alphabet"] = args.alphabet
        if args.prompts is not None:
            cfg.setdefault("session", {})["prompts"] = args.prompts
        if args.strategy is not None:
            try:
                get_strategy(args.strategy)
            except KeyError as e:
                print(f"ERROR: {e.args[0]}")
                return 2
            cfg.setdefault("selection", {})["strategy"] = args.strategy
        if args.floor is not None:
            cfg.setdefault("selection", {})["floor"] = args.floor
        cfg = validate_config(cfg)

        session_cfg = cfg["session"]
        selection_cfg = cfg["selection"]
        stats_cfg = cfg["stats"]

        strategy = make_strategy(
            selection_cfg["strategy"],
            random_source=make_random_source(args.seed),
            floor=selection_cfg["floor"],
        )
        try:
            session = TrainerSession(resolve_alphabet(session_cfg["alphabet"]), strategy)
        except EmptyAlphabetError as e:
            print(f"ERROR: {e}")
            return 2
        drill = KeyDrill(session, case_sensitive=session_cfg["case_sensitive"])

        print(f"Starting keytrainer session over '{session.alphabet}' ({selection_cfg['strategy']}). Type :q to stop.")
        run_drill(drill, session_cfg["prompts"], _build_ui(), show_feedback=stats_cfg["show_per_prompt_feedback"])

        if stats_cfg["show_summary"]:
            print("\nSession Summary:")
            print(format_summary(session, stats_cfg["top_n"]))

        out_path = args.stats_out or (stats_cfg["output_path"] if stats_cfg["write_on_exit"] else None)
        if out_path:
            write_stats(session.summary(stats_cfg["top_n"]), out_path)
            print(f"Stats written to {out_path}")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
