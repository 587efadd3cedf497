#!filepath: eventsearch/cli.py
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import typer
import yaml
from rich import print
from rich.markup import escape

from eventsearch import __version__, logs, init_logging
from eventsearch.config import AppConfig
from eventsearch.observability.instrumentation import Instrumentation
from eventsearch.team import evaluate_teams, with_n_teams
from eventsearch.utils.errors import EventSearchError, UserInputError

app = typer.Typer(help="eventsearch: exhaustive replay-based search CLI")


def load_roster(path: Path) -> Tuple[List[str], Callable[[str, str], bool]]:
    """
    Roster 文件格式（YAML）:

        members: [A, B, C]
        enemies:
          - [A, B]

    敌对关系是对称的。
    """
    if not path.exists():
        raise UserInputError(f"roster file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    members = [str(m) for m in raw.get("members") or []]
    if len(set(members)) != len(members):
        raise UserInputError("roster members must be unique")

    known = set(members)
    enemies = set()
    for pair in raw.get("enemies") or []:
        if not isinstance(pair, list) or len(pair) != 2:
            raise UserInputError(f"enemy entry must be a pair, got {pair!r}")
        a, b = str(pair[0]), str(pair[1])
        if a not in known or b not in known:
            raise UserInputError(f"enemy pair {a!r}/{b!r} names an unknown member")
        enemies.add(frozenset((a, b)))

    def are_enemies(m1: str, m2: str) -> bool:
        return frozenset((m1, m2)) in enemies

    return members, are_enemies


@app.command()
def version():
    print(f"v{__version__}")


@logs.catch(msg="team evaluation failed", log_time=False, quiet=(UserInputError, EventSearchError, ValueError))
def _evaluate(roster: Path, n_teams: Optional[int], strict: bool, inst: Instrumentation):
    members, are_enemies = load_roster(roster)
    filters = [with_n_teams(n_teams)] if n_teams is not None else []
    return members, evaluate_teams(members, are_enemies, *filters, strict=strict, inst=inst)


@app.command()
def teams(
    roster: Path = typer.Argument(..., help="YAML roster file"),
    n_teams: Optional[int] = typer.Option(None, "--n-teams", "-n", help="keep leagues with exactly N teams"),
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="fail on enemy-check errors"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    timeline: bool = typer.Option(False, "--timeline", help="log search timeline"),
):
    """
    枚举 roster 的所有合法分队方案
    """
    try:
        cfg = AppConfig.load(str(config) if config else None)
    except (FileNotFoundError, ValueError) as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    if timeline:
        cfg.log.level = "INFO"
    init_logging(cfg.log)

    if n_teams is None:
        n_teams = cfg.team.n_teams
    if strict is None:
        strict = cfg.team.strict

    inst = Instrumentation(
        enabled=cfg.search.instrument or timeline,
        progress_every=cfg.search.progress_every,
    )

    try:
        members, leagues = _evaluate(roster, n_teams, strict, inst)
    except (UserInputError, EventSearchError, ValueError) as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    print(f"[green]{len(leagues)} league(s) for {len(members)} member(s)[/green]")
    for i, league in enumerate(leagues, start=1):
        rendered = "  ".join("{" + ", ".join(map(str, team)) + "}" for team in league)
        print(f"{i:>4}. {escape(rendered)}")

    if timeline:
        inst.generate_timeline_report(roster.name)


if __name__ == "__main__":
    app()

# python -m eventsearch.cli teams roster.yml --n-teams 2
