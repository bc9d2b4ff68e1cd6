from __future__ import annotations
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional
import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from .analyzer import SentenceAnalyzer
from .config import AnalyzerConfig
from .mecab import MecabFormatError, parse_mecab
from .pos_en import label_ja, pos_string, translate_pos
from .types import AnalysisResult, Morpheme
from .util import read_json, write_json


app = typer.Typer(add_completion=False)


def _load_morphemes(source: str, fmt: str) -> List[Morpheme]:
    if fmt not in ("mecab", "json"):
        raise typer.BadParameter("format must be 'mecab' or 'json'")
    if fmt == "mecab":
        raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
        return parse_mecab(raw)
    data = json.loads(sys.stdin.read()) if source == "-" else read_json(Path(source))
    # either a bare list or {"morphemes": [...]}
    if isinstance(data, dict):
        data = data.get("morphemes", [])
    try:
        return [Morpheme.from_dict(d) for d in data]
    except (AttributeError, TypeError):
        raise ValueError("JSON input must be a list of morpheme objects or {\"morphemes\": [...]}")


def _render(res: AnalysisResult, include_pos_en: bool) -> None:
    console = Console()
    targets = {e.from_index: e for e in res.edges}
    tbl = Table(title="morphemes / dependencies")
    tbl.add_column("#", justify="right")
    tbl.add_column("surface")
    tbl.add_column("pos")
    if include_pos_en:
        tbl.add_column("pos (en)")
    tbl.add_column("basic form")
    tbl.add_column("->", justify="right")
    tbl.add_column("label")
    for i, m in enumerate(res.morphemes):
        e = targets.get(i)
        row = [str(i), m.surface, pos_string(m)]
        if include_pos_en:
            row.append(translate_pos(pos_string(m)))
        row.append(m.basic_form)
        row.append(str(e.to_index) if e else "")
        row.append(f"{e.label} ({label_ja(e.label)})" if e else "")
        tbl.add_row(*row)
    console.print(tbl)

    roles = Table(title="5W1H")
    roles.add_column("category")
    roles.add_column("text")
    roles.add_column("indices")
    roles.add_column("confidence", justify="right")
    for c, elems in res.roles.items():
        for el in elems:
            roles.add_row(c, el.text, ",".join(str(i) for i in el.morpheme_indices), f"{el.confidence:.0%}")
    console.print(roles)


@app.command("analyze")
def analyze(
    source: str = typer.Argument("-", help="Input file, '-' for stdin"),
    fmt: str = typer.Option("mecab", "--format", help="Input format: mecab or json"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON document instead of tables"),
    out: Optional[Path] = typer.Option(None, help="Write the JSON document to this path"),
    who_min_confidence: float = typer.Option(AnalyzerConfig.who_min_confidence, help="Drop who elements at or below this confidence"),
    no_pos_en: bool = typer.Option(False, help="hide english POS renderings"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        morphs = _load_morphemes(source, fmt)
    except (MecabFormatError, OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        rprint(f"[red]ERROR[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    cfg = AnalyzerConfig(who_min_confidence=who_min_confidence, include_pos_en=not no_pos_en)
    res = SentenceAnalyzer(cfg=cfg).analyze(morphs)
    if out is not None:
        write_json(out, res.to_dict())
        rprint(f"[green]OK[/green] wrote analysis to: {out}")
    if as_json:
        typer.echo(json.dumps(res.to_dict(), ensure_ascii=False, indent=2))
    elif out is None:
        _render(res, cfg.include_pos_en)


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1"),
    port: int = typer.Option(8000),
) -> None:
    import uvicorn
    from .api import create_app
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    app()
