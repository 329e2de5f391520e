#!filepath: speedrun_packager/cli.py
from pathlib import Path
from typing import Optional

import typer
from rich import print

from speedrun_packager import __version__, init_logging
from speedrun_packager.config.app_config import AppConfig
from speedrun_packager.packaging.assembler import SubmissionAssembler
from speedrun_packager.utils.path import PathManager

app = typer.Typer(help="Speedrun submission packager")

_state = {"config": None}


@app.callback()
def main(
        config: Optional[Path] = typer.Option(
            None, "--config", "-c", help="YAML 配置文件（默认 speedrun_packager/config/base.yml）"
        ),
):
    cfg = AppConfig.load(str(config) if config else None)
    PathManager.configure(cfg.paths)
    init_logging(
        cfg.log.dir or str(PathManager.log_dir()),
        level=cfg.log.level,
        rotation=cfg.log.rotation,
        retention=cfg.log.retention,
    )
    _state["config"] = cfg


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def package(instance: Path = typer.Argument(..., help="实例目录（包含 saves/ logs/ mods/）")):
    """
    打包提交文件：世界 + 最近日志 → Submission (<时间>)/
    """
    assembler = SubmissionAssembler(_state["config"])
    result = assembler.prepare_submission(instance)

    if result is None:
        print("[red]No submission package produced.[/red]")
        raise typer.Exit(code=1)

    print(f"[green]{result}[/green]")


@app.command()
def select(instance: Path = typer.Argument(..., help="实例目录")):
    """
    Dry run：显示将被打包的世界与日志，不写任何文件
    """
    assembler = SubmissionAssembler(_state["config"])
    plan = assembler.plan(instance)

    if plan is None:
        raise typer.Exit(code=1)

    mode = "seedqueue" if plan.companion_mode else "standard"
    print(f"[blue]mode: {mode}[/blue]")
    print("worlds:")
    for w in plan.worlds:
        print(f"  {w.name}")
    print("logs:")
    for p in plan.logs:
        print(f"  {p.name}")


if __name__ == "__main__":
    app()

# python -m speedrun_packager.cli package ~/MultiMC/instances/Ranked/.minecraft
