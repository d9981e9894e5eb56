"""Development tasks for manifest-bump."""

from pathlib import Path

from invoke import Context, task
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Project paths
ROOT = Path(__file__).parent
SRC = ROOT / "src"
TESTS = ROOT / "tests"

console = Console()

ARTIFACT_PATTERNS = (
    "**/__pycache__",
    "**/.pytest_cache",
    "**/.mypy_cache",
    "**/.ruff_cache",
    "**/htmlcov",
    "**/*.egg-info",
    "dist",
    "build",
    ".coverage",
)


def _report(result, success: str, failure: str) -> bool:  # type: ignore[no-untyped-def]
    if result.ok:
        console.print(f"✅ [bold green]{success}[/]")
    else:
        console.print(f"❌ [bold red]{failure}[/]")
        console.print(result.stdout or result.stderr)
    return bool(result.ok)


@task
def clean(ctx: Context) -> None:
    """Remove caches and build artifacts."""
    removed = 0
    for pattern in ARTIFACT_PATTERNS:
        for path in ROOT.glob(pattern):
            ctx.run(f"rm -rf {path}", hide=True)
            removed += 1

    console.print(f"🧹 Removed {removed} items" if removed else "🧹 Nothing to clean")


@task
def format(ctx: Context) -> None:
    """Format code with ruff."""
    with console.status("[bold blue]Formatting with ruff...[/]"):
        result = ctx.run(f"uv run ruff format {SRC} {TESTS} tasks.py", hide=True, warn=True)
    _report(result, "Code formatted", "Formatting failed")


@task
def lint(ctx: Context, fix: bool = False) -> None:
    """Lint code with ruff (``--fix`` applies safe fixes)."""
    fix_flag = " --fix" if fix else ""
    with console.status("[bold blue]Linting with ruff...[/]"):
        result = ctx.run(f"uv run ruff check{fix_flag} {SRC} {TESTS} tasks.py", hide=True, warn=True)
    _report(result, "No linting issues found", "Linting issues found")


@task
def typecheck(ctx: Context) -> None:
    """Type check the package with mypy."""
    with console.status("[bold blue]Type checking with mypy...[/]"):
        result = ctx.run(f"uv run mypy {SRC}", hide=True, warn=True)
    _report(result, "Type checking passed", "Type checking failed")


@task
def test(ctx: Context, verbose: bool = False, coverage: bool = True) -> None:
    """Run the test suite in parallel."""
    cmd_parts = ["uv run pytest -n auto"]

    if verbose:
        cmd_parts.append("-v")

    if coverage:
        cmd_parts.extend(["--cov=manifest_bump", "--cov-report=term-missing"])

    cmd_parts.append(str(TESTS))

    result = ctx.run(" ".join(cmd_parts), warn=True)
    _report(result, "All tests passed", "Some tests failed")


@task
def quality(ctx: Context) -> None:
    """Run lint, typecheck and tests, then summarize."""
    console.print(Panel.fit("🚀 [bold]Quality checks[/]", border_style="blue"))

    table = Table(title="Results")
    table.add_column("Check", style="bold")
    table.add_column("Command")

    for name, command in (
        ("Lint", f"uv run ruff check {SRC} {TESTS}"),
        ("Type Check", f"uv run mypy {SRC}"),
        ("Test", f"uv run pytest -n auto {TESTS}"),
    ):
        result = ctx.run(command, hide=True, warn=True)
        table.add_row(name, "✅ pass" if result.ok else "❌ fail", style="green" if result.ok else "red")

    console.print(table)


@task
def install(ctx: Context) -> None:
    """Install the package with test and dev extras."""
    with console.status("[bold blue]Installing dependencies...[/]"):
        ctx.run("uv sync --extra test --extra dev", hide=True)
    console.print("✅ [bold green]Dependencies installed[/]")


@task
def build(ctx: Context) -> None:
    """Build sdist and wheel."""
    with console.status("[bold blue]Building package...[/]"):
        result = ctx.run("uv build", hide=True, warn=True)
    _report(result, "Package built", "Build failed")


@task
def bump(ctx: Context, part: str = "patch", file: str = "manifest.json", dry_run: bool = True) -> None:
    """Run manifest-bump against a manifest (dry run by default)."""
    cmd_parts = [f"uv run python -m manifest_bump {part} --file {file}"]

    if dry_run:
        cmd_parts.append("--dry-run")

    console.print(f"🔖 [bold blue]Running:[/] {' '.join(cmd_parts)}")
    ctx.run(" ".join(cmd_parts))


@task(default=True)
def help(ctx: Context) -> None:
    """Show available tasks."""
    ctx.run("inv --list")
