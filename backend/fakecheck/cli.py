import json
import typer
from typing import Optional
from rich import print_json
from rich.console import Console
from .analyzer import ProfileAnalyzer
from .config import settings
from .errors import AnalysisError
from .logging_config import init_logging
from .platforms import detect_platform


app = typer.Typer(add_completion=False, help="Estimate whether a social media profile is fake...")
err = Console(stderr=True)


@app.callback()
def main(log_level: str = typer.Option("WARNING", help="root log level")):
    init_logging(log_level)


@app.command()
def analyze(
    url: str,
    out: Optional[str] = None,
    headless: Optional[bool] = typer.Option(None, "--headless/--no-headless"),
):
    """Analyze a Facebook, Instagram or Twitter/X profile URL... print json."""
    cfg = settings.model_copy(update={"headless": headless}) if headless is not None else settings
    try:
        platform = detect_platform(url)
        result = ProfileAnalyzer(cfg).analyze(url, platform)
    except AnalysisError as e:
        err.print(f"[red]{e.category}[/red]: {e}")
        raise typer.Exit(code=1)
    text = json.dumps(result.model_dump(by_alias=True), ensure_ascii=False, indent=2)
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text)
    print_json(text)


if __name__ == "__main__":
    app()
