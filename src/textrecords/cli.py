"""CLI for textrecords build|inspect commands."""

import logging
from pathlib import Path
from typing import Any

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from textrecords.config import BuildConfig, DataConfig
from textrecords.data.classification import ClassificationCorpus
from textrecords.data.tagging import TaggingCorpus
from textrecords.pipeline import BuildResult, ClassificationPipeline
from textrecords.registry import available_formats, get_format

app = typer.Typer()
console = Console()


def load_config(config_path: str) -> BuildConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        BuildConfig instance
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    return BuildConfig(**config_dict)


def resolve_config(
    dataset_dir: str | None,
    config_path: str | None,
    **data_overrides: Any,
) -> BuildConfig:
    """Merge a YAML config (if any) with command line overrides."""
    if config_path:
        config = load_config(config_path)
    elif dataset_dir:
        config = BuildConfig(dataset_dir=dataset_dir)
    else:
        raise typer.BadParameter("Provide DATASET_DIR or --config")

    overrides = {key: value for key, value in data_overrides.items() if value is not None}
    data = DataConfig(**{**config.data.model_dump(), **overrides})
    return BuildConfig(
        dataset_dir=dataset_dir or config.dataset_dir,
        format=config.format,
        data=data,
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def build(
    dataset_dir: str | None = typer.Argument(None, help="Directory with train/dev/test/class files."),
    config_path: str | None = typer.Option(None, "--config", "-c", help="YAML build config."),
    max_length: int | None = typer.Option(None, "--max-length", "-n", help="Fixed sequence length."),
    test_file: str | None = typer.Option(None, "--test-file", help="File name of the test split."),
    preview: int = typer.Option(0, "--preview", help="Show the first K training records."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Build fixed-width records from a classification corpus."""
    _configure_logging(verbose)
    try:
        config = resolve_config(dataset_dir, config_path, max_length=max_length, test_file=test_file)
        if config.format != "classification":
            raise ValueError(f"build only supports the classification format, got '{config.format}'")

        console.print(f"[bold]Dataset:[/bold] {config.dataset_dir}")
        console.print(f"[bold]Max length:[/bold] {config.data.max_length}")
        result = ClassificationPipeline(config.dataset_dir, config.data).run()
    except (OSError, ValueError, NotImplementedError) as e:
        console.print(f"[bold red]Build failed:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    _print_summary(result)
    if preview > 0:
        _print_preview(result, config.data, preview)


def _print_summary(result: BuildResult) -> None:
    console.print(f"train {len(result.train)} samples")
    console.print(f"dev {len(result.dev)} samples")
    console.print(f"test {len(result.test)} samples")
    console.print(f"vocab size: {len(result.vocabulary)}")


def _print_preview(result: BuildResult, data: DataConfig, count: int) -> None:
    console.print("[bold]Preview:[/bold]")
    for record in result.train[:count]:
        text = result.vocabulary.decode(record.word_ids, data.unk_token, data.pad_token)
        console.print(f"  label={record.label_id} ids={list(record.word_ids)}", markup=False)
        console.print(f"    {text}", markup=False)


@app.command()
def inspect(
    dataset_dir: str = typer.Argument(..., help="Directory with the split files."),
    corpus_format: str = typer.Option(
        "classification",
        "--format",
        "-f",
        help=f"Corpus format: {', '.join(available_formats())}.",
    ),
    test_file: str | None = typer.Option(None, "--test-file", help="File name of the test split."),
) -> None:
    """Parse every split of a corpus and report sample counts."""
    _configure_logging(False)
    try:
        adapter_class = get_format(corpus_format)
        data = DataConfig(test_file=test_file) if test_file else DataConfig()
        corpus = adapter_class(dataset_dir, data)
        splits = corpus.load_splits()
    except KeyError as e:
        console.print(f"[bold red]Unknown format:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    except (OSError, ValueError) as e:
        console.print(f"[bold red]Inspect failed:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    console.print(f"[bold]Format:[/bold] {corpus.name}")
    for split_name, samples in splits.items():
        console.print(f"  {split_name}: {len(samples)} samples")

    if isinstance(corpus, ClassificationCorpus) and corpus.class_path.exists():
        console.print(f"  classes: {len(corpus.read_classes())}")
    if isinstance(corpus, TaggingCorpus):
        console.print(f"  tags: {len(TaggingCorpus.tag_list(splits['train']))}")


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
