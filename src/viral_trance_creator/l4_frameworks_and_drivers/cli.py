"""CLI entry point for viral-trance-creator."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click

from viral_trance_creator import __version__


def _build_container(config_path: str | None, output_dir: str | None):
    from viral_trance_creator.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: SDKs not loaded on --help
        DependencyContainer,
    )
    from viral_trance_creator.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )

    overrides: dict = {}
    if output_dir:
        overrides['cover'] = {'output_dir': output_dir}
    try:
        raw = DependencyContainer.config_loader().load_raw(config_path, overrides=overrides or None)
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw).with_env_secrets()
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    return DependencyContainer(config, infra=infra)


def _report_fallback(result) -> None:
    if result.fallback:
        click.echo(f'Warning: {result.error} (showing fallback)', err=True)


@click.group()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option('-v', '--verbose', is_flag=True, help='Log debug output to stderr.')
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Also write debug logs to this file.',
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_path, verbose, log_file):
    """viral-trance-creator -- AI prompt enhancement, viral analysis and cover art for trance tracks."""
    from viral_trance_creator.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_logging,
    )

    setup_logging(verbose=verbose, log_file=Path(log_file) if log_file else None)
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command()
@click.argument('prompt')
@click.option('-m', '--mood', default='euphoric', show_default=True, help='Target mood.')
@click.pass_context
def enhance(ctx, prompt, mood):
    """Enhance a music-generation PROMPT for virality."""
    container = _build_container(ctx.obj['config_path'], None)
    result = asyncio.run(container.text_client.enhance_prompt(prompt, mood=mood))
    _report_fallback(result)
    click.echo(result.value)


@cli.command()
@click.argument('title')
@click.argument('description')
@click.pass_context
def viral(ctx, title, description):
    """Analyze the viral potential of a track (JSON output)."""
    container = _build_container(ctx.obj['config_path'], None)
    result = asyncio.run(container.text_client.analyze_viral_potential(title, description))
    _report_fallback(result)
    click.echo(json.dumps(result.value.model_dump(by_alias=True), indent=2, ensure_ascii=False))


@cli.command()
@click.argument('content')
@click.pass_context
def spirit(ctx, content):
    """Enrich trance CONTENT with spiritual motifs."""
    container = _build_container(ctx.obj['config_path'], None)
    result = asyncio.run(container.text_client.enrich_spiritual_content(content))
    _report_fallback(result)
    click.echo(result.value)


@cli.command()
@click.argument('title')
@click.option('--track-id', default=0, type=int, help='Track id (for logs).')
@click.option('-a', '--artist', default=None, help='Artist name.')
@click.option('--bpm', default=None, type=float, help='Tempo in BPM.')
@click.option('--energy', default=None, type=click.FloatRange(0.0, 1.0), help='Energy 0-1.')
@click.option('--valence', default=None, type=click.FloatRange(0.0, 1.0), help='Valence 0-1.')
@click.option('--tag', 'tags', multiple=True, help='Track tag (repeatable).')
@click.option('-s', '--style', default='neon', show_default=True, help='Cover style id.')
@click.option(
    '-o',
    '--output-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory for generated covers.',
)
@click.pass_context
def cover(ctx, title, track_id, artist, bpm, energy, valence, tags, style, output_dir):
    """Generate cover art for a track titled TITLE."""
    from viral_trance_creator.l1_entities.errors import (  # noqa: PLC0415 -- deferred: not needed for --help
        CoverConfigurationError,
        CoverGenerationError,
    )
    from viral_trance_creator.l1_entities.track import (  # noqa: PLC0415 -- deferred: not needed for --help
        Artist,
        AudioFeatures,
        TrackDescriptor,
    )

    container = _build_container(ctx.obj['config_path'], output_dir)
    track = TrackDescriptor(
        id=track_id,
        title=title,
        artist=Artist(name=artist) if artist else None,
        audio_features=AudioFeatures(bpm=bpm, energy=energy, valence=valence),
        tags=list(tags),
    )
    try:
        path = asyncio.run(container.cover_client.generate_cover(track, style=style))
    except (CoverConfigurationError, CoverGenerationError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    click.echo(path)


@cli.command()
def styles():
    """List available cover styles (JSON output)."""
    from viral_trance_creator.l2_use_cases.utils.cover_prompt_builder import (  # noqa: PLC0415 -- deferred: not needed for --help
        get_cover_styles,
    )

    click.echo(json.dumps([s.model_dump() for s in get_cover_styles()], indent=2, ensure_ascii=False))


@cli.command()
@click.pass_context
def status(ctx):
    """Show which external APIs have credentials configured."""
    container = _build_container(ctx.obj['config_path'], None)
    text_ok = container.text_client.is_available()
    image_ok = container.cover_gateway.is_configured()
    click.echo(f'OpenRouter (text): {"available" if text_ok else "not configured"}')
    click.echo(f'Gemini (covers):   {"available" if image_ok else "not configured"}')
