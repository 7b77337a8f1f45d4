#!/usr/bin/env python3
"""
Sprite Slicer - Command Line Interface

Splits sprite sheets into individual sprite images.

If slice dimensions are given, the sheet is cut into a regular grid, either
by tile size in pixels ("32px 32px") or by row and column count ("4 8").
Otherwise sprites are detected automatically from the alpha channel: every
blob of non-transparent pixels becomes one sprite.
"""

import logging
import sys
from pathlib import Path

import click

from spriteslicer.batch import find_images, process_batch
from spriteslicer.grid_slicing import parse_slice_spec


@click.command(context_settings=dict(show_default=True))
@click.argument('input_path', type=click.Path(exists=True))
@click.argument('dimensions', nargs=-1)
@click.option('--output-dir', '-o', type=click.Path(file_okay=False),
              help='Parent directory for the per-image sprite folders [default: next to each image]')
@click.option('--extension', '-e', default='png', help='File format of the saved sprites')
@click.option('--debug', '-d', is_flag=True,
              help="Save intermediate detection images to the 'debug' directory")
@click.option('--verbose', '-v', is_flag=True, help='Print diagnostic messages')
def main(input_path: str, dimensions: tuple[str, ...], output_dir: str | None, extension: str,
         debug: bool, verbose: bool) -> None:
    """Split sprite sheets into individual sprites.

    INPUT_PATH is an image file, or a directory whose images are all processed.

    DIMENSIONS are optional. Give WIDTHpx HEIGHTpx to cut tiles of a fixed
    pixel size, or ROWS COLS to cut the sheet into a grid. Without them,
    sprites are detected from the alpha channel.

    The sprites of each image are saved as sprite_<n>.<ext> in a folder named
    after the image.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    spec = None
    if dimensions:
        if len(dimensions) != 2:
            raise click.UsageError("Give two dimensions: WIDTHpx HEIGHTpx or ROWS COLS")
        try:
            spec = parse_slice_spec(*dimensions)
        except ValueError as e:
            raise click.UsageError(str(e))

    images = find_images(input_path)
    if not images:
        click.echo(f"No images found in {input_path}")
        return
    if Path(input_path).is_dir():
        click.echo(f"Found {len(images)} image(s) in {input_path}")

    debug_dir = None
    if debug:
        debug_dir = Path("debug")
        debug_dir.mkdir(exist_ok=True)
        click.echo("Debug mode enabled, saving intermediate images to 'debug' directory")

    failures = 0
    total = 0
    for report in process_batch(
        images,
        spec,
        output_root=Path(output_dir) if output_dir else None,
        extension=extension,
        debug_dir=debug_dir
    ):
        if not report.success:
            failures += 1
            click.echo(f"Failed to process {report.path}: {report.reason}", err=True)
            continue

        total += report.count
        method = f"grid of {spec.describe()}" if spec else "auto detection"
        click.echo(f"Processed {report.path} with {method}: "
                   f"{report.count} sprite(s) saved in {report.output_dir}")
        if report.common_size:
            click.echo(f"  Suggested common sprite size: {report.common_size[0]}x{report.common_size[1]}")

    click.echo(f"Done: {total} sprite(s) from {len(images) - failures} of {len(images)} image(s)")
    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
