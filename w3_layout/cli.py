import logging

import click

from w3_layout import run_demo
from w3_layout.config import Settings
from w3_layout.mapper import LayoutKind, VerticalAlign, layout_classes


@click.group()
def cli():
    pass


@click.command()
@click.option("--stylesheet-url", default=None, help="URL of the W3.CSS stylesheet.")
@click.option(
    "--css-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory to serve the stylesheet from.",
)
@click.option("--page-width", type=int, default=None, help="Page width in pixels.")
@click.option("--debug/--no-debug", "debug", default=True)
def demo(stylesheet_url, css_dir, page_width, debug):
    """
    Runs a Dash server showing every container kind.
    """
    settings = Settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    click.echo(click.style("Running layout demo", fg="green"))
    run_demo(
        stylesheet_url=stylesheet_url or settings.STYLESHEET_URL,
        css_dir=css_dir,
        page_width=page_width or settings.PAGE_WIDTH,
        debug=debug,
    )


@click.command()
@click.argument("kind", type=click.Choice([kind.value for kind in LayoutKind]))
@click.option("--padding", is_flag=True, default=False)
@click.option(
    "--vertical-align",
    type=click.Choice([align.value for align in VerticalAlign], case_sensitive=False),
    default=None,
)
@click.option("--column-size", default=None)
@click.option(
    "--literal", is_flag=True, default=False, help="Keep column sizes verbatim."
)
@click.option(
    "--strict", is_flag=True, default=False, help="Reject unknown column sizes."
)
def classes(kind, padding, vertical_align, column_size, literal, strict):
    """Prints the classes a container of type KIND gets.

    KIND is one of the layout kinds, e.g. "grid-container".
    """
    try:
        tokens = layout_classes(
            kind,
            padding=padding,
            vertical_align=vertical_align,
            column_size=column_size,
            column_size_mode="literal" if literal else "framework",
            strict=strict,
        )
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--column-size'")

    click.echo(" ".join(tokens))


cli.add_command(demo)
cli.add_command(classes)

if __name__ == "__main__":
    cli()
