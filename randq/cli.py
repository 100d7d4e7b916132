from pathlib import Path
from typing import Iterator, Optional, TextIO

import click

from .config import Config
from .errors import RandqError
from .sampling import reservoir_sample


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """Yields whitespace-delimited tokens lazily, line by line
    """
    for line in stream:
        yield from line.split()


@click.group()
@click.option("--seed", type=int, default=None, help="Random seed for reproducible output")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs on stderr")
@click.option(
    "--logfile",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write run statistics to this file as JSON lines",
)
@click.pass_context
def randq_cli(
    ctx: click.Context, seed: Optional[int], verbose: bool, logfile: Optional[str]
) -> None:
    config = Config()
    config.seed = seed
    config.set_verbose(verbose)
    if logfile is not None:
        config.logfile = Path(logfile)
    ctx.obj = config
    ctx.call_on_close(config.logger.close)


@randq_cli.command(help="Print K tokens of the input chosen uniformly at random")
@click.argument("k", type=int)
@click.option(
    "--input",
    "input_",
    type=click.File("r"),
    default="-",
    help="File to read tokens from (default: stdin)",
)
@click.pass_obj
def permutation(config: Config, k: int, input_: TextIO) -> None:
    if k < 0:
        raise click.BadParameter("K must be non-negative", param_hint="K")
    config.sample_size = k
    logger = config.setup_logger()
    try:
        sample = reservoir_sample(
            iter_tokens(input_), config.sample_size, rng=config.rng(), logger=logger
        )
    except RandqError as e:
        raise click.UsageError(str(e))
    for token in sample:
        click.echo(token)


def run_cli() -> None:
    randq_cli(prog_name="randq")
