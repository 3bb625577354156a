import logging
import sys
from pathlib import Path
from typing import Any

import rich_click as click
import yaml
from ariadne.exceptions import GraphQLFileSyntaxError
from pydantic import ValidationError
from rich.traceback import install

from sdl_decompose import __version__, log
from sdl_decompose.config import load_options_config, merge_cli_flags
from sdl_decompose.decomposer import DecompositionError, decompose
from sdl_decompose.models import DecompositionOptions, OperationKind
from sdl_decompose.utils.schema_loader import load_sdl_from_paths, load_sdl_from_stream, resolve_graphql_files


class PathResolverOption(click.Option):
    def process_value(self, ctx: click.Context, value: Any) -> list[Path] | None:
        value = super().process_value(ctx, value)
        if not value:
            return None
        paths = set(value)
        return resolve_graphql_files(list(paths))


sdl_option = click.option(
    "--sdl",
    "-s",
    "sdl_paths",
    type=click.Path(exists=True, path_type=Path),
    cls=PathResolverOption,
    multiple=True,
    help="The GraphQL SDL file or directory containing SDL files. Can be specified multiple times. "
    "Reads from stdin if not provided.",
)


operation_option = click.option(
    "--operation",
    "-o",
    "operation_name",
    type=str,
    required=True,
    help="Name of the operation to decompose",
)


operation_kind_option = click.option(
    "--type",
    "-t",
    "operation_kind",
    type=click.Choice([kind.value for kind in OperationKind], case_sensitive=False),
    default=OperationKind.QUERY.value,
    help="Root type holding the operation",
    show_default=True,
)


optional_output_option = click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=False,
    help="Output file, prints to stdout if not provided",
)


config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file containing decomposition options",
)


def read_full_sdl(sdl_paths: list[Path] | None) -> str:
    if sdl_paths is None:
        return load_sdl_from_stream()
    if not sdl_paths:
        raise ValueError("No GraphQL files found in the given SDL paths")
    return load_sdl_from_paths(sdl_paths)


def load_options(
    config_path: Path | None, include_builtins: bool, exclude_comments: bool, include_deprecated: bool
) -> DecompositionOptions:
    try:
        options = load_options_config(config_path)
    except (OSError, yaml.YAMLError, TypeError, ValidationError) as e:
        log.error(f"Invalid options config: {e}")
        sys.exit(1)

    return merge_cli_flags(options, include_builtins, exclude_comments, include_deprecated)


@click.command(context_settings={"auto_envvar_prefix": "SDL_DECOMPOSE"})
@sdl_option
@operation_option
@operation_kind_option
@optional_output_option
@click.option("--include-builtins", is_flag=True, default=False, help="Include builtin scalar types in output")
@click.option(
    "--exclude-comments",
    is_flag=True,
    default=False,
    help="Remove comments and descriptions from output SDL",
)
@click.option("--include-deprecated", is_flag=True, default=False, help="Include deprecated fields in output")
@config_option
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(
    sdl_paths: list[Path] | None,
    operation_name: str,
    operation_kind: str,
    output: Path | None,
    include_builtins: bool,
    exclude_comments: bool,
    include_deprecated: bool,
    config_path: Path | None,
    log_level: str,
    log_file: Path | None,
) -> None:
    """Decompose GraphQL SDL by operation name to produce partial SDL."""
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)

    options = load_options(config_path, include_builtins, exclude_comments, include_deprecated)

    try:
        full_sdl = read_full_sdl(sdl_paths)
        result = decompose(full_sdl, operation_name, operation_kind, options)
    except GraphQLFileSyntaxError as e:
        log.error(f"Invalid SDL file: {e}")
        sys.exit(1)
    except DecompositionError as e:
        log.error(str(e))
        sys.exit(1)
    except OSError as e:
        log.error(f"File I/O error: {e}")
        sys.exit(1)
    except ValueError as e:
        log.error(str(e))
        sys.exit(1)

    if not result.operation_found:
        log.error(f"Operation '{operation_name}' not found in {operation_kind} type")
        sys.exit(1)

    if output:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            _ = output.write_text(result.sdl)
        except OSError as e:
            log.error(f"File I/O error: {e}")
            sys.exit(1)
        log.success(f"Decomposed SDL written to: {output}")
        log.print(f"Collected types: {', '.join(result.collected_type_names)}", markup=False)
        if not options.include_builtin_scalars:
            log.hint("Builtin scalars are not listed, use --include-builtins to list them")
    else:
        log.print(result.sdl, markup=False)


if __name__ == "__main__":
    cli()
