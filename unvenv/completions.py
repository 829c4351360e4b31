"""Shell completion scripts, generated by click."""

from __future__ import annotations

import click
from click.shell_completion import get_completion_class

SHELLS = ("bash", "zsh", "fish")

_INSTRUCTIONS = {
    "bash": ("# For bash (~/.bashrc):", "#   source <({prog} completions bash)"),
    "zsh": (
        "# For zsh (~/.zshrc):",
        "#   {prog} completions zsh > ~/.zsh/completions/_{prog}",
        "#   # Ensure fpath includes ~/.zsh/completions",
    ),
    "fish": ("# For fish (~/.config/fish/config.fish):", "#   {prog} completions fish | source"),
}


def completion_script(cli: click.Command, shell: str, prog_name: str) -> str:
    """Return enabling instructions followed by the completion source for *shell*."""
    comp_cls = get_completion_class(shell)
    if comp_cls is None:
        raise click.BadParameter(f"unsupported shell: {shell}")

    complete_var = f"_{prog_name.replace('-', '_').upper()}_COMPLETE"
    source = comp_cls(cli, {}, prog_name, complete_var).source()

    header = [
        f"# Shell completion for {prog_name}",
        "#",
        "# To enable completions, add this to your shell config:",
        "#",
    ]
    header.extend(line.format(prog=prog_name) for line in _INSTRUCTIONS[shell])
    return "\n".join(header) + "\n\n" + source
