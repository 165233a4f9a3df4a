"""Argument convention of vimwiki's ``custom_wiki2html`` hook.

vimwiki calls the converter with eleven positional arguments::

    force syntax extension output_dir input_file css_file
    template_path template_default template_ext root_path custom_args
"""

from __future__ import annotations

from pydantic import BaseModel

from wikimd.converter.models import WikiOptions
from wikimd.errors import InvalidArgumentsError

VIMWIKI_ARG_COUNT = 11


class VimwikiArgs(BaseModel):
    force: bool
    syntax: str
    extension: str
    output_dir: str
    input_file: str
    css_file: str
    template_file: str
    root_path: str

    def to_options(self) -> WikiOptions:
        return WikiOptions(
            extension=self.extension,
            output_dir=self.output_dir,
            input_file=self.input_file,
            template_file=self.template_file,
            root_path=self.root_path,
        )


def parse_vimwiki_args(args: list[str]) -> VimwikiArgs:
    """Validate and map vimwiki's positional arguments.

    Raises InvalidArgumentsError when the count is wrong or the wiki syntax
    is not markdown.
    """
    if len(args) != VIMWIKI_ARG_COUNT:
        raise InvalidArgumentsError(
            f"The amount of arguments from VimWiki do not match. "
            f"You provided {len(args)}, but {VIMWIKI_ARG_COUNT} are necessary"
        )
    (
        force,
        syntax,
        extension,
        output_dir,
        input_file,
        css_file,
        template_path,
        template_default,
        template_ext,
        root_path,
        custom_args,
    ) = args
    if syntax != "markdown":
        raise InvalidArgumentsError("The syntax has to be markdown")

    if root_path == "-" and custom_args == "-":
        root_path = "./"

    return VimwikiArgs(
        force=force == "1",
        syntax=syntax,
        extension=extension,
        output_dir=output_dir,
        input_file=input_file,
        css_file=css_file,
        template_file=f"{template_path}{template_default}{template_ext}",
        root_path=root_path,
    )
