from __future__ import annotations

from os import walk
from os.path import join, relpath
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader


def escape_string(str: str) -> str:
    """
    Escape special characters in a string

    :param str: The string to escape
    :return: The escaped string
    """
    return str.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


class Renderer:
    """
    Render a Jinja template

    Sets up Jinja renderer and renders one or more templates
    using provided context.

    * `render_template` renders a single template
    * `render_tree` renders all templates starting from a predefined
      root folder (which must reside inside templates folder structure)

    Rendered template(s) are returned as strings. Nothing is written
    to disk.

    Usage:

    >>> from jarc.templates.render import Renderer
    >>> r = Renderer('path/to/templates')
    >>> output_string = r.render_template('template.html', {'key': 'value'})
    >>> output_tree = r.render_tree('tree/root', {'key': 'value'})
    """

    def __init__(self, template_dir: str):
        self.template_dir = template_dir
        self.jinja_env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=False,
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["escape_string"] = escape_string

    def render_template(self, template: str, context: Any) -> str:
        """
        Render a single template to a string using provided context

        :param template: Name of the template file, relative to `template_dir`.
        :param context: Context to render the template with.
        :return: The resulting string.
        """

        # Jinja2 always uses /, even on Windows
        template = template.replace("\\", "/")

        tpl_object = self.jinja_env.get_template(template)
        return tpl_object.render(context)

    def render_tree(self, root: str, context: Any) -> dict[str, str]:
        """
        Render a tree folder structure of templates using provided context

        :param root: Root of the tree (relative to `template_dir`).
        :param context: Context to render the templates with.
        :return: A flat dictionary with path => content structure.

        Root must be inside the template_dir (and must be specified relative
        to it), but need not be at the root of the template-dir. Templates
        that render to an empty string are skipped.

        Directories are implied by file paths, not represented by elements
        in the returned dictionary.
        """

        retval = {}

        full_root = join(self.template_dir, root)

        for path, subdirs, files in walk(full_root):
            for file in files:
                if file == ".DS_Store":
                    continue

                file_path = join(path, file)
                output_location = Path(file_path).relative_to(full_root).as_posix()
                tpl_location = relpath(file_path, self.template_dir)

                contents = self.render_template(tpl_location, context)
                if contents != "":
                    retval[output_location] = contents

        return retval
