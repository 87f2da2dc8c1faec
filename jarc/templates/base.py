from os.path import dirname, join

from jarc.disk.vfs import LocalDiskVFS
from jarc.log import get_logger
from jarc.templates.render import Renderer

log = get_logger(__name__)


class BaseWebTemplate:
    """
    Base web asset template, providing a common interface for all templates.

    A template renders a tree of Jinja files (under `tree/<path>`) into the
    web asset directory of a project, and a short summary (`info/<path>/summary.tpl`)
    describing what was created.
    """

    name: str
    path: str
    description: str

    def __init__(self):
        self.file_renderer = Renderer(join(dirname(__file__), "tree"))
        self.info_renderer = Renderer(join(dirname(__file__), "info"))

    def apply(self, file_system: LocalDiskVFS, project_name: str) -> str:
        """
        Render the template and save the files.

        :param file_system: File system to save the files to (rooted at the web asset directory).
        :param project_name: Name of the project, used in page titles and headings.
        :return: A summary of the applied template.
        """
        log.info(f"Applying web template {self.name} for {project_name}")

        files = self.file_renderer.render_tree(self.path, {"project_name": project_name})

        for file_name, file_content in files.items():
            file_system.save(file_name, file_content)

        return self.info_renderer.render_template(
            join(self.path, "summary.tpl"),
            {
                "description": self.description,
                "files": sorted(files.keys()),
            },
        )
