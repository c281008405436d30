"""
Converter rendering a compose file as YAML.
"""
import os

import yaml

from ..MODELS.compose_file import ComposeFile

class ComposeYamlConverter:
    """
    Renders a ComposeFile as docker-compose YAML, keeping field order and omitting absent fields.
    """
    def __init__(self, compose: ComposeFile):
        self.compose = compose

    def render(self) -> str:
        """
        :return: The YAML document.
        """
        return yaml.safe_dump(
            self.compose.to_dict(),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )

    def convert(self, output_path: str) -> str:
        """
        Writes the YAML document to a file.

        :param output_path: Destination file. Parent directories are created as needed.
        :return: The path written to.
        """
        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.render())
        return output_path
