import io
from typing import Any

from ruamel.yaml import YAML

def get_yaml_instance() -> YAML:
    yaml = YAML(typ="rt")
    # versions and hashes load as plain str so loaded records compare equal to built ones
    yaml.preserve_quotes = False
    yaml.default_flow_style = False
    yaml.width = 4096
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def dump_to_string(data: Any) -> str:
    stream = io.StringIO()
    get_yaml_instance().dump(data, stream)
    return stream.getvalue()
