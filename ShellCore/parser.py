from dataclasses import dataclass, field
from typing import List

from ShellCore.errors import PipelineSyntaxError

PIPE = "|"


@dataclass
class Command:
    name: str
    args: List[str] = field(default_factory=list)

    def argv(self):
        return [self.name, *self.args]


def parse_command(line):
    """
    Parse a raw input line into pipeline stages.
    Returns: list of Command (empty for blank input)
    Raises: PipelineSyntaxError if any stage is empty
    """
    line = line.strip()
    if not line:
        return []

    commands = []
    for segment in line.split(PIPE):
        segment = segment.strip()
        parts = segment.split()
        if not parts:
            raise PipelineSyntaxError(segment)
        commands.append(Command(parts[0], parts[1:]))

    return commands
